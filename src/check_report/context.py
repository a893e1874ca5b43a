"""Context excerpts shown underneath each reported match.

The excerpt is a slice of the analysed text around the flagged span, followed
by a marker line that underlines the span with ``^`` characters:

    Teh cat sat.
    ^^^

Line breaks and tabs inside the excerpt are replaced by a single space each,
so every character in the excerpt lines up with the marker line beneath it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

LOGGER = logging.getLogger(__name__)

MARKER_CHAR = "^"

_WHITESPACE_ESCAPES = str.maketrans({"\r": " ", "\n": " ", "\t": " "})


@dataclass(frozen=True)
class ContextExcerpt:
    """A slice of text plus the position of the flagged span inside it."""

    text: str
    offset: int
    length: int

    def marker_line(self, marker: str = MARKER_CHAR) -> str:
        return " " * self.offset + marker * max(self.length, 1)

    def render(self, marker: str = MARKER_CHAR) -> str:
        return f"{self.text}\n{self.marker_line(marker)}"


def clamp_span(from_pos: int, to_pos: int, text_length: int) -> tuple[int, int]:
    """Return ``(start, end)`` inside ``[0, text_length]`` with ``start <= end``."""

    start, end = (from_pos, to_pos) if from_pos <= to_pos else (to_pos, from_pos)
    start = max(0, min(text_length, start))
    end = max(start, min(text_length, end))
    if (start, end) != (from_pos, to_pos):
        LOGGER.warning(
            "Match range %d-%d adjusted to %d-%d for text of length %d",
            from_pos,
            to_pos,
            start,
            end,
            text_length,
        )
    return start, end


def extract_context(
    from_pos: int, to_pos: int, text: str, context_size: int
) -> ContextExcerpt:
    start, end = clamp_span(from_pos, to_pos, len(text))
    context_size = max(0, context_size)
    excerpt_start = max(0, start - context_size)
    excerpt_end = min(len(text), end + context_size)
    excerpt = text[excerpt_start:excerpt_end].translate(_WHITESPACE_ESCAPES)
    return ContextExcerpt(text=excerpt, offset=start - excerpt_start, length=end - start)


def get_context(from_pos: int, to_pos: int, text: str, context_size: int) -> str:
    """Return the excerpt and its marker line as a two-line string."""
    return extract_context(from_pos, to_pos, text, context_size).render()

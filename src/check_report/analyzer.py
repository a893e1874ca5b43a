"""Adapters between text-analysis engines and the report renderer.

The renderer only needs two things from an engine: ``check(text)`` returning
``RuleMatch`` objects in detection order, and ``sentence_count`` for the most
recent check. ``LanguageToolAnalyzer`` provides both on top of a
``language_tool_python.LanguageTool`` instance.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol, runtime_checkable

from src.models import RuleMatch

LOGGER = logging.getLogger(__name__)

# A sentence is a run of text up to terminal punctuation (or the end of text).
_SENTENCE_PATTERN = re.compile(r"[^.!?\s][^.!?]*(?:[.!?]+|$)")


@runtime_checkable
class Analyzer(Protocol):
    """Anything that can check text and report how many sentences it saw."""

    sentence_count: int

    def check(self, text: str) -> list[RuleMatch]:
        ...


def count_sentences(text: str) -> int:
    """Return a rough sentence count for ``text``."""
    return len(_SENTENCE_PATTERN.findall(text))


def _line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 0-based line and 1-based column for ``offset``."""
    offset = max(0, min(len(text), offset))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _sub_id(match: object) -> Any:
    sub_id = getattr(match, "subId", None)
    if sub_id is None:
        rule = getattr(match, "rule", None)
        if isinstance(rule, dict):
            sub_id = rule.get("subId")
    return sub_id


def to_rule_match(match: object, text: str) -> RuleMatch:
    """Convert a LanguageTool match into a ``RuleMatch``.

    ``offset`` and ``errorLength`` locate the span in ``text``; the line and
    column are derived from the offset. The sub-identifier of grouped
    pattern rules is read from a ``subId`` attribute or from the raw
    ``rule`` mapping of the server response. ``language_tool_python.Match``
    keeps neither, so its matches always convert with ``sub_id=None``.
    """

    rule_id = getattr(match, "ruleId", "UNKNOWN") or "UNKNOWN"
    offset = _as_int(getattr(match, "offset", 0))
    error_length = _as_int(getattr(match, "errorLength", 0))
    if offset < 0 or error_length < 0:
        LOGGER.warning(
            "Invalid span for rule %s (offset=%d, length=%d)",
            rule_id,
            offset,
            error_length,
        )
    line, column = _line_and_column(text, offset)
    return RuleMatch(
        line=line,
        column=column,
        from_pos=offset,
        to_pos=offset + error_length,
        rule_id=rule_id,
        sub_id=_sub_id(match),
        message=getattr(match, "message", ""),
        suggested_replacements=list(getattr(match, "replacements", []) or []),
    )


class LanguageToolAnalyzer:
    """Run a LanguageTool instance and expose its results as ``RuleMatch``."""

    def __init__(self, tool: Any) -> None:
        self.tool = tool
        self.sentence_count = 0

    def check(self, text: str) -> list[RuleMatch]:
        matches = self.tool.check(text) or []
        self.sentence_count = count_sentences(text)
        LOGGER.debug(
            "LanguageTool returned %d match(es) for %d sentence(s)",
            len(matches),
            self.sentence_count,
        )
        return [to_rule_match(match, text) for match in matches]

    def close(self) -> None:
        if hasattr(self.tool, "close"):
            self.tool.close()

"""XML output for check results.

The document has one ``<error>`` element per match, in detection order:

    <?xml version="1.0" encoding="UTF-8"?>
    <matches>
      <error fromy="0" fromx="0" toy="0" tox="3" ruleId="TYPO1" msg="..."
             replacements="The" context="Teh cat sat." contextoffset="0"
             errorlength="3" />
    </matches>

``fromy``/``fromx`` and ``toy``/``tox`` are 0-based line/column pairs and
``replacements`` joins the suggestions with ``#``. ``context``,
``contextoffset`` and ``errorlength`` carry the same excerpt as the
plain-text report so consumers can rebuild it. ``errorlength="0"`` marks an
insertion point; the plain-text marker line draws a single ``^`` there.

XML 1.0 forbids most control characters (form feeds from PDF text, NUL,
vertical tabs), so each one is replaced by a space in attribute values. The
replacement keeps ``contextoffset`` aligned with the excerpt.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable

from src.models import RuleMatch

from .context import clamp_span, extract_context

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
REPLACEMENT_SEPARATOR = "#"

_XML_ILLEGAL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _xml_safe(value: str) -> str:
    return _XML_ILLEGAL_CHARS.sub(" ", value)


def clean_message(message: str) -> str:
    """Replace inline suggestion markup with plain apostrophes."""
    return message.replace("<suggestion>", "'").replace("</suggestion>", "'")


def _line_and_column(text: str, position: int) -> tuple[int, int]:
    """Return the 0-based line and column of ``position`` in ``text``."""
    line = text.count("\n", 0, position)
    line_start = text.rfind("\n", 0, position) + 1
    return line, position - line_start


def _error_element(parent: ET.Element, match: RuleMatch, text: str, context_size: int) -> None:
    _, end = clamp_span(match.from_pos, match.to_pos, len(text))
    to_line, to_column = _line_and_column(text, end)
    excerpt = extract_context(match.from_pos, match.to_pos, text, context_size)

    attributes = {
        "fromy": str(match.line),
        "fromx": str(match.column - 1),
        "toy": str(to_line),
        "tox": str(to_column),
        "ruleId": match.rule_id,
    }
    if match.sub_id is not None:
        attributes["subId"] = match.sub_id
    attributes.update(
        {
            "msg": clean_message(match.message),
            "replacements": REPLACEMENT_SEPARATOR.join(match.suggested_replacements),
            "context": excerpt.text,
            "contextoffset": str(excerpt.offset),
            "errorlength": str(excerpt.length),
        }
    )
    ET.SubElement(
        parent, "error", {name: _xml_safe(value) for name, value in attributes.items()}
    )


def rule_matches_to_xml(matches: Iterable[RuleMatch], text: str, context_size: int) -> str:
    """Serialise ``matches`` into a complete XML document ending in a newline."""

    root = ET.Element("matches")
    for match in matches:
        _error_element(root, match, text, context_size)
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f"{XML_DECLARATION}\n{body}\n"

"""Models for the matches produced by a text-analysis engine.

A ``RuleMatch`` is one flagged span of text. Matches come from an external
engine, so offsets are stored exactly as received: consumers that slice the
analysed text must clamp them first (see ``src.check_report.context``).
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RuleMatch(BaseModel):
    """A single rule violation found in the analysed text.

    - line: 0-based line number of the match start
    - column: 1-based column of the match start
    - from_pos / to_pos: character offsets into the analysed text
    - rule_id: identifier of the rule that fired
    - sub_id: optional sub-identifier (pattern rules within a rule family)
    - message: message text, may contain ``<suggestion>`` markup
    - suggested_replacements: ordered replacement candidates
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    line: int = 0
    column: int = 1
    from_pos: int
    to_pos: int
    rule_id: str
    sub_id: str | None = None
    message: str = ""
    suggested_replacements: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("rule_id", mode="before")
    def _strip_rule(cls, value: object) -> str:
        result = str(value or "").strip()
        if not result:
            raise ValueError("rule_id must not be empty")
        return result

    @field_validator("sub_id", mode="before")
    def _normalise_sub_id(cls, value: object) -> str | None:
        if value is None:
            return None
        return str(value).strip() or None

    @field_validator("message", mode="before")
    def _coerce_message(cls, value: object) -> str:
        return "" if value is None else str(value)

    @field_validator("suggested_replacements", mode="before")
    def _normalise_replacements(cls, value: object) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            # allow a single suggestion as a bare string
            return (value,)
        return tuple(str(x) for x in value)


class AnalysisResult(BaseModel):
    """Matches in detection order plus the number of sentences analysed."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    matches: Tuple[RuleMatch, ...] = Field(default_factory=tuple)
    sentence_count: int = Field(default=0, ge=0)

    @field_validator("matches", mode="before")
    def _coerce_matches(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, list):
            return tuple(value)
        return value

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def rule_ids(self) -> List[str]:
        return [match.rule_id for match in self.matches]

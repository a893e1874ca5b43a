"""Render check results as a plain-text or XML report.

``check_text`` runs an analyzer over a text, times the run and returns the
composed report together with the number of matches. ``render_report`` is
the pure formatting step and can be used on results obtained elsewhere.

Plain-text reports list one numbered block per match, separated by blank
lines, and always finish with a single timing line::

    1.) Line 1, column 1, Rule ID: TYPO1
    Message: Did you mean 'The'?
    Suggestion: The
    Teh cat sat.
    ^^^
    Time: 12ms for 1 sentences (83.3 sentences/sec)

In XML mode the timing line is wrapped in an XML comment so the output stays
valid when embedded in a larger document.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from src.models import AnalysisResult, ReportConfig, RuleMatch

from .analyzer import Analyzer
from .context import get_context
from .xml_report import clean_message, rule_matches_to_xml

LOGGER = logging.getLogger(__name__)

SUGGESTION_SEPARATOR = "; "

# Lower bound on the elapsed time used for the sentences-per-second rate.
MIN_ELAPSED_MS_FOR_RATE = 1


@dataclass(frozen=True)
class CheckReport:
    """The rendered report plus the figures it was built from."""

    report: str
    match_count: int
    elapsed_ms: int
    sentence_count: int

    @property
    def sentences_per_second(self) -> float:
        return sentences_per_second(self.sentence_count, self.elapsed_ms)


def sentences_per_second(sentence_count: int, elapsed_ms: int) -> float:
    elapsed_seconds = max(elapsed_ms, MIN_ELAPSED_MS_FOR_RATE) / 1000.0
    return sentence_count / elapsed_seconds


def format_timing(elapsed_ms: int, sentence_count: int) -> str:
    rate = sentences_per_second(sentence_count, elapsed_ms)
    return f"Time: {elapsed_ms}ms for {sentence_count} sentences ({rate:.1f} sentences/sec)"


def format_match_header(index: int, match: RuleMatch) -> str:
    header = f"{index}.) Line {match.line + 1}, column {match.column}, Rule ID: {match.rule_id}"
    if match.sub_id is not None:
        header += f"[{match.sub_id}]"
    return header


def format_match(index: int, match: RuleMatch, text: str, context_size: int) -> list[str]:
    """Return the lines of one numbered match block (without separators)."""

    lines = [
        format_match_header(index, match),
        f"Message: {clean_message(match.message)}",
    ]
    if match.suggested_replacements:
        lines.append(f"Suggestion: {SUGGESTION_SEPARATOR.join(match.suggested_replacements)}")
    lines.append(get_context(match.from_pos, match.to_pos, text, context_size))
    return lines


def render_matches(text: str, result: AnalysisResult, config: ReportConfig) -> str:
    """Render the match section of a report (everything before the timing)."""

    if config.api_format:
        return rule_matches_to_xml(result.matches, text, config.context_size)

    lines: list[str] = []
    for index, match in enumerate(result.matches, start=1):
        if index > 1:
            lines.append("")
        lines.extend(format_match(index, match, text, config.context_size))
    return "".join(f"{line}\n" for line in lines)


def render_timing(elapsed_ms: int, sentence_count: int, config: ReportConfig) -> str:
    timing = format_timing(elapsed_ms, sentence_count)
    if config.api_format:
        return f"<!--\n{timing}\n-->\n"
    return f"{timing}\n"


def render_report(
    text: str,
    result: AnalysisResult,
    config: ReportConfig | None = None,
    elapsed_ms: int = 0,
) -> str:
    """Compose the full report for ``result`` with a given elapsed time."""
    config = config or ReportConfig()
    return render_matches(text, result, config) + render_timing(
        elapsed_ms, result.sentence_count, config
    )


def check_text(
    text: str,
    analyzer: Analyzer,
    config: ReportConfig | None = None,
    *,
    clock: Callable[[], float] = time.perf_counter,
) -> CheckReport:
    """Check ``text`` with ``analyzer`` and render the report.

    The elapsed time covers the analysis and the rendering of the matches.
    ``clock`` returns seconds and can be replaced in tests.
    """

    config = config or ReportConfig()
    start = clock()
    matches = analyzer.check(text)
    result = AnalysisResult(matches=tuple(matches), sentence_count=analyzer.sentence_count)
    body = render_matches(text, result, config)
    elapsed_ms = max(0, int((clock() - start) * 1000))

    LOGGER.info(
        "Checked %d sentence(s) in %dms: %d match(es)",
        result.sentence_count,
        elapsed_ms,
        result.match_count,
    )
    report = body + render_timing(elapsed_ms, result.sentence_count, config)
    return CheckReport(
        report=report,
        match_count=result.match_count,
        elapsed_ms=elapsed_ms,
        sentence_count=result.sentence_count,
    )

from __future__ import annotations

import sys
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.check_report.renderer import (
    check_text,
    format_timing,
    render_report,
    sentences_per_second,
)
from src.models import AnalysisResult, ReportConfig, RuleMatch

TEXT = "Teh cat sat."


def typo_match() -> RuleMatch:
    return RuleMatch(
        line=0,
        column=1,
        from_pos=0,
        to_pos=3,
        rule_id="TYPO1",
        message="Did you mean <suggestion>The</suggestion>?",
        suggested_replacements=["The"],
    )


class DummyAnalyzer:
    def __init__(self, matches: list[RuleMatch], sentence_count: int = 1) -> None:
        self._matches = matches
        self._sentences = sentence_count
        self.sentence_count = 0
        self.captured_text: str | None = None

    def check(self, text: str) -> list[RuleMatch]:
        self.captured_text = text
        self.sentence_count = self._sentences
        return list(self._matches)


def fake_clock(*values: float):
    ticks: Iterator[float] = iter(values)
    return lambda: next(ticks)


def test_typo_scenario_plain_text() -> None:
    analyzer = DummyAnalyzer([typo_match()])

    result = check_text(TEXT, analyzer, ReportConfig(), clock=fake_clock(10.0, 10.25))

    assert analyzer.captured_text == TEXT
    assert result.match_count == 1
    assert result.elapsed_ms == 250
    assert result.report == (
        "1.) Line 1, column 1, Rule ID: TYPO1\n"
        "Message: Did you mean 'The'?\n"
        "Suggestion: The\n"
        "Teh cat sat.\n"
        "^^^\n"
        "Time: 250ms for 1 sentences (4.0 sentences/sec)\n"
    )


def test_no_matches_yields_only_timing_line() -> None:
    result = check_text(TEXT, DummyAnalyzer([]), clock=fake_clock(1.0, 1.5))

    assert result.match_count == 0
    assert result.report == "Time: 500ms for 1 sentences (2.0 sentences/sec)\n"


def test_blocks_are_numbered_and_separated() -> None:
    text = "One two three four five six."
    matches = [
        RuleMatch(from_pos=0, to_pos=3, rule_id="A", message="first"),
        RuleMatch(from_pos=4, to_pos=7, rule_id="B", message="second"),
        RuleMatch(from_pos=8, to_pos=13, rule_id="C", message="third"),
    ]
    report = render_report(text, AnalysisResult(matches=matches, sentence_count=1))
    lines = report.splitlines()

    headers = [line for line in lines if ".) Line " in line]
    assert [header.split(".)")[0] for header in headers] == ["1", "2", "3"]
    assert lines.count("") == len(matches) - 1
    assert lines[-1].startswith("Time: ")
    assert lines[-2] != ""
    # No suggestion line without replacements
    assert not any(line.startswith("Suggestion:") for line in lines)


def test_sub_id_is_appended_to_rule_id() -> None:
    match = RuleMatch(
        line=2,
        column=7,
        from_pos=0,
        to_pos=3,
        rule_id="EN_A_VS_AN",
        sub_id="3",
        message="Use an",
    )
    report = render_report(TEXT, AnalysisResult(matches=[match]))

    assert report.splitlines()[0] == "1.) Line 3, column 7, Rule ID: EN_A_VS_AN[3]"


def test_multiple_suggestions_are_joined() -> None:
    match = RuleMatch(
        from_pos=0,
        to_pos=3,
        rule_id="TYPO1",
        message="Possible typo",
        suggested_replacements=["The", "Ten", "Tea"],
    )
    report = render_report(TEXT, AnalysisResult(matches=[match]))

    assert "Suggestion: The; Ten; Tea" in report.splitlines()


def test_suggestion_markup_replacement_is_idempotent() -> None:
    match = RuleMatch(
        from_pos=0,
        to_pos=3,
        rule_id="R",
        message="<suggestion>a</suggestion> or <suggestion>b</suggestion>",
    )
    once = render_report(TEXT, AnalysisResult(matches=[match])).splitlines()[1]
    again_match = match.model_copy(update={"message": once[len("Message: ") :]})
    twice = render_report(TEXT, AnalysisResult(matches=[again_match])).splitlines()[1]

    assert once == "Message: 'a' or 'b'"
    assert twice == once


def test_malformed_ranges_do_not_break_rendering() -> None:
    matches = [
        RuleMatch(from_pos=8, to_pos=2, rule_id="INVERTED"),
        RuleMatch(from_pos=-4, to_pos=500, rule_id="OUT_OF_RANGE"),
    ]
    result = check_text(TEXT, DummyAnalyzer(matches), clock=fake_clock(0.0, 0.0))

    assert result.match_count == 2
    assert "Rule ID: INVERTED" in result.report
    assert "Rule ID: OUT_OF_RANGE" in result.report


def test_api_format_wraps_timing_in_comment() -> None:
    config = ReportConfig(api_format=True)
    result = check_text(TEXT, DummyAnalyzer([typo_match()]), config, clock=fake_clock(2.0, 2.5))

    xml_part, _, trailer = result.report.partition("<!--\n")
    root = ET.fromstring(xml_part)
    assert root.tag == "matches"
    assert len(root.findall("error")) == 1
    assert trailer == "Time: 500ms for 1 sentences (2.0 sentences/sec)\n-->\n"
    assert result.match_count == 1


def test_zero_elapsed_time_uses_one_millisecond_floor() -> None:
    assert sentences_per_second(3, 0) == pytest.approx(3000.0)
    assert sentences_per_second(0, 0) == 0.0
    assert format_timing(0, 3) == "Time: 0ms for 3 sentences (3000.0 sentences/sec)"


def test_timing_uses_dot_decimal_separator() -> None:
    assert format_timing(3000, 10) == "Time: 3000ms for 10 sentences (3.3 sentences/sec)"


def test_check_report_exposes_rate() -> None:
    result = check_text(TEXT, DummyAnalyzer([], sentence_count=4), clock=fake_clock(0.0, 2.0))
    assert result.sentence_count == 4
    assert result.sentences_per_second == pytest.approx(2.0)

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import src.check_report.language_tool_manager as ltm_mod
from src.check_report.config import DEFAULT_DISABLED_RULES
from src.check_report.language_tool_manager import LanguageToolManager


class DummyLanguageTool:
    created: list["DummyLanguageTool"] = []

    def __init__(self, language, *args, **kwargs):
        self.language = language
        self.kwargs = kwargs
        self.disabled_rules: set[str] = set()
        DummyLanguageTool.created.append(self)

    def close(self) -> None:
        return None


def _install_dummy(monkeypatch) -> None:
    DummyLanguageTool.created = []
    monkeypatch.setattr(ltm_mod.language_tool_python, "LanguageTool", DummyLanguageTool)


def test_build_tool_passes_config_and_disabled_rules(monkeypatch) -> None:
    _install_dummy(monkeypatch)
    manager = LanguageToolManager(disabled_rules={"WHITESPACE_RULE"})

    tool = manager.build_tool("en-GB", extra_disabled_rules={"EN_QUOTES"})

    assert tool.language == "en-GB"
    # LanguageTool's configuration keys are camelCase
    assert tool.kwargs["config"]["maxCheckTimeMillis"] == 120000
    assert tool.disabled_rules == {"WHITESPACE_RULE", "EN_QUOTES"}
    assert "newSpellings" not in tool.kwargs


def test_custom_spellings_apply_to_base_language_only(monkeypatch) -> None:
    _install_dummy(monkeypatch)
    manager = LanguageToolManager(ignored_words=["  Cymraeg ", "CPU", "CPU", ""])

    base = manager.build_tool("en-GB")
    other_language = manager.build_tool("fr")

    assert manager.custom_spellings == ["CPU", "Cymraeg"]
    assert base.kwargs["newSpellings"] == ["CPU", "Cymraeg"]
    assert base.kwargs["new_spellings_persist"] is False
    assert "newSpellings" not in other_language.kwargs


def test_build_tool_defaults_to_base_language(monkeypatch) -> None:
    _install_dummy(monkeypatch)
    tool = LanguageToolManager(base_language="de-DE").build_tool()
    assert tool.language == "de-DE"


def test_with_defaults_uses_bundled_spellings(monkeypatch) -> None:
    _install_dummy(monkeypatch)
    manager = LanguageToolManager.with_defaults(extra_disabled_rules={"EXTRA_RULE"})

    tool = manager.build_tool()

    assert "Ethernet" in tool.kwargs["newSpellings"]
    assert tool.disabled_rules == set(DEFAULT_DISABLED_RULES) | {"EXTRA_RULE"}

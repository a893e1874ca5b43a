"""Check report package exports.

This package exposes the report helpers used by other parts of the project
so callers can import from ``src.check_report``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    # These imports are only for type checkers; they are not executed at runtime
    from .analyzer import Analyzer, LanguageToolAnalyzer, count_sentences, to_rule_match
    from .context import ContextExcerpt, extract_context, get_context
    from .language_tool_manager import LanguageToolManager
    from .renderer import CheckReport, check_text, render_report, sentences_per_second
    from .xml_report import rule_matches_to_xml

__all__ = [
    "Analyzer",
    "CheckReport",
    "ContextExcerpt",
    "LanguageToolAnalyzer",
    "LanguageToolManager",
    "check_text",
    "count_sentences",
    "extract_context",
    "get_context",
    "render_report",
    "rule_matches_to_xml",
    "sentences_per_second",
    "to_rule_match",
]

_LAZY_EXPORTS = {
    # attribute -> (module, attribute)
    "Analyzer": (".analyzer", "Analyzer"),
    "LanguageToolAnalyzer": (".analyzer", "LanguageToolAnalyzer"),
    "count_sentences": (".analyzer", "count_sentences"),
    "to_rule_match": (".analyzer", "to_rule_match"),
    "ContextExcerpt": (".context", "ContextExcerpt"),
    "extract_context": (".context", "extract_context"),
    "get_context": (".context", "get_context"),
    "LanguageToolManager": (".language_tool_manager", "LanguageToolManager"),
    "CheckReport": (".renderer", "CheckReport"),
    "check_text": (".renderer", "check_text"),
    "render_report": (".renderer", "render_report"),
    "sentences_per_second": (".renderer", "sentences_per_second"),
    "rule_matches_to_xml": (".xml_report", "rule_matches_to_xml"),
}


def __getattr__(name: str):
    """Lazily import and return exported attributes.

    ``language_tool_python`` is only imported when the LanguageTool manager
    is actually requested, so the renderer can be used without it.
    """

    if name in _LAZY_EXPORTS:
        module_name, attr = _LAZY_EXPORTS[name]
        from importlib import import_module

        mod = import_module(f"src.check_report{module_name}")
        value = getattr(mod, attr)
        globals()[name] = value
        return value
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY_EXPORTS.keys()))

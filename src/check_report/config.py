"""Configuration for report generation and the LanguageTool engine.

Defaults live here as module constants; runtime overrides come from the
command line or from ``CHECK_REPORT_*`` environment variables (optionally
loaded from a ``.env`` file).
"""

from __future__ import annotations

from src.models.report_config import DEFAULT_CONTEXT_SIZE, ENV_API_FORMAT, ENV_CONTEXT_SIZE
from src.resources import read_packaged_lines

DEFAULT_LANGUAGE = "en-GB"

# Bundled list of custom spellings registered with LanguageTool.
IGNORED_WORDS_RESOURCE = "ignored_words.txt"

# Rules always disabled; `--disable` adds to this set.
DEFAULT_DISABLED_RULES = {
    "WHITESPACE_RULE",
    "CONSECUTIVE_SPACES",
    "SENTENCE_WHITESPACE",
}

ENV_LANGUAGE = "CHECK_REPORT_LANGUAGE"


def load_default_ignored_words() -> set[str]:
    """Return the bundled custom spellings."""
    return set(read_packaged_lines(IGNORED_WORDS_RESOURCE))


__all__ = [
    "DEFAULT_CONTEXT_SIZE",
    "DEFAULT_DISABLED_RULES",
    "DEFAULT_LANGUAGE",
    "ENV_API_FORMAT",
    "ENV_CONTEXT_SIZE",
    "ENV_LANGUAGE",
    "IGNORED_WORDS_RESOURCE",
    "load_default_ignored_words",
]

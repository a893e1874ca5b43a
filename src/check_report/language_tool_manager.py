"""LanguageTool setup helpers.

This module centralises LanguageTool instantiation so that custom spellings
and shared server configuration stay in one place.
"""

from __future__ import annotations

from typing import Iterable, Any
import logging

import language_tool_python

from .config import DEFAULT_DISABLED_RULES, DEFAULT_LANGUAGE, load_default_ignored_words

# Default LanguageTool server configuration.
#
# The LanguageTool default maxCheckTimeMillis is low enough that the Java
# server aborts checks on long inputs; allow two minutes per check.
_DEFAULT_CONFIG = {
    "requestLimitPeriodInSeconds": 60,
    "maxCheckTimeMillis": 120000,
}


class LanguageToolManager:
    """Factory class responsible for configuring LanguageTool instances."""

    def __init__(
        self,
        *,
        ignored_words: Iterable[str] | None = None,
        disabled_rules: Iterable[str] | None = None,
        base_language: str = DEFAULT_LANGUAGE,
        config: dict[str, Any] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_language = base_language
        self.logger = logger or logging.getLogger(__name__)
        self.config = dict(config) if config is not None else dict(_DEFAULT_CONFIG)
        self.disabled_rules = set(disabled_rules or [])
        self.custom_spellings = sorted(
            {word.strip() for word in ignored_words or [] if word and word.strip()}
        )

    @classmethod
    def with_defaults(
        cls,
        *,
        extra_disabled_rules: Iterable[str] | None = None,
        base_language: str = DEFAULT_LANGUAGE,
    ) -> "LanguageToolManager":
        """Manager using the bundled spellings and the default disabled rules."""
        rules = set(DEFAULT_DISABLED_RULES)
        if extra_disabled_rules:
            rules.update(extra_disabled_rules)
        return cls(
            ignored_words=load_default_ignored_words(),
            disabled_rules=rules,
            base_language=base_language,
        )

    def _custom_spellings_for(self, language: str) -> list[str] | None:
        """Custom spellings only apply to the base language dictionary."""
        if not self.custom_spellings or language != self.base_language:
            return None
        self.logger.info(
            "Registering %d custom spellings with LanguageTool",
            len(self.custom_spellings),
        )
        return list(self.custom_spellings)

    def build_tool(
        self,
        language: str | None = None,
        *,
        extra_disabled_rules: Iterable[str] | None = None,
    ) -> Any:
        """Build a LanguageTool instance for ``language`` (default: base language)."""

        language = language or self.base_language
        kwargs: dict[str, Any] = {}
        if self.config:
            kwargs["config"] = self.config
        new_spellings = self._custom_spellings_for(language)
        if new_spellings:
            kwargs["newSpellings"] = new_spellings
            kwargs["new_spellings_persist"] = False

        tool = language_tool_python.LanguageTool(language, **kwargs)

        rules = set(self.disabled_rules)
        if extra_disabled_rules:
            rules.update(extra_disabled_rules)
        if rules:
            tool.disabled_rules = set(rules)
        self.logger.debug(
            "Created LanguageTool for %s with %d disabled rule(s)", language, len(rules)
        )
        return tool

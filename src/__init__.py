"""LanguageTool check report package."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "check_report",
    "models",
    "resources",
    "utils",
]

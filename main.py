"""Command-line entrypoint for the LanguageTool check report."""

from __future__ import annotations

from src.check_report.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line interface for checking a text and printing the report.

The input is read from a URL, a local file, a bundled resource
(``--packaged``) or standard input, checked with LanguageTool and printed
to standard output as a plain-text or XML report.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from src.models import ReportConfig
from src.resources import ResourceNotFoundError, open_packaged_resource, open_resource
from src.utils.errors import full_stack_trace

from .analyzer import LanguageToolAnalyzer
from .config import DEFAULT_LANGUAGE, ENV_API_FORMAT, ENV_CONTEXT_SIZE, ENV_LANGUAGE
from .language_tool_manager import LanguageToolManager
from .renderer import check_text

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CHECK_ERROR = 2


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Check a text with LanguageTool and print a report of the matches."
    )
    parser.add_argument(
        "identifier",
        nargs="?",
        default="-",
        help="URL, file path or (with --packaged) bundled resource name; '-' reads stdin",
    )
    parser.add_argument(
        "--language",
        default=None,
        help=f"Language code for LanguageTool (default: {DEFAULT_LANGUAGE} or {ENV_LANGUAGE})",
    )
    parser.add_argument(
        "--api",
        action="store_true",
        default=None,
        help=f"Print the matches as XML (default: off or {ENV_API_FORMAT})",
    )
    parser.add_argument(
        "--context-size",
        type=int,
        default=None,
        help=f"Characters of context around each match; -1 for the default (or {ENV_CONTEXT_SIZE})",
    )
    parser.add_argument(
        "--disable",
        action="append",
        dest="disabled_rules",
        metavar="RULE",
        help="Disable a LanguageTool rule (can be specified multiple times)",
    )
    parser.add_argument(
        "--packaged",
        action="store_true",
        help="Treat the identifier as the name of a bundled resource",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input (default: utf-8)",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to a .env file with CHECK_REPORT_* settings",
    )
    parser.add_argument(
        "--fail-on-matches",
        action="store_true",
        help="Exit with status 1 when any match is reported",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def read_input(identifier: str, *, packaged: bool = False, encoding: str = "utf-8") -> str:
    """Return the text behind ``identifier``, closing the stream afterwards."""

    if identifier == "-" and not packaged:
        return sys.stdin.read()
    opener = open_packaged_resource if packaged else open_resource
    with opener(identifier) as stream:
        return stream.read().decode(encoding)


def build_report_config(args: argparse.Namespace) -> ReportConfig:
    """Merge command-line options over the environment defaults."""

    env_config = ReportConfig.from_env()
    api_format = env_config.api_format if args.api is None else args.api
    context_size = env_config.context_size if args.context_size is None else args.context_size
    return ReportConfig(api_format=api_format, context_size=context_size)


def main(
    argv: Optional[Iterable[str]] = None,
    *,
    tool_factory: Callable[[str, set[str]], Any] | None = None,
) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.dotenv is not None:
        # Keep variables already set in the environment.
        load_dotenv(dotenv_path=args.dotenv)
    else:
        load_dotenv()

    try:
        config = build_report_config(args)
    except ValidationError as exc:
        LOGGER.error("Invalid report configuration: %s", exc)
        return EXIT_FAILURE

    try:
        text = read_input(args.identifier, packaged=args.packaged, encoding=args.encoding)
    except ResourceNotFoundError as exc:
        LOGGER.error("%s", exc)
        return EXIT_FAILURE
    except UnicodeDecodeError as exc:
        LOGGER.error("Could not decode %s as %s: %s", args.identifier, args.encoding, exc)
        return EXIT_FAILURE

    language = args.language or os.environ.get(ENV_LANGUAGE, DEFAULT_LANGUAGE)
    disabled_rules = set(args.disabled_rules or [])
    try:
        if tool_factory is None:
            manager = LanguageToolManager.with_defaults(
                extra_disabled_rules=disabled_rules, base_language=language
            )
            tool = manager.build_tool(language)
        else:
            tool = tool_factory(language, disabled_rules)
    except Exception as exc:
        LOGGER.error("Could not start LanguageTool:\n%s", full_stack_trace(exc))
        return EXIT_CHECK_ERROR

    analyzer = LanguageToolAnalyzer(tool)
    try:
        result = check_text(text, analyzer, config)
    except Exception as exc:
        LOGGER.error("Language check failed:\n%s", full_stack_trace(exc))
        return EXIT_CHECK_ERROR
    finally:
        analyzer.close()

    sys.stdout.write(result.report)
    if args.fail_on_matches and result.match_count:
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

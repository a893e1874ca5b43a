"""Helpers for reporting unexpected errors."""

from __future__ import annotations

import traceback


def full_stack_trace(exc: BaseException) -> str:
    """Return the traceback of ``exc`` (including chained causes) as text."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

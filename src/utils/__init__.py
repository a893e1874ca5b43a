"""Utility modules shared across the project."""

from __future__ import annotations

from .errors import full_stack_trace

__all__ = [
    "full_stack_trace",
]

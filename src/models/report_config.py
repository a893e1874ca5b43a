"""Runtime configuration for report rendering."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, field_validator

# Characters of surrounding text shown before and after a match.
DEFAULT_CONTEXT_SIZE = 25

ENV_API_FORMAT = "CHECK_REPORT_API_FORMAT"
ENV_CONTEXT_SIZE = "CHECK_REPORT_CONTEXT_SIZE"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ReportConfig(BaseModel):
    """How a check report should be rendered.

    ``context_size`` accepts ``None`` or ``-1`` as "use the default", which
    keeps the command-line convention of passing -1 for an unset value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_format: bool = False
    context_size: int = DEFAULT_CONTEXT_SIZE

    @field_validator("context_size", mode="before")
    def _default_context_size(cls, value: object) -> object:
        if value is None or value == -1 or value == "-1" or value == "":
            return DEFAULT_CONTEXT_SIZE
        return value

    @field_validator("context_size")
    def _non_negative_context_size(cls, value: int) -> int:
        if value < 0:
            raise ValueError("context_size must be -1 (default) or a non-negative integer")
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ReportConfig":
        """Build a config from ``CHECK_REPORT_*`` environment variables."""
        env = os.environ if environ is None else environ
        api_format = env.get(ENV_API_FORMAT, "").strip().lower() in _TRUE_VALUES
        return cls(
            api_format=api_format,
            context_size=env.get(ENV_CONTEXT_SIZE, "").strip() or None,
        )

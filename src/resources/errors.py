"""Errors raised while opening input resources."""

from __future__ import annotations

import os
from pathlib import Path


class ResourceNotFoundError(FileNotFoundError):
    """No stream could be opened for a resource identifier.

    ``path`` holds the absolute path that was attempted (or the packaged
    resource name) so callers can report it.
    """

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = os.fspath(path)

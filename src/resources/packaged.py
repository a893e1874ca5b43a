"""Load data files bundled with the package.

Packaged resources are read through a ``PackagedResourceReader``, which the
host can replace (for example when the files are embedded in an archive that
``importlib.resources`` cannot see). Callers choose this explicitly; the
URL/file resolver never falls back to packaged resources.
"""

from __future__ import annotations

import io
import logging
from importlib import resources
from typing import BinaryIO, Protocol

from .errors import ResourceNotFoundError

LOGGER = logging.getLogger(__name__)

DEFAULT_PACKAGE = "src.resources.data"


class PackagedResourceReader(Protocol):
    def open_binary(self, name: str) -> BinaryIO | None:
        """Return an open stream for ``name`` or ``None`` if it is missing."""
        ...


class ImportlibResourceReader:
    """Read resources from a Python package with ``importlib.resources``."""

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        self.package = package

    def open_binary(self, name: str) -> BinaryIO | None:
        try:
            resource = resources.files(self.package).joinpath(name)
        except ModuleNotFoundError:
            LOGGER.warning("Resource package %s is not importable", self.package)
            return None
        if not resource.is_file():
            return None
        return resource.open("rb")


def open_packaged_resource(
    name: str, reader: PackagedResourceReader | None = None
) -> BinaryIO:
    """Open the bundled resource ``name``.

    A leading ``/`` is ignored so classpath-style absolute names work.
    """

    reader = reader or ImportlibResourceReader()
    stream = reader.open_binary(name.lstrip("/"))
    if stream is None:
        raise ResourceNotFoundError(
            f"Could not load file from package resources: {name}", name
        )
    return stream


def read_packaged_lines(
    name: str,
    reader: PackagedResourceReader | None = None,
    *,
    encoding: str = "utf-8",
) -> list[str]:
    """Return the non-blank, non-comment lines of a bundled text file."""

    with open_packaged_resource(name, reader) as stream:
        with io.TextIOWrapper(stream, encoding=encoding) as text_stream:
            lines = [line.strip() for line in text_stream]
    return [line for line in lines if line and not line.startswith("#")]

"""Input resource resolution: URLs, local files and bundled data files."""

from __future__ import annotations

from .errors import ResourceNotFoundError
from .packaged import (
    ImportlibResourceReader,
    PackagedResourceReader,
    open_packaged_resource,
    read_packaged_lines,
)
from .resolver import (
    FileStrategy,
    Resolution,
    ResolutionStatus,
    ResourceResolver,
    UrlStrategy,
    open_resource,
)

__all__ = [
    "FileStrategy",
    "ImportlibResourceReader",
    "PackagedResourceReader",
    "Resolution",
    "ResolutionStatus",
    "ResourceNotFoundError",
    "ResourceResolver",
    "UrlStrategy",
    "open_packaged_resource",
    "open_resource",
    "read_packaged_lines",
]

"""Open input resources given as a URL or a local file path.

Identifiers are tried against an ordered list of strategies: network URL
first, then the local filesystem. Each strategy returns a ``Resolution``
saying whether it opened a stream, did not apply, or found nothing, and the
first opened stream wins.

Only identifiers that are not URLs fall through to the file strategy. A URL
that fails to open (connection error, HTTP error status, missing ``file:``
target) raises straight away.

Streams are returned open; the caller is responsible for closing them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Iterable, Protocol
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from .errors import ResourceNotFoundError

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class ResolutionStatus(str, Enum):
    OPENED = "opened"
    SKIPPED = "skipped"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Resolution:
    """Outcome of one strategy for one identifier."""

    status: ResolutionStatus
    stream: BinaryIO | None = None
    detail: str = ""

    @classmethod
    def opened(cls, stream: BinaryIO, detail: str = "") -> "Resolution":
        return cls(ResolutionStatus.OPENED, stream, detail)

    @classmethod
    def skipped(cls, detail: str = "") -> "Resolution":
        return cls(ResolutionStatus.SKIPPED, None, detail)

    @classmethod
    def not_found(cls, detail: str = "") -> "Resolution":
        return cls(ResolutionStatus.NOT_FOUND, None, detail)


class ResolverStrategy(Protocol):
    name: str

    def resolve(self, identifier: str) -> Resolution:
        ...


class UrlStrategy:
    """Open ``http``, ``https`` and ``file`` URLs."""

    name = "url"
    network_schemes = ("http", "https")

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session
        self.timeout = timeout

    def is_url(self, identifier: str) -> bool:
        parsed = urlparse(identifier)
        scheme = parsed.scheme.lower()
        if scheme in self.network_schemes:
            return bool(parsed.netloc)
        return scheme == "file"

    def resolve(self, identifier: str) -> Resolution:
        if not self.is_url(identifier):
            return Resolution.skipped(f"not a URL: {identifier}")

        parsed = urlparse(identifier)
        if parsed.scheme.lower() == "file":
            path = url2pathname(parsed.path)
            return Resolution.opened(open(path, "rb"), detail=path)

        getter = self.session.get if self.session is not None else requests.get
        response = getter(identifier, stream=True, timeout=self.timeout)
        response.raise_for_status()
        response.raw.decode_content = True
        LOGGER.debug("Opened %s (HTTP %s)", identifier, response.status_code)
        return Resolution.opened(response.raw, detail=identifier)


class FileStrategy:
    """Open an existing, readable regular file."""

    name = "file"

    def resolve(self, identifier: str) -> Resolution:
        path = Path(identifier)
        if path.is_file() and os.access(path, os.R_OK):
            return Resolution.opened(path.open("rb"), detail=str(path))
        return Resolution.not_found(os.path.abspath(identifier))


def default_strategies() -> list[ResolverStrategy]:
    return [UrlStrategy(), FileStrategy()]


class ResourceResolver:
    """Try each strategy in order until one opens a stream."""

    def __init__(self, strategies: Iterable[ResolverStrategy] | None = None) -> None:
        self.strategies = list(strategies) if strategies is not None else default_strategies()

    def open(self, identifier: str) -> BinaryIO:
        for strategy in self.strategies:
            resolution = strategy.resolve(identifier)
            if resolution.status is ResolutionStatus.OPENED and resolution.stream is not None:
                LOGGER.debug("Resolved %s via %s strategy", identifier, strategy.name)
                return resolution.stream
            LOGGER.debug(
                "%s strategy did not open %s (%s)",
                strategy.name,
                identifier,
                resolution.status.value,
            )

        absolute_path = os.path.abspath(identifier)
        raise ResourceNotFoundError(
            f"Could not open input stream from URL/resource/file: {absolute_path}",
            absolute_path,
        )


def open_resource(identifier: str) -> BinaryIO:
    """Open ``identifier`` as a URL, falling back to a local file path."""
    return ResourceResolver().open(identifier)

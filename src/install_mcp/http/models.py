# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""HTTP request/response data models used by the transport probe."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from .headers import header_value, media_type

logger = logging.getLogger(__name__)

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    timeout: float | None = None


@dataclass
class HttpResponse:
    """
    Response head plus a lazily consumed body.

    The body is exposed as an iterator of byte chunks so event streams can be read
    incrementally. Callers own the response and must close it, either explicitly or by
    using it as a context manager.
    """

    status_code: int
    headers: Headers = field(default_factory=dict)
    url: str | None = None
    chunks: Iterable[bytes] = ()
    closer: Callable[[], None] | None = field(default=None, repr=False)
    closed: bool = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str | None:
        """Bare, lower-cased MIME type of the body, or None when the header is absent."""
        return media_type(header_value(self.headers, "content-type") or None)

    def iter_bytes(self) -> Iterator[bytes]:
        for chunk in self.chunks:
            if chunk:
                yield chunk

    def close(self) -> None:
        """Release the underlying stream. Failure to release is logged, never raised."""
        if self.closed:
            return
        self.closed = True
        if self.closer is None:
            return
        try:
            self.closer()
        except Exception as exc:  # noqa: BLE001
            logger.debug("closing response for %s failed: %s", self.url, exc)

    def __enter__(self) -> HttpResponse:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

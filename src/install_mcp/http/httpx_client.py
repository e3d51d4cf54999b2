# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import socket
import threading
from typing import Any

import httpx

from ..config import ProbeSettings, load_probe_settings
from ..errors import categorize_exception, error_category_to_reason
from .client import HttpClient
from .headers import header_value, normalize_headers
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

_CONNECTED_EVENTS = frozenset({"connection.connect_tcp.complete", "connection.start_tls.complete"})


class _BoundedSend:
    """
    One streamed send that the caller may abandon at a deadline.

    httpx timeouts restart on every received byte and do not cover name resolution, so
    the send runs on a worker thread while the caller waits at most `timeout` seconds.
    Once abandoned, sockets seen through the httpcore `trace` hook are shut down to
    unblock the worker, and a response arriving late is closed instead of returned.
    """

    def __init__(self, client: httpx.Client, request: httpx.Request):
        self._client = client
        self._request = request
        self._request.extensions = {**request.extensions, "trace": self._trace}
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._abandoned = False
        self._sockets: list[socket.socket] = []
        self._response: httpx.Response | None = None
        self._error: Exception | None = None

    def _trace(self, event_name: str, info: dict[str, Any]) -> None:
        if event_name not in _CONNECTED_EVENTS:
            return
        stream = info.get("return_value")
        sock = stream.get_extra_info("socket") if stream is not None else None
        if sock is None:
            return
        with self._lock:
            abandoned = self._abandoned
            self._sockets.append(sock)
        if abandoned:
            _shutdown(sock)

    def _run(self) -> None:
        try:
            response = self._client.send(self._request, stream=True)
        except Exception as exc:  # noqa: BLE001
            self._error = exc
            self._done.set()
            return
        with self._lock:
            late = self._abandoned
            if not late:
                self._response = response
        if late:
            response.close()
        self._done.set()

    def run(self, timeout: float) -> httpx.Response:
        worker = threading.Thread(target=self._run, name="install-mcp-send", daemon=True)
        worker.start()
        if self._done.wait(timeout):
            if self._error is not None:
                raise self._error
            assert self._response is not None
            return self._response
        self._abandon()
        raise httpx.TimeoutException(f"no response within {timeout:.3f}s", request=self._request)

    def _abandon(self) -> None:
        with self._lock:
            self._abandoned = True
            sockets = list(self._sockets)
            response, self._response = self._response, None
        for sock in sockets:
            _shutdown(sock)
        if response is not None:
            response.close()


def _shutdown(sock: socket.socket) -> None:
    try:
        sock.shutdown(socket.SHUT_RDWR)
    except OSError:
        pass


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper that streams response bodies."""

    def __init__(self, settings: ProbeSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_probe_settings()
        # Fresh connection per request: an abandoned send must never hand back a pooled socket.
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
            limits=httpx.Limits(max_keepalive_connections=0),
        )

    def request(self, request: HttpRequest) -> HttpResponse | None:
        headers = dict(request.headers or {})
        if not header_value(headers, "user-agent"):
            headers["User-Agent"] = self.settings.user_agent

        timeout = request.timeout if request.timeout is not None and request.timeout > 0 else self.settings.timeout

        try:
            outgoing = self._client.build_request(
                request.method,
                request.url,
                headers=headers,
                content=request.body,
                timeout=httpx.Timeout(timeout),
            )
            resp = _BoundedSend(self._client, outgoing).run(timeout)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            logger.debug(
                "%s %s: no response (%s: %s)",
                request.method,
                request.url,
                error_category_to_reason(category),
                exc,
            )
            return None

        return HttpResponse(
            status_code=resp.status_code,
            headers=normalize_headers(resp.headers),
            url=str(resp.url),
            chunks=resp.iter_bytes(),
            closer=resp.close,
        )

    def close(self) -> None:
        self._client.close()

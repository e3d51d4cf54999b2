# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Detect whether an MCP server speaks streamable HTTP, legacy HTTP+SSE, or neither."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..config import DEFAULT_ORIGIN, DEFAULT_TIMEOUT_MS
from ..http.client import HttpClient, create_default_http_client
from ..http.headers import merge_headers
from ..http.models import HttpRequest, HttpResponse
from ..models.transport import DetectionRequest, JsonRpcInitializeMessage, ProbeResponse, TransportKind
from .decisions import (
    GET_TRANSITIONS,
    POST_TRANSITIONS,
    GetOutcome,
    classify_first_frame,
    classify_get,
    classify_post,
)
from .sse import read_first_sse_frame

logger = logging.getLogger(__name__)

POST_DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json, text/event-stream",
    "Origin": DEFAULT_ORIGIN,
}

GET_DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "text/event-stream",
    "Origin": DEFAULT_ORIGIN,
}


def _send(client: HttpClient, request: HttpRequest) -> HttpResponse | None:
    try:
        return client.request(request)
    except Exception as exc:  # noqa: BLE001
        # HttpClient implementations should not raise; treat a misbehaving one as silence.
        logger.debug("%s %s raised %s: %s", request.method, request.url, type(exc).__name__, exc)
        return None


def probe_streamable_http(client: HttpClient, request: DetectionRequest) -> TransportKind | None:
    """POST a bare initialize request; only streamable HTTP answers it with JSON or SSE."""
    message = JsonRpcInitializeMessage.create()
    response = _send(
        client,
        HttpRequest(
            url=request.base_url,
            method="POST",
            headers=merge_headers(POST_DEFAULT_HEADERS, request.headers),
            body=message.to_json(),
            timeout=request.timeout,
        ),
    )
    if response is None:
        outcome = classify_post(None)
    else:
        with response:
            outcome = classify_post(ProbeResponse.from_http(response))
    logger.debug("POST %s -> %s", request.base_url, outcome.value)
    return POST_TRANSITIONS[outcome]


def probe_legacy_sse(client: HttpClient, request: DetectionRequest) -> TransportKind:
    """GET the event stream and inspect its first frame for the legacy `endpoint` handshake."""
    response = _send(
        client,
        HttpRequest(
            url=request.base_url,
            method="GET",
            headers=merge_headers(GET_DEFAULT_HEADERS, request.headers),
            timeout=request.timeout,
        ),
    )
    if response is None:
        logger.debug("GET %s -> %s", request.base_url, GetOutcome.NO_RESPONSE.value)
        return TransportKind.UNKNOWN

    with response:
        outcome = classify_get(ProbeResponse.from_http(response))
        logger.debug("GET %s -> %s", request.base_url, outcome.value)
        decided = GET_TRANSITIONS[outcome]
        if decided is not None:
            return decided

        frame = read_first_sse_frame(response.iter_bytes(), request.timeout, cancel=response.close)
        logger.debug("first event frame from %s: %r", request.base_url, frame)
        return classify_first_frame(frame)


def _detect(client: HttpClient, request: DetectionRequest) -> TransportKind:
    decided = probe_streamable_http(client, request)
    if decided is not None:
        return decided
    return probe_legacy_sse(client, request)


def detect_mcp_transport(
    base_url: str,
    *,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
    headers: Mapping[str, str] | None = None,
    http_client: HttpClient | None = None,
) -> TransportKind:
    """
    Classify the MCP transport served at `base_url`.

    Sends at most one POST and one GET, each bounded by `timeout_ms`, plus a bounded
    read of the first event frame. Caller `headers` override the probe defaults.
    Never raises: any failure ends in `TransportKind.UNKNOWN`.

    When no `http_client` is given, a default httpx client is created for this call
    and closed before returning.
    """
    owned_client: HttpClient | None = None
    try:
        request = DetectionRequest(base_url=base_url, timeout_ms=timeout_ms, headers=dict(headers or {}))
        client = http_client
        if client is None:
            client = owned_client = create_default_http_client()
        kind = _detect(client, request)
    except Exception as exc:  # noqa: BLE001
        logger.warning("transport detection for %s failed: %s", base_url, exc)
        kind = TransportKind.UNKNOWN
    finally:
        if owned_client is not None:
            try:
                owned_client.close()
            except Exception as exc:  # noqa: BLE001
                logger.debug("closing probe client failed: %s", exc)

    logger.info("%s speaks %s", base_url, kind.value)
    return kind


__all__ = [
    "GET_DEFAULT_HEADERS",
    "POST_DEFAULT_HEADERS",
    "detect_mcp_transport",
    "probe_legacy_sse",
    "probe_streamable_http",
]

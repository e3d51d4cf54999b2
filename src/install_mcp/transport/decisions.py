# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""
Decision table for MCP transport detection.

Detection is a two-step probe:

    start -> POST initialize -> STREAMABLE            => http
                             -> REJECTED / INCONCLUSIVE / NO_RESPONSE
                                 -> GET event stream -> METHOD_NOT_ALLOWED => http
                                                     -> NOT_EVENT_STREAM   => unknown
                                                     -> NO_RESPONSE        => unknown
                                                     -> EVENT_STREAM -> first frame
                                                           event "endpoint" => sse
                                                           other frame      => http
                                                           no frame         => unknown

Each classifier below is pure; the network side lives in `detect`.
"""

from __future__ import annotations

from enum import Enum

from ..models.transport import ProbeResponse, SseFrame, TransportKind

JSON_CONTENT_TYPE = "application/json"
EVENT_STREAM_CONTENT_TYPE = "text/event-stream"
LEGACY_ENDPOINT_EVENT = "endpoint"

# Auth challenges say nothing about which transport sits behind them.
AMBIGUOUS_AUTH_STATUSES = frozenset({401, 403})


class PostOutcome(str, Enum):
    STREAMABLE = "streamable"
    REJECTED = "rejected"
    INCONCLUSIVE = "inconclusive"
    NO_RESPONSE = "no_response"


class GetOutcome(str, Enum):
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_EVENT_STREAM = "not_event_stream"
    EVENT_STREAM = "event_stream"
    NO_RESPONSE = "no_response"


# None means "continue with the next probe step".
POST_TRANSITIONS: dict[PostOutcome, TransportKind | None] = {
    PostOutcome.STREAMABLE: TransportKind.HTTP,
    PostOutcome.REJECTED: None,
    PostOutcome.INCONCLUSIVE: None,
    PostOutcome.NO_RESPONSE: None,
}

GET_TRANSITIONS: dict[GetOutcome, TransportKind | None] = {
    GetOutcome.METHOD_NOT_ALLOWED: TransportKind.HTTP,
    GetOutcome.NOT_EVENT_STREAM: TransportKind.UNKNOWN,
    GetOutcome.NO_RESPONSE: TransportKind.UNKNOWN,
    GetOutcome.EVENT_STREAM: None,
}


def classify_post(response: ProbeResponse | None) -> PostOutcome:
    """Classify the answer to the JSON-RPC initialize POST."""
    if response is None:
        return PostOutcome.NO_RESPONSE
    if response.ok and response.content_type in (JSON_CONTENT_TYPE, EVENT_STREAM_CONTENT_TYPE):
        return PostOutcome.STREAMABLE
    status = response.status_code
    if 400 <= status < 500 and status not in AMBIGUOUS_AUTH_STATUSES:
        return PostOutcome.REJECTED
    return PostOutcome.INCONCLUSIVE


def classify_get(response: ProbeResponse | None) -> GetOutcome:
    """Classify the answer to the legacy event-stream GET."""
    if response is None:
        return GetOutcome.NO_RESPONSE
    if response.status_code == 405:
        return GetOutcome.METHOD_NOT_ALLOWED
    if response.content_type != EVENT_STREAM_CONTENT_TYPE:
        return GetOutcome.NOT_EVENT_STREAM
    return GetOutcome.EVENT_STREAM


def classify_first_frame(frame: SseFrame | None) -> TransportKind:
    """The legacy handshake opens with an `endpoint` event; any other first event is streamable HTTP."""
    if frame is None:
        return TransportKind.UNKNOWN
    if (frame.event or "").strip() == LEGACY_ENDPOINT_EVENT:
        return TransportKind.SSE
    return TransportKind.HTTP


__all__ = [
    "AMBIGUOUS_AUTH_STATUSES",
    "GET_TRANSITIONS",
    "GetOutcome",
    "POST_TRANSITIONS",
    "PostOutcome",
    "classify_first_frame",
    "classify_get",
    "classify_post",
]

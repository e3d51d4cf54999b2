# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Dataclass exports for install-mcp."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .transport import (
    DetectionRequest,
    JsonRpcInitializeMessage,
    ProbeResponse,
    SseFrame,
    TransportKind,
)

__all__ = [
    "DetectionRequest",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "JsonRpcInitializeMessage",
    "ProbeResponse",
    "SseFrame",
    "TransportKind",
]

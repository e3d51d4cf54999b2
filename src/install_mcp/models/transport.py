# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Transport detection models."""

from __future__ import annotations

import json
import secrets
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..config import DEFAULT_TIMEOUT_MS
from ..http.models import HttpResponse


class TransportKind(str, Enum):
    """MCP transport spoken by a remote server."""

    HTTP = "http"
    SSE = "sse"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DetectionRequest:
    """Immutable input of a single detection call."""

    base_url: str
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.timeout_ms, int) or self.timeout_ms <= 0:
            object.__setattr__(self, "timeout_ms", DEFAULT_TIMEOUT_MS)
        object.__setattr__(self, "headers", {str(k): str(v) for k, v in (self.headers or {}).items()})

    @property
    def timeout(self) -> float:
        return self.timeout_ms / 1000.0


@dataclass(frozen=True)
class JsonRpcInitializeMessage:
    """Bare JSON-RPC 2.0 `initialize` request used to provoke a streamable-HTTP answer."""

    id: str
    jsonrpc: str = "2.0"
    method: str = "initialize"

    @classmethod
    def create(cls) -> JsonRpcInitializeMessage:
        # Time-derived, with a random suffix so concurrent calls never share an id.
        return cls(id=f"init-{time.time_ns() // 1_000_000}-{secrets.token_hex(4)}")

    def to_dict(self) -> dict[str, Any]:
        return {"jsonrpc": self.jsonrpc, "id": self.id, "method": self.method}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass(frozen=True)
class ProbeResponse:
    """Status and bare content type of one probe exchange."""

    status_code: int
    content_type: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @classmethod
    def from_http(cls, response: HttpResponse) -> ProbeResponse:
        return cls(status_code=response.status_code, content_type=response.content_type)


@dataclass
class SseFrame:
    """One Server-Sent-Events frame; fields absent from the frame stay None."""

    event: str | None = None
    data: str | None = None
    id: str | None = None

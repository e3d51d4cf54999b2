# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""
install-mcp package entrypoint.

This package decides which MCP transport a remote server speaks (streamable HTTP or
legacy HTTP+SSE) so an installer can wire the right gateway into a client's config.
HTTP behavior is abstracted behind an injectable client interface, and domain objects
are modeled with typed dataclasses.
"""

from .config import ProbeSettings, load_probe_settings
from .gateway import confirm_transport, gateway_args, infer_server_name
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import DetectionRequest, SseFrame, TransportKind
from .runtime import TransportProbe
from .transport import detect_mcp_transport, parse_sse_frame, read_first_sse_frame
from .version import __version__

__all__ = [
    "DetectionRequest",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeSettings",
    "SseFrame",
    "StubHttpClient",
    "TransportKind",
    "TransportProbe",
    "confirm_transport",
    "create_default_http_client",
    "detect_mcp_transport",
    "gateway_args",
    "infer_server_name",
    "load_probe_settings",
    "parse_sse_frame",
    "read_first_sse_frame",
    "setup_logging",
    "__version__",
]

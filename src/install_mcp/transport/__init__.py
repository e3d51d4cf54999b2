# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""MCP transport detection."""

from .decisions import GetOutcome, PostOutcome, classify_first_frame, classify_get, classify_post
from .detect import detect_mcp_transport, probe_legacy_sse, probe_streamable_http
from .sse import SseFrameDecoder, parse_sse_frame, read_first_sse_frame

__all__ = [
    "GetOutcome",
    "PostOutcome",
    "SseFrameDecoder",
    "classify_first_frame",
    "classify_get",
    "classify_post",
    "detect_mcp_transport",
    "parse_sse_frame",
    "probe_legacy_sse",
    "probe_streamable_http",
    "read_first_sse_frame",
]

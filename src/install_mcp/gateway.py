# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Turn a detected transport into gateway invocation arguments for stdio-only clients."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import urlsplit

from .models.transport import TransportKind

GATEWAY_COMMAND = "npx"
GATEWAY_PACKAGE = "supergateway"

_GATEWAY_FLAGS = {
    TransportKind.HTTP: "--streamableHttp",
    TransportKind.SSE: "--sse",
}

_LABELS = {
    TransportKind.HTTP: "streamable HTTP",
    TransportKind.SSE: "legacy HTTP+SSE",
}


def is_url(target: str) -> bool:
    return target.startswith("http://") or target.startswith("https://")


def infer_server_name(url: str) -> str:
    """`https://mcp.example.com/sse` -> `mcp-example-com`."""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        hostname = None
    if hostname:
        return hostname.replace(".", "-")
    return url.split("/")[-1] or "server"


def gateway_args(url: str, kind: TransportKind) -> list[str]:
    """Arguments for `npx` that bridge stdio to the server at `url`."""
    flag = _GATEWAY_FLAGS.get(TransportKind(kind))
    if flag is None:
        raise ValueError(f"Cannot build gateway arguments for transport {kind!s}")
    return ["-y", GATEWAY_PACKAGE, flag, url]


def describe_transport(kind: TransportKind) -> str:
    return _LABELS.get(TransportKind(kind), "unknown")


def confirm_transport(kind: TransportKind, ask: Callable[[str], bool]) -> TransportKind:
    """
    Let the user settle the transport.

    A definite detection is offered as a suggestion; declining it picks the other
    transport. An inconclusive detection becomes a plain yes/no question.
    """
    kind = TransportKind(kind)
    if kind is TransportKind.UNKNOWN:
        if ask("Could not detect the transport. Does this server use streamable HTTP?"):
            return TransportKind.HTTP
        return TransportKind.SSE
    if ask(f"Detected {describe_transport(kind)} transport. Use it?"):
        return kind
    return TransportKind.SSE if kind is TransportKind.HTTP else TransportKind.HTTP


__all__ = [
    "GATEWAY_COMMAND",
    "GATEWAY_PACKAGE",
    "confirm_transport",
    "describe_transport",
    "gateway_args",
    "infer_server_name",
    "is_url",
]

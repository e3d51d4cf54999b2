# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""install-mcp transport probe CLI."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from typing import Any

from ..config import ProbeSettings, load_probe_settings
from ..gateway import GATEWAY_COMMAND, confirm_transport, describe_transport, gateway_args, infer_server_name, is_url
from ..http import create_default_http_client
from ..log import setup_logging
from ..models.transport import TransportKind
from ..runtime import TransportProbe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Detect which MCP transport a remote server speaks")
    parser.add_argument("url", help="Server URL (http:// or https://)")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help="Budget for each probe request and for the first event frame (default: 5000)",
    )
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="Extra request header; may be repeated and overrides probe defaults",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for self-signed servers)",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Accept the detected transport without asking; fail when it is unknown",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    return parser


def _parse_headers(parser: argparse.ArgumentParser, raw_headers: list[str]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in raw_headers:
        name, sep, value = raw.partition(":")
        if not sep or not name.strip():
            parser.error(f"invalid header {raw!r}; expected 'NAME: VALUE'")
        headers[name.strip()] = value.strip()
    return headers


def _ask(question: str) -> bool:
    sys.stderr.write(f"{question} [Y/n] ")
    sys.stderr.flush()
    answer = sys.stdin.readline()
    if not answer:
        return True
    return answer.strip().lower() in {"", "y", "yes"}


def _build_result(url: str, detected: TransportKind, chosen: TransportKind | None) -> dict[str, Any]:
    result: dict[str, Any] = {
        "url": url,
        "name": infer_server_name(url),
        "detected": detected.value,
        "transport": chosen.value if chosen is not None else None,
        "command": None,
        "args": None,
    }
    if chosen is not None:
        result["command"] = GATEWAY_COMMAND
        result["args"] = gateway_args(url, chosen)
    return result


def _pretty_print(result: dict[str, Any]) -> None:
    detected = TransportKind(result["detected"])
    print(f"[install-mcp] {result['url']}")
    print(f"Detected transport: {describe_transport(detected)} ({detected.value})")
    if result["transport"] is None:
        print("Transport could not be determined; rerun without --yes to choose one.")
        return
    print(f"Server name: {result['name']}")
    print(f"Gateway command: {result['command']} {' '.join(result['args'])}")


def main(argv: list[str] | None = None, *, ask: Callable[[str], bool] = _ask) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not is_url(args.url):
        parser.error("url must start with http:// or https://")
    headers = _parse_headers(parser, args.header)

    settings: ProbeSettings = load_probe_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout_ms is not None and args.timeout_ms > 0:
        settings.timeout_ms = args.timeout_ms

    http_client = create_default_http_client(settings)
    with TransportProbe(http_client=http_client) as probe:
        detected = probe.detect(args.url, headers=headers, timeout_ms=settings.timeout_ms)

    if args.yes:
        chosen = None if detected is TransportKind.UNKNOWN else detected
    else:
        chosen = confirm_transport(detected, ask)

    result = _build_result(args.url, detected, chosen)
    if args.json:
        json.dump(result, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
    else:
        _pretty_print(result)

    return 0 if chosen is not None else 1


if __name__ == "__main__":
    raise SystemExit(main())

# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""High-level facade for transport detection."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import suppress

from .config import load_probe_settings
from .http.client import HttpClient, create_default_http_client
from .models.transport import TransportKind
from .transport.detect import detect_mcp_transport


class TransportProbe:
    """
    Convenience wrapper that shares one HTTP client across many detection calls.

    The probe itself holds no per-call state, so `detect` may be called from several
    threads at once.
    """

    def __init__(self, http_client: HttpClient | None = None):
        self.settings = load_probe_settings()
        self.http_client = http_client or create_default_http_client(self.settings)

    def detect(
        self,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> TransportKind:
        return detect_mcp_transport(
            url,
            timeout_ms=timeout_ms if timeout_ms is not None else self.settings.timeout_ms,
            headers=headers,
            http_client=self.http_client,
        )

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> TransportProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

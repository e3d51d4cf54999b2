# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Configuration helpers for install-mcp."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"install-mcp/{__version__}"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_ORIGIN = "http://localhost"


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class ProbeSettings:
    """Transport probe and HTTP client defaults."""

    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @property
    def timeout(self) -> float:
        """Timeout budget in seconds, as httpx expects it."""
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout_ms = _int_env("INSTALL_MCP_PROBE_TIMEOUT_MS", cls.timeout_ms)
        if timeout_ms <= 0:
            timeout_ms = cls.timeout_ms
        return cls(
            timeout_ms=timeout_ms,
            user_agent=os.getenv("INSTALL_MCP_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("INSTALL_MCP_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("INSTALL_MCP_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with sensible defaults."""
    return ProbeSettings.from_env()

# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""Header normalization utilities.

HTTP header field names are case-insensitive (RFC 9110). Responses are stored with
lowercase keys, while outbound headers keep the caller's casing, so lookups and
merges go through these helpers.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers, anything exposing `.items()` and
    iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        try:
            return dict(items())
        except (TypeError, ValueError):
            pass

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """Return a header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def merge_headers(defaults: Mapping[str, str], overrides: Mapping[str, str] | None) -> dict[str, str]:
    """
    Layer caller headers over defaults.

    A default is dropped whenever the caller supplies the same header under any casing,
    so the wire never carries two values for one field.
    """
    merged = dict(defaults)
    for key, value in (overrides or {}).items():
        lower = str(key).lower()
        for existing in [k for k in merged if k.lower() == lower]:
            del merged[existing]
        merged[str(key)] = str(value)
    return merged


def media_type(raw: str | None) -> str | None:
    """
    Normalize a Content-Type value to its bare MIME type.

    `"Text/Event-Stream; charset=utf-8"` -> `"text/event-stream"`. Missing or blank
    values yield None.
    """
    if not raw:
        return None
    value = str(raw).split(";", 1)[0].strip().lower()
    return value or None


__all__ = ["header_value", "media_type", "merge_headers", "normalize_headers"]

# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""In-process HttpClient implementations."""

from __future__ import annotations

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests and offline runs.

    Responses are keyed by `(METHOD, url)`. A key mapped to None (or missing) behaves
    like a request that produced no response. Every request is recorded in `requests`.
    """

    def __init__(self, responses: dict[tuple[str, str], HttpResponse | None] | None = None):
        self._responses = responses or {}
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, url: str, response: HttpResponse | None) -> None:
        self._responses[(method.upper(), url)] = response

    def request(self, request: HttpRequest) -> HttpResponse | None:
        self.requests.append(request)
        return self._responses.get((request.method.upper(), request.url))

    def calls(self, method: str) -> list[HttpRequest]:
        return [r for r in self.requests if r.method.upper() == method.upper()]

    def close(self) -> None:
        self.closed = True

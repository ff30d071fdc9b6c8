# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient for tests and dry runs."""

from __future__ import annotations

import asyncio

from ..errors import ErrorCategory
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic HttpClient that answers from a url -> response table.

    ``delay`` simulates network latency; ``in_flight``/``max_in_flight`` record
    how many requests were outstanding at once.
    """

    def __init__(self, responses: dict[str, HttpResponse] | None = None, *, delay: float = 0.0):
        self._responses = responses or {}
        self.delay = delay
        self.requests: list[HttpRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    def add(self, url: str, response: HttpResponse) -> None:
        self._responses[url] = response

    async def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1
        if request.url in self._responses:
            return self._responses[request.url]
        return HttpResponse(
            ok=False,
            url=request.url,
            error_message="No stubbed response configured",
            error_category=ErrorCategory.UNKNOWN_ERROR,
        )

    async def aclose(self) -> None:
        self.closed = True

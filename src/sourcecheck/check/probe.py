# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-endpoint probing and verdict assignment."""

from __future__ import annotations

import time

from ..config import CheckSettings
from ..errors import ErrorCategory, categorize_status
from ..http.client import HttpClient
from ..http.models import HttpRequest, HttpResponse
from ..http.url import build_test_url
from ..models import Endpoint, ProbeResult, Verdict
from .classify import classify


def build_probe_request(url: str, settings: CheckSettings) -> HttpRequest:
    return HttpRequest(
        url=url,
        method="GET",
        headers={"User-Agent": settings.user_agent, "Accept": settings.accept},
        timeout=settings.timeout,
        allow_redirects=settings.allow_redirects,
    )


async def probe(client: HttpClient, url: str, settings: CheckSettings) -> HttpResponse:
    """Issue one GET; failures come back as ``ok=False`` responses."""
    try:
        return await client.request(build_probe_request(url, settings))
    except Exception as exc:  # noqa: BLE001
        # HttpClient implementations should not raise, but adapters might.
        return HttpResponse(ok=False, url=url, error_message=str(exc) or type(exc).__name__, error_type=type(exc).__name__)


def judge(endpoint: Endpoint, test_url: str, response: HttpResponse, ms: int) -> ProbeResult:
    """Combine the transport outcome with the body shape into a ProbeResult."""
    status = response.status_code or 0
    if response.is_success:
        judgement = classify(response.text)
        return ProbeResult(
            key=endpoint.key,
            name=endpoint.name,
            base=endpoint.api,
            test_url=test_url,
            verdict=judgement.shape.to_verdict(),
            status=status,
            ms=ms,
            detail=judgement.detail,
        )

    if response.ok:
        detail = f"HTTP {status}"
        category = categorize_status(response.status_code)
    else:
        detail = response.error_message or f"HTTP {status}"
        category = response.error_category or ErrorCategory.UNKNOWN_ERROR
    return ProbeResult(
        key=endpoint.key,
        name=endpoint.name,
        base=endpoint.api,
        test_url=test_url,
        verdict=Verdict.FAIL,
        status=status,
        ms=ms,
        detail=detail,
        error_category=category,
    )


async def check_endpoint(client: HttpClient, endpoint: Endpoint, settings: CheckSettings) -> ProbeResult:
    """Build the test URL, probe it once, and judge the outcome."""
    test_url = build_test_url(endpoint.api, settings.test_query)
    started = time.monotonic()
    response = await probe(client, test_url, settings)
    ms = int(round((time.monotonic() - started) * 1000))
    return judge(endpoint, test_url, response, ms)


__all__ = ["build_probe_request", "check_endpoint", "judge", "probe"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import asyncio
import codecs
import logging

import httpx

from ..config import CheckSettings
from ..errors import ErrorCategory, categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Asynchronous httpx client wrapper. Never raises for transport failures."""

    def __init__(self, settings: CheckSettings | None = None, client: httpx.AsyncClient | None = None):
        self.settings = settings or CheckSettings()
        self._client = client or httpx.AsyncClient(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    async def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        try:
            # httpx timeouts are per phase; wait_for bounds the whole exchange.
            return await asyncio.wait_for(self._send(request, headers, timeout), timeout=timeout)
        except Exception as exc:  # noqa: BLE001
            category = categorize_exception(exc)
            message = str(exc)
            if not message and category is ErrorCategory.TIMEOUT:
                message = f"timed out after {int(round(timeout * 1000))}ms"
            logger.debug("Request to %s failed: %s (%s)", request.url, message, type(exc).__name__)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=message or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=category,
            )

    async def _send(self, request: HttpRequest, headers: dict[str, str], timeout: float) -> HttpResponse:
        max_body_bytes = self.settings.max_body_bytes
        if max_body_bytes <= 0:
            max_body_bytes = 16 * 1024 * 1024

        async with self._client.stream(
            request.method,
            request.url,
            headers=headers,
            timeout=timeout,
            follow_redirects=request.allow_redirects,
        ) as resp:
            content = bytearray()
            truncated = False
            async for chunk in resp.aiter_bytes():
                if not chunk:
                    continue
                remaining = max_body_bytes - len(content)
                if len(chunk) > remaining:
                    content.extend(chunk[:remaining])
                    truncated = True
                    break
                content.extend(chunk)

            encoding = resp.encoding or "utf-8"
            try:
                # utf-8-sig drops a leading BOM, which PHP sources often emit.
                if codecs.lookup(encoding).name == "utf-8":
                    encoding = "utf-8-sig"
                text = bytes(content).decode(encoding, errors="replace")
            except LookupError:
                text = bytes(content).decode("utf-8-sig", errors="replace")

        return HttpResponse(
            ok=True,
            status_code=resp.status_code,
            headers=dict(resp.headers),
            text=text,
            url=str(resp.url),
            meta={
                "body_truncated": truncated,
                "body_bytes_read": len(content),
            },
        )

    async def aclose(self) -> None:
        await self._client.aclose()

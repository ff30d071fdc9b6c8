# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level SourceCheck facade."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .check.runner import CheckRunner, ProgressCallback
from .config import CheckSettings
from .http.client import HttpClient, create_default_http_client
from .models import Endpoint, RunReport

logger = logging.getLogger(__name__)


class SourceChecker:
    """
    Convenience wrapper that owns the HTTP client for a run.

    Use as ``async with SourceChecker(settings) as checker`` so the underlying
    connection pool is closed when the run ends.
    """

    def __init__(
        self,
        settings: CheckSettings | None = None,
        *,
        http_client: HttpClient | None = None,
        on_result: ProgressCallback | None = None,
    ):
        self.settings = settings or CheckSettings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.runner = CheckRunner(self.http_client, self.settings, on_result=on_result)

    async def run(self, endpoints: Sequence[Endpoint]) -> RunReport:
        return await self.runner.run_all(endpoints)

    async def aclose(self) -> None:
        close = getattr(self.http_client, "aclose", None)
        if close is None:
            return
        try:
            await close()
        except Exception:  # noqa: BLE001
            logger.debug("Ignoring error while closing HTTP client", exc_info=True)

    async def __aenter__(self) -> SourceChecker:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()

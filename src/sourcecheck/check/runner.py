# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Bounded worker pool that probes every configured endpoint once."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence

from ..config import CheckSettings
from ..http.client import HttpClient
from ..models import Endpoint, ProbeResult, RunReport
from .probe import check_endpoint

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, ProbeResult], None]


class CheckRunner:
    """
    Drains a shared queue of endpoints with a fixed number of workers.

    Results are appended in completion order. The worker count caps the number
    of outstanding requests so upstream rate limits are not tripped.
    """

    def __init__(
        self,
        client: HttpClient,
        settings: CheckSettings | None = None,
        *,
        on_result: ProgressCallback | None = None,
    ):
        self.client = client
        self.settings = settings or CheckSettings()
        self.on_result = on_result

    async def run_all(self, endpoints: Sequence[Endpoint]) -> RunReport:
        queue: asyncio.Queue[Endpoint] = asyncio.Queue()
        for endpoint in endpoints:
            queue.put_nowait(endpoint)

        total = len(endpoints)
        results: list[ProbeResult] = []
        worker_count = min(self.settings.worker_count, total) if total else 0
        logger.debug("Probing %d endpoints with %d workers", total, worker_count)

        async def worker(worker_id: int) -> None:
            while True:
                try:
                    endpoint = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                result = await check_endpoint(self.client, endpoint, self.settings)
                results.append(result)
                logger.debug("worker %d finished %s -> %s", worker_id, endpoint.key, result.verdict.value)
                if self.on_result is not None:
                    try:
                        self.on_result(len(results), total, result)
                    except Exception:  # noqa: BLE001
                        logger.exception("Progress callback failed for %s", endpoint.key)

        await asyncio.gather(*(worker(i + 1) for i in range(worker_count)))
        return RunReport.from_results(results)


__all__ = ["CheckRunner", "ProgressCallback"]

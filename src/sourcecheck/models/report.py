# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Run report model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .probe import ProbeResult, Verdict

# Ordered summary buckets; a verdict belongs to exactly one bucket.
SUMMARY_BUCKETS: dict[str, frozenset[Verdict]] = {
    "PASS": frozenset({Verdict.PASS}),
    "MAYBE": frozenset({Verdict.OK_MAYBE}),
    "XML/HTML": frozenset({Verdict.XML_OR_HTML}),
    "UNKNOWN/TEXT": frozenset({Verdict.UNKNOWN, Verdict.TEXT}),
    "FAIL/EMPTY": frozenset({Verdict.FAIL, Verdict.EMPTY}),
}


def summarize(results: Iterable[ProbeResult]) -> dict[str, int]:
    """Count results per summary bucket."""
    counts = {bucket: 0 for bucket in SUMMARY_BUCKETS}
    for result in results:
        for bucket, verdicts in SUMMARY_BUCKETS.items():
            if result.verdict in verdicts:
                counts[bucket] += 1
                break
    return counts


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class RunReport:
    results: tuple[ProbeResult, ...] = ()
    when: str = field(default_factory=_utc_timestamp)

    @classmethod
    def from_results(cls, results: Iterable[ProbeResult], *, when: str | None = None) -> RunReport:
        if when is None:
            return cls(results=tuple(results))
        return cls(results=tuple(results), when=when)

    @property
    def summary(self) -> dict[str, int]:
        return summarize(self.results)

    def by_key(self) -> dict[str, ProbeResult]:
        return {result.key: result for result in self.results}

    def to_dict(self) -> dict[str, Any]:
        return {
            "when": self.when,
            "summary": self.summary,
            "results": [result.to_dict() for result in self.results],
        }

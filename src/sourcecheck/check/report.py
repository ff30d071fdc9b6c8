# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Console output and report persistence."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from ..models import ProbeResult, RunReport, Verdict

_SUMMARY_LABELS = {
    "PASS": "PASS",
    "MAYBE": "MAYBE",
    "XML/HTML": "XML/HTML (likely incompatible)",
    "UNKNOWN/TEXT": "UNKNOWN/TEXT",
    "FAIL/EMPTY": "FAIL/EMPTY",
}


def verdict_mark(verdict: Verdict) -> str:
    if verdict is Verdict.PASS:
        return "✅"
    if verdict is Verdict.OK_MAYBE:
        return "🟡"
    return "❌"


def format_progress_line(index: int, total: int, result: ProbeResult) -> str:
    status = result.status or ""
    return (
        f"{verdict_mark(result.verdict)} [{index}/{total}] {result.key} - {result.name} "
        f"({result.ms}ms) -> {result.verdict.value} {status} {result.detail}"
    )


class ProgressPrinter:
    """Prints one line per completed probe."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def __call__(self, index: int, total: int, result: ProbeResult) -> None:
        print(format_progress_line(index, total, result), file=self.stream or sys.stdout, flush=True)


def format_summary(report: RunReport) -> str:
    lines = ["===== SUMMARY ====="]
    for bucket, count in report.summary.items():
        lines.append(f"{_SUMMARY_LABELS.get(bucket, bucket)}: {count}")
    return "\n".join(lines)


def dump_report(report: RunReport) -> str:
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)


def write_report(report: RunReport, path: Path) -> Path:
    """Write the report JSON, replacing any previous file at ``path``."""
    path.write_text(dump_report(report), encoding="utf-8")
    return path


__all__ = [
    "ProgressPrinter",
    "dump_report",
    "format_progress_line",
    "format_summary",
    "verdict_mark",
    "write_report",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for SourceCheck."""

from .endpoint import Endpoint
from .probe import ProbeResult, Shape, ShapeJudgement, Verdict
from .report import SUMMARY_BUCKETS, RunReport, summarize

__all__ = [
    "Endpoint",
    "ProbeResult",
    "RunReport",
    "SUMMARY_BUCKETS",
    "Shape",
    "ShapeJudgement",
    "Verdict",
    "summarize",
]

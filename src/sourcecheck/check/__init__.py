# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe, classify and report on configured endpoints."""

from .classify import classify
from .probe import check_endpoint, judge, probe
from .report import ProgressPrinter, format_summary, write_report
from .runner import CheckRunner

__all__ = [
    "CheckRunner",
    "ProgressPrinter",
    "check_endpoint",
    "classify",
    "format_summary",
    "judge",
    "probe",
    "write_report",
]

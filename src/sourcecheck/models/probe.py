# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe result models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..errors import ErrorCategory


class Verdict(str, Enum):
    PASS = "pass"
    OK_MAYBE = "ok_maybe"
    XML_OR_HTML = "xml_or_html"
    UNKNOWN = "unknown"
    TEXT = "text"
    FAIL = "fail"
    EMPTY = "empty"


class Shape(str, Enum):
    """Response body shape as seen by the classifier."""

    OK = "ok"
    OK_MAYBE = "ok_maybe"
    UNKNOWN = "unknown"
    XML_OR_HTML = "xml_or_html"
    TEXT = "text"
    EMPTY = "empty"

    def to_verdict(self) -> Verdict:
        if self is Shape.OK:
            return Verdict.PASS
        return Verdict(self.value)


@dataclass(frozen=True)
class ShapeJudgement:
    shape: Shape
    detail: str


@dataclass(frozen=True)
class ProbeResult:
    key: str
    name: str
    base: str
    test_url: str
    verdict: Verdict
    status: int = 0
    ms: int = 0
    detail: str = ""
    error_category: ErrorCategory | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "key": self.key,
            "name": self.name,
            "base": self.base,
            "testUrl": self.test_url,
            "verdict": self.verdict.value,
            "status": self.status,
            "ms": self.ms,
            "detail": self.detail,
        }
        if self.error_category is not None:
            data["errorCategory"] = self.error_category.value
        return data

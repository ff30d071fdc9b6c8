# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response-shape classifier for AppleCMS-style search responses."""

from __future__ import annotations

import json
from collections.abc import Mapping

from ..models import Shape, ShapeJudgement


def classify(body: str | None) -> ShapeJudgement:
    """
    Classify a response body by shape.

    JSON bodies are judged by their top-level fields (``list`` beats ``data``
    beats ``code``/``total``). Non-JSON bodies are markup, plain text, or empty.
    """
    text = body or ""
    try:
        payload = json.loads(text)
    except (ValueError, RecursionError):
        # Deeply nested arrays exhaust the decoder stack; treat them as unparsable.
        if text.strip().startswith("<"):
            return ShapeJudgement(Shape.XML_OR_HTML, "Non-JSON response (XML/HTML)")
        if text:
            return ShapeJudgement(Shape.TEXT, "Plain text response")
        return ShapeJudgement(Shape.EMPTY, "Empty body")

    if isinstance(payload, Mapping):
        if isinstance(payload.get("list"), list):
            return ShapeJudgement(Shape.OK, "JSON with list[]")
        if isinstance(payload.get("data"), list):
            return ShapeJudgement(Shape.OK_MAYBE, "JSON with data[]")
        if "code" in payload or "total" in payload:
            return ShapeJudgement(Shape.OK_MAYBE, "JSON with code/total")
    return ShapeJudgement(Shape.UNKNOWN, "JSON but unknown shape")


__all__ = ["classify"]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Endpoint descriptor model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    """One configured search API: unique key, display name, base URL."""

    key: str
    name: str
    api: str

    @classmethod
    def from_mapping(cls, key: str, data: Any) -> Endpoint:
        """Build from an ``api_site`` entry, tolerating missing fields."""
        site: Mapping[str, Any] = data if isinstance(data, Mapping) else {}
        name = site.get("name")
        api = site.get("api")
        return cls(
            key=key,
            name=str(name) if name else key,
            api="" if api is None else str(api),
        )

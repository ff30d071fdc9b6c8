# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for SourceCheck."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .models.endpoint import Endpoint

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122 Safari/537.36"
)
DEFAULT_ACCEPT = "application/json, text/plain;q=0.9, */*;q=0.8"
DEFAULT_CONFIG_FILENAME = "config.json"
DEFAULT_REPORT_FILENAME = "source-check-report.json"


@dataclass
class CheckSettings:
    """Run defaults. CLI flags override individual fields."""

    timeout: float = 10.0
    concurrency: int = 8
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024
    config_path: str = DEFAULT_CONFIG_FILENAME
    report_path: str = DEFAULT_REPORT_FILENAME
    test_query: str = "test"

    @property
    def timeout_ms(self) -> int:
        return int(round(self.timeout * 1000))

    @property
    def worker_count(self) -> int:
        return max(1, int(self.concurrency))

    def resolve(self, path: str, cwd: Path | None = None) -> Path:
        """Resolve a configured path against the working directory."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return (cwd or Path.cwd()) / candidate


def load_settings(**overrides: Any) -> CheckSettings:
    """Build settings from defaults, ignoring None-valued overrides."""
    filtered = {key: value for key, value in overrides.items() if value is not None}
    return CheckSettings(**filtered)


def load_site_config(path: Path) -> dict[str, Any]:
    """Read and parse the site config file. Raises ConfigError on any failure."""
    if not path.exists():
        raise ConfigError(f"config.json not found at {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path.name}: top-level value must be an object")
    return data


def endpoints_from_config(config: Mapping[str, Any]) -> list[Endpoint]:
    """Turn the ``api_site`` mapping into endpoint descriptors, keeping file order."""
    sites = config.get("api_site") if isinstance(config, Mapping) else None
    if not isinstance(sites, Mapping):
        if sites is not None:
            logger.warning("api_site is not an object; ignoring it")
        return []
    endpoints: list[Endpoint] = []
    for key, site in sites.items():
        endpoints.append(Endpoint.from_mapping(str(key), site))
    return endpoints


def load_endpoints(path: Path) -> list[Endpoint]:
    return endpoints_from_config(load_site_config(path))


__all__ = [
    "CheckSettings",
    "DEFAULT_ACCEPT",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_REPORT_FILENAME",
    "DEFAULT_USER_AGENT",
    "endpoints_from_config",
    "load_endpoints",
    "load_settings",
    "load_site_config",
]

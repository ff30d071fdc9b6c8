# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
SourceCheck package entrypoint.

GET-only health checks for AppleCMS-style video search APIs. Every configured
source is probed once under bounded concurrency, its response shape is
classified, and the verdicts are written to a JSON report. HTTP behavior is
abstracted behind an injectable async client interface.
"""

from .check import CheckRunner, classify
from .config import CheckSettings, load_endpoints, load_settings
from .errors import ConfigError, ErrorCategory, SourceCheckError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    build_test_url,
    create_default_http_client,
)
from .log import setup_logging
from .models import Endpoint, ProbeResult, RunReport, Verdict
from .runtime import SourceChecker
from .version import __version__

__all__ = [
    "CheckRunner",
    "CheckSettings",
    "ConfigError",
    "Endpoint",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeResult",
    "RunReport",
    "SourceCheckError",
    "SourceChecker",
    "StubHttpClient",
    "Verdict",
    "build_test_url",
    "classify",
    "create_default_http_client",
    "load_endpoints",
    "load_settings",
    "setup_logging",
    "__version__",
]

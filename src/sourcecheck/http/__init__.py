# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import DEFAULT_TEST_QUERY, build_test_url

__all__ = [
    "DEFAULT_TEST_QUERY",
    "Headers",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "StubHttpClient",
    "build_test_url",
    "create_default_http_client",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import asyncio
import socket
import ssl
from enum import Enum

import httpx


class SourceCheckError(Exception):
    """Base class for fatal SourceCheck errors."""


class ConfigError(SourceCheckError):
    """The site config is missing or cannot be parsed."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, (httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return ErrorCategory.TIMEOUT

    # httpx wraps socket/ssl failures in ConnectError; look at the cause first.
    cause = exc.__cause__ or exc.__context__
    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)) or isinstance(cause, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, socket.gaierror) or isinstance(cause, socket.gaierror):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.HTTPStatusError):
        return ErrorCategory.HTTP_ERROR

    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError, httpx.ProxyError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def categorize_status(status_code: int | None) -> ErrorCategory | None:
    """Category for a completed response; None for 2xx."""
    if status_code is None:
        return ErrorCategory.UNKNOWN_ERROR
    if 200 <= status_code < 300:
        return None
    return ErrorCategory.HTTP_ERROR


__all__ = [
    "ConfigError",
    "ErrorCategory",
    "SourceCheckError",
    "categorize_exception",
    "categorize_status",
]

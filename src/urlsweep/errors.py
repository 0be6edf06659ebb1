# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class SweepError(Exception):
    """Fatal condition that stops a sweep before any URL is probed."""


class ConfigurationError(SweepError):
    pass


class InputNotFound(SweepError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"URL list not found: {self.path}")


class NoValidURLs(SweepError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"No valid http:// or https:// URLs found in {self.path}")


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    PROTOCOL_ERROR = "PROTOCOL_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


_SSL_MARKERS = ("certificate", "ssl", "tls")
_DNS_MARKERS = ("name or service not known", "nodename nor servname", "getaddrinfo failed", "name resolution")


def _chained(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    current: BaseException | None = exc
    while current is not None and current not in chain:
        chain.append(current)
        current = current.__cause__ or current.__context__
    return chain


def categorize_exception(exc: Exception) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps socket and ssl failures in ConnectError, so the cause chain and
    message are inspected before falling back to the generic connection bucket.
    """
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    chain = _chained(exc)
    if any(isinstance(item, (ssl_module.SSLError, ssl_module.CertificateError)) for item in chain):
        return ErrorCategory.SSL_ERROR
    if any(isinstance(item, (socket.gaierror, socket.herror)) for item in chain):
        return ErrorCategory.DNS_ERROR

    message = str(exc).lower()
    if isinstance(exc, (httpx.ConnectError, httpx.ProxyError)):
        if any(marker in message for marker in _SSL_MARKERS):
            return ErrorCategory.SSL_ERROR
        if any(marker in message for marker in _DNS_MARKERS):
            return ErrorCategory.DNS_ERROR
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (httpx.RemoteProtocolError, httpx.LocalProtocolError, httpx.HTTPStatusError)):
        return ErrorCategory.PROTOCOL_ERROR

    if isinstance(exc, (httpx.NetworkError, ConnectionError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Request timed out",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.PROTOCOL_ERROR: "HTTP protocol error",
        ErrorCategory.UNKNOWN_ERROR: "Request failed",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed")

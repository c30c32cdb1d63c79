# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum
from typing import Any

import httpx


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    RESPONSE_TOO_LARGE = "RESPONSE_TOO_LARGE"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


class BodyTooLargeError(Exception):
    """Raised while streaming when an upstream body exceeds the configured cap."""

    def __init__(self, limit: int):
        super().__init__(f"Response body exceeds limit of {limit} bytes")
        self.limit = limit


def _is_dns_failure(exc: BaseException) -> bool:
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        if isinstance(current, (socket.gaierror, socket.herror)):
            return True
        seen.add(id(current))
        current = current.__cause__ or current.__context__
    return False


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    if isinstance(exc, BodyTooLargeError):
        return ErrorCategory.RESPONSE_TOO_LARGE

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if _is_dns_failure(exc):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, httpx.ConnectError) and "CERTIFICATE_VERIFY_FAILED" in str(exc):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.timeout, TimeoutError)):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout while contacting the site",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.RESPONSE_TOO_LARGE: "Response body too large",
        ErrorCategory.UNKNOWN_ERROR: "Failed to reach website",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Failed to reach website")


class FrameCheckError(Exception):
    """Base class for failures surfaced to proxy callers."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message}


class InvalidInputError(FrameCheckError):
    """Target URL missing or malformed; no network attempt was made."""

    status_code = 400


class UpstreamError(FrameCheckError):
    """Upstream answered, but with a non-success terminal status."""

    def __init__(self, status_code: int, status_text: str = ""):
        self.upstream_status = status_code
        self.status_text = status_text
        self.status_code = status_code
        super().__init__(f"Failed to fetch: {status_code} {status_text}".rstrip())


class NetworkError(FrameCheckError):
    """DNS, connect, TLS, timeout or any other transport failure."""

    status_code = 500

    def __init__(self, detail: str, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR):
        self.detail = detail
        self.category = category
        super().__init__(f"Proxy error: {detail}")


__all__ = [
    "BodyTooLargeError",
    "ErrorCategory",
    "FrameCheckError",
    "InvalidInputError",
    "NetworkError",
    "UpstreamError",
    "categorize_exception",
    "error_category_to_reason",
]

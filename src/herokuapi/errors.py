# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .http.models import HttpResponse


class HerokuError(Exception):
    """Base class for every error raised by herokuapi itself."""


class RequestBuildError(HerokuError):
    """The request could not be assembled (bad URL, unencodable body)."""


class StatusError(HerokuError):
    """The API answered with a status code outside 2xx."""

    def __init__(self, message: str, response: HttpResponse):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def reason(self) -> str:
        return self.response.reason


class UnauthorizedError(StatusError):
    """401 and 403 responses."""

    def __init__(self, response: HttpResponse):
        super().__init__("Unauthorized", response)


class UnexpectedStatusError(StatusError):
    def __init__(self, response: HttpResponse):
        super().__init__(f"Unexpected error: {response.status_line}", response)


class DecodeError(HerokuError, ValueError):
    """Response body was not valid JSON."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    HTTP_ERROR = "HTTP_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map herokuapi/httpx/stdlib exceptions to ErrorCategory.
    """
    if isinstance(exc, UnauthorizedError):
        return ErrorCategory.UNAUTHORIZED

    if isinstance(exc, StatusError):
        return ErrorCategory.HTTP_ERROR

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    cause = exc.__cause__ or exc.__context__
    if isinstance(exc, httpx.ConnectError) and cause is not None:
        nested = categorize_exception(cause)
        if nested in (ErrorCategory.DNS_ERROR, ErrorCategory.SSL_ERROR):
            return nested

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ssl.SSLError, ssl.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, ConnectionError):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout talking to the API",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.UNAUTHORIZED: "Unauthorized",
        ErrorCategory.HTTP_ERROR: "API returned an error status",
        ErrorCategory.UNKNOWN_ERROR: "Request failed",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed")


__all__ = [
    "DecodeError",
    "ErrorCategory",
    "HerokuError",
    "RequestBuildError",
    "StatusError",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "categorize_exception",
    "error_category_to_reason",
]

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
herokuapi package entrypoint.

A small client for the Heroku Platform API (v3). Requests are built with the
service's Accept header, a fresh Request-Id and basic auth, sent through an
injectable transport (httpx by default), and responses are validated and
decoded according to an explicit body/target variant.
"""

from .bodies import DecodeJson, Discard, JsonBody, NoBody, RawBody, WriteTo
from .client import Client, check_response
from .config import DEFAULT_API_URL, ClientSettings, load_client_settings
from .errors import (
    DecodeError,
    HerokuError,
    RequestBuildError,
    StatusError,
    UnauthorizedError,
    UnexpectedStatusError,
)
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient
from .log import setup_logging
from .version import __version__

__all__ = [
    "Client",
    "ClientSettings",
    "DEFAULT_API_URL",
    "DecodeError",
    "DecodeJson",
    "Discard",
    "HerokuError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "JsonBody",
    "NoBody",
    "RawBody",
    "RequestBuildError",
    "StatusError",
    "StubHttpClient",
    "UnauthorizedError",
    "UnexpectedStatusError",
    "WriteTo",
    "check_response",
    "load_client_settings",
    "setup_logging",
    "__version__",
]

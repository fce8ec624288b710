# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import (
    HttpClient,
    close_default_http_client,
    create_default_http_client,
    get_default_http_client,
)
from .dump import dump_request_out, dump_response
from .headers import apply_header_overrides, basic_auth_value, header_value, set_header
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import build_api_url, normalize_base_url

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "apply_header_overrides",
    "basic_auth_value",
    "build_api_url",
    "close_default_http_client",
    "create_default_http_client",
    "dump_request_out",
    "dump_response",
    "get_default_http_client",
    "header_value",
    "normalize_base_url",
    "set_header",
]

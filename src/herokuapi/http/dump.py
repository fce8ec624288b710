# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wire-format dumps of requests and responses for debugging."""

from __future__ import annotations

from dataclasses import replace

import httpx

from .models import HttpRequest, HttpResponse

CRLF = b"\r\n"


def _header_lines(headers: dict[str, str]) -> bytes:
    return b"".join(f"{name}: {value}".encode("latin-1") + CRLF for name, value in headers.items())


def dump_request_out(request: HttpRequest) -> tuple[bytes, HttpRequest]:
    """
    Render ``request`` as it will go on the wire, including the body.

    A streamed body can only be read once, so it is buffered and the returned request
    (carrying the buffered bytes) must be sent instead of the one passed in.
    """
    body = request.body
    if body is not None and not isinstance(body, bytes):
        body = b"".join(body)
        request = replace(request, body=body)

    url = httpx.URL(request.url)
    target = url.raw_path.decode("ascii") or "/"
    head = f"{request.method} {target} HTTP/1.1".encode("ascii") + CRLF
    head += f"Host: {url.netloc.decode('ascii')}".encode("ascii") + CRLF
    head += _header_lines(request.headers)
    return head + CRLF + (body or b""), request


def dump_response(response: HttpResponse) -> bytes:
    head = f"{response.http_version} {response.status_line}".encode("latin-1") + CRLF
    head += _header_lines(response.headers)
    return head + CRLF + response.content


__all__ = ["dump_request_out", "dump_response"]

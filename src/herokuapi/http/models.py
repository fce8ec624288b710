# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models passed between the Client and its transport."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .headers import header_value

Headers = dict[str, str]
RequestContent = bytes | Iterable[bytes]


@dataclass
class HttpRequest:
    """Fully built request consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers = field(default_factory=dict)
    body: RequestContent | None = None
    timeout: float | None = None

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)


@dataclass
class HttpResponse:
    """Response whose body has already been read to completion by the transport."""

    status_code: int
    reason: str = ""
    headers: Headers = field(default_factory=dict)
    content: bytes = b""
    url: str | None = None
    http_version: str = "HTTP/1.1"

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_line(self) -> str:
        """Status code plus reason phrase, e.g. ``404 Not Found``."""
        return f"{self.status_code} {self.reason}".rstrip()

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def header(self, name: str, default: str = "") -> str:
        return header_value(self.headers, name, default)

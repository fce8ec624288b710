# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse

Responder = Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Responses are keyed by ``(method, url)``. A registered value may be an HttpResponse,
    an exception instance (raised as a transport failure) or a callable receiving the
    request. Streamed request bodies are materialized so tests can inspect them.
    """

    def __init__(self, responses: dict[tuple[str, str], HttpResponse | BaseException | Responder] | None = None):
        self._responses = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, method: str, url: str, response: HttpResponse | BaseException | Responder) -> None:
        self._responses[(method.upper(), url)] = response

    def request(self, request: HttpRequest) -> HttpResponse:
        if request.body is not None and not isinstance(request.body, bytes):
            request.body = b"".join(request.body)
        self.requests.append(request)
        registered = self._responses.get((request.method.upper(), request.url))
        if registered is None:
            return HttpResponse(status_code=404, reason="Not Found", content=b'{"id":"not_found"}', url=request.url)
        if isinstance(registered, BaseException):
            raise registered
        if callable(registered):
            return registered(request)
        return registered

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]

    def close(self) -> None:
        self.closed = True

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import ClientSettings, load_client_settings
from .client import HttpClient
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper. Safe to share between threads."""

    def __init__(self, settings: ClientSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_client_settings()
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        timeout = request.timeout if request.timeout is not None else self.settings.timeout

        # The body is read inside the stream context so the connection goes back to
        # the pool on every exit path; transport errors propagate unchanged.
        with self._client.stream(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
            timeout=timeout,
        ) as resp:
            content = resp.read()

        return HttpResponse(
            status_code=resp.status_code,
            reason=resp.reason_phrase,
            headers=dict(resp.headers),
            content=content,
            url=str(resp.url),
            http_version=resp.http_version,
        )

    def close(self) -> None:
        self._client.close()

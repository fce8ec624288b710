# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport abstraction, factory and the process-wide shared transport."""

from __future__ import annotations

import threading
from typing import Protocol

from ..config import ClientSettings, load_client_settings
from .models import HttpRequest, HttpResponse


class HttpClient(Protocol):
    """
    Minimal protocol for sending a built request.

    Implementations must read the response body to completion before returning and
    let transport failures propagate as exceptions.
    """

    def request(self, request: HttpRequest) -> HttpResponse: ...

    def close(self) -> None:  # pragma: no cover - optional for adapters
        ...


_default_client: HttpClient | None = None
_default_lock = threading.Lock()


def create_default_http_client(settings: ClientSettings | None = None) -> HttpClient:
    """Factory for the default httpx-backed client."""
    from .httpx_client import HttpxClient

    return HttpxClient(settings or load_client_settings())


def get_default_http_client() -> HttpClient:
    """
    Return the shared transport used by clients constructed without one.

    It is built from default ClientSettings, never the environment, so it always
    verifies certificates.
    """
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = create_default_http_client(ClientSettings())
        return _default_client


def close_default_http_client() -> None:
    global _default_client
    with _default_lock:
        client, _default_client = _default_client, None
    if client is not None:
        client.close()

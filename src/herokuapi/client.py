# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Heroku Platform API client."""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Any, TextIO

from .bodies import Body, DecodeJson, Discard, Target, as_body, as_target, decode_content, encode_body
from .config import ClientSettings, load_client_settings
from .errors import UnauthorizedError, UnexpectedStatusError
from .http.client import HttpClient, create_default_http_client, get_default_http_client
from .http.dump import dump_request_out, dump_response
from .http.headers import apply_header_overrides, basic_auth_value
from .http.models import HttpRequest, HttpResponse
from .http.url import build_api_url

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.heroku+json; version=3"
WARNING_HEADER = "X-Heroku-Warning"

_JSON = DecodeJson()
_DISCARD = Discard()


def check_response(response: HttpResponse) -> None:
    """Raise for 401/403 and any other status outside 2xx."""
    if response.status_code in (401, 403):
        raise UnauthorizedError(response)
    if not response.ok:
        raise UnexpectedStatusError(response)


class Client:
    """
    Heroku API client.

    Settings are immutable and the transport is safe for concurrent use, so one Client
    can serve many threads. Without an explicit transport the process-wide shared
    HttpxClient is used; clients should be reused rather than created per call.

    Request bodies (see ``herokuapi.bodies``):

        None / NoBody         no body
        bytes / file / RawBody  sent verbatim
        anything else / JsonBody  encoded as application/json

    Response targets:

        None / Discard        body is discarded
        writable / WriteTo    body is copied into the sink
        callable / DecodeJson body is decoded as JSON (and passed to the callable)
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        http_client: HttpClient | None = None,
        *,
        diagnostic_stream: TextIO | None = None,
    ):
        self.settings = settings or load_client_settings()
        self.owns_transport = False
        if http_client is None:
            if self.settings.verify_ssl:
                http_client = get_default_http_client()
            else:
                http_client = create_default_http_client(self.settings)
                self.owns_transport = True
        self.http_client = http_client
        self._diagnostic_stream = diagnostic_stream

    @classmethod
    def from_env(cls, http_client: HttpClient | None = None) -> Client:
        return cls(load_client_settings(), http_client)

    @property
    def diagnostic_stream(self) -> TextIO:
        return self._diagnostic_stream or sys.stderr

    def get(self, path: str, target: Any = _JSON, *, timeout: float | None = None) -> Any:
        return self.api_request("GET", path, None, target, timeout=timeout)

    def post(self, path: str, body: Any = None, target: Any = _JSON, *, timeout: float | None = None) -> Any:
        return self.api_request("POST", path, body, target, timeout=timeout)

    def put(self, path: str, body: Any = None, target: Any = _JSON, *, timeout: float | None = None) -> Any:
        return self.api_request("PUT", path, body, target, timeout=timeout)

    def patch(self, path: str, body: Any = None, target: Any = _JSON, *, timeout: float | None = None) -> Any:
        return self.api_request("PATCH", path, body, target, timeout=timeout)

    def delete(self, path: str, *, timeout: float | None = None) -> None:
        self.api_request("DELETE", path, None, _DISCARD, timeout=timeout)

    def new_request(
        self,
        method: str,
        path: str,
        body: Body | Any = None,
        *,
        timeout: float | None = None,
    ) -> HttpRequest:
        """
        Build, but do not send, a request for the API.

        Operator header overrides are applied last and win over every built-in header.
        Raises RequestBuildError for an unusable URL or a body that cannot be encoded.
        """
        content, content_type = encode_body(as_body(body))
        url = build_api_url(self.settings.base_url, path)

        headers = {
            "Accept": ACCEPT_HEADER,
            "Request-Id": str(uuid.uuid4()),
            "User-Agent": self.settings.user_agent,
        }
        if content_type:
            headers["Content-Type"] = content_type
        headers["Authorization"] = basic_auth_value(self.settings.username, self.settings.password)
        apply_header_overrides(headers, self.settings.header_overrides)

        return HttpRequest(
            url=url,
            method=method.upper(),
            headers=headers,
            body=content,
            timeout=timeout if timeout is not None else self.settings.timeout,
        )

    def api_request(
        self,
        method: str,
        path: str,
        body: Body | Any = None,
        target: Target | Any = None,
        *,
        timeout: float | None = None,
    ) -> Any:
        """Build and send a request, returning the response shaped by ``target``."""
        request = self.new_request(method, path, body, timeout=timeout)
        return self.do_request(request, target)

    def do_request(self, request: HttpRequest, target: Target | Any = None) -> Any:
        """
        Send ``request``, validate the status and shape the body according to ``target``.

        Transport exceptions from the HttpClient propagate unchanged.
        """
        resolved = as_target(target)
        debug = self.settings.debug
        if debug:
            request = self._dump_request(request)

        response = self.http_client.request(request)
        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        if debug:
            self._dump_response(response)

        check_response(response)
        warning = response.header(WARNING_HEADER)
        if warning:
            self.diagnostic_stream.write(warning + "\n")
        return decode_content(response.content, resolved)

    def _dump_request(self, request: HttpRequest) -> HttpRequest:
        try:
            dump, request = dump_request_out(request)
        except (OSError, ValueError) as exc:
            logger.warning("cannot dump request: %s", exc)
            return request
        self.diagnostic_stream.write(dump.decode("utf-8", errors="replace") + "\n\n")
        return request

    def _dump_response(self, response: HttpResponse) -> None:
        try:
            dump = dump_response(response)
        except ValueError as exc:
            logger.warning("cannot dump response: %s", exc)
            return
        self.diagnostic_stream.write(dump.decode("utf-8", errors="replace") + "\n")

    def close(self) -> None:
        if self.owns_transport:
            self.http_client.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

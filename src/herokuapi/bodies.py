# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request body and response target variants.

A request body is one of NoBody, RawBody or JsonBody; a response target is one of
Discard, WriteTo or DecodeJson. The Client branches on these classes only, so every
encode and decode path is explicit. ``as_body``/``as_target`` lift plain Python values
into a variant at the public surface.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import IO, Any, Protocol, Union

from .errors import DecodeError, RequestBuildError

JSON_CONTENT_TYPE = "application/json"
STREAM_CHUNK_SIZE = 64 * 1024


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> Any: ...


@dataclass(frozen=True)
class NoBody:
    pass


@dataclass(frozen=True)
class RawBody:
    """Bytes or a binary stream sent as-is, without a Content-Type."""

    data: bytes | bytearray | IO[bytes]


@dataclass(frozen=True)
class JsonBody:
    value: Any


Body = Union[NoBody, RawBody, JsonBody]


@dataclass(frozen=True)
class Discard:
    pass


@dataclass(frozen=True)
class WriteTo:
    sink: ByteSink


@dataclass(frozen=True)
class DecodeJson:
    """Parse the body as JSON, optionally passing the document through ``into``."""

    into: Callable[[Any], Any] | None = None


Target = Union[Discard, WriteTo, DecodeJson]

_BODY_TYPES = (NoBody, RawBody, JsonBody)
_TARGET_TYPES = (Discard, WriteTo, DecodeJson)


def as_body(value: Any) -> Body:
    if isinstance(value, _BODY_TYPES):
        return value
    if value is None:
        return NoBody()
    if isinstance(value, (bytes, bytearray)) or callable(getattr(value, "read", None)):
        return RawBody(value)
    return JsonBody(value)


def as_target(value: Any) -> Target:
    if isinstance(value, _TARGET_TYPES):
        return value
    if value is None:
        return Discard()
    if callable(getattr(value, "write", None)):
        return WriteTo(value)
    if callable(value):
        return DecodeJson(into=value)
    raise TypeError(f"unsupported response target: {type(value).__name__}")


def _iter_stream(stream: IO[bytes]) -> Iterator[bytes]:
    while True:
        chunk = stream.read(STREAM_CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def encode_body(body: Body) -> tuple[bytes | Iterator[bytes] | None, str | None]:
    """Return ``(content, content_type)`` for the transport."""
    if isinstance(body, NoBody):
        return None, None
    if isinstance(body, RawBody):
        if isinstance(body.data, (bytes, bytearray)):
            return bytes(body.data), None
        return _iter_stream(body.data), None
    if isinstance(body, JsonBody):
        try:
            encoded = json.dumps(body.value, separators=(",", ":"), allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"cannot encode request body as JSON: {exc}") from exc
        return encoded.encode("utf-8"), JSON_CONTENT_TYPE
    raise TypeError(f"unsupported request body: {type(body).__name__}")


def decode_content(content: bytes, target: Target) -> Any:
    """Apply ``target`` to a fully read response body."""
    if isinstance(target, Discard):
        return None
    if isinstance(target, WriteTo):
        target.sink.write(content)
        return len(content)
    if isinstance(target, DecodeJson):
        try:
            document = json.loads(content)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodeError(f"invalid JSON in response body: {exc}") from exc
        return target.into(document) if target.into is not None else document
    raise TypeError(f"unsupported response target: {type(target).__name__}")


__all__ = [
    "Body",
    "ByteSink",
    "Discard",
    "DecodeJson",
    "JsonBody",
    "NoBody",
    "RawBody",
    "Target",
    "WriteTo",
    "as_body",
    "as_target",
    "decode_content",
    "encode_body",
]

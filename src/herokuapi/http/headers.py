# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110). Requests and responses keep
headers as plain dicts, so reads and writes go through these helpers to match names
regardless of casing.
"""

from __future__ import annotations

import base64
from collections.abc import Iterable, Mapping, MutableMapping


def header_value(headers: Mapping[str, str] | None, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths the exact casing before falling back to a full scan.
    """
    if not headers or not name:
        return default
    if name in headers:
        return str(headers[name]).strip()
    lower = name.lower()
    for key, value in headers.items():
        if str(key).lower() == lower:
            return str(value).strip()
    return default


def set_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set ``name`` to ``value``, dropping any existing entry that differs only in case."""
    lower = name.lower()
    for key in [k for k in headers if k.lower() == lower]:
        del headers[key]
    headers[name] = value


def apply_header_overrides(headers: MutableMapping[str, str], overrides: Iterable[tuple[str, str]]) -> None:
    for name, value in overrides:
        set_header(headers, name, value)


def basic_auth_value(username: str, password: str) -> str:
    """``Authorization`` value for HTTP basic auth (RFC 7617)."""
    token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


__all__ = [
    "apply_header_overrides",
    "basic_auth_value",
    "header_value",
    "set_header",
]

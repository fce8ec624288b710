# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers for building API endpoints."""

from __future__ import annotations

import httpx

from ..config import DEFAULT_API_URL
from ..errors import RequestBuildError


def normalize_base_url(base_url: str | None) -> str:
    """
    Strip trailing slashes; an empty value falls back to the public API origin.

    Example:
      https://api.heroku.com/ -> https://api.heroku.com
    """
    trimmed = str(base_url or "").rstrip("/")
    return trimmed or DEFAULT_API_URL


def build_api_url(base_url: str | None, path: str) -> str:
    """
    Append ``path`` verbatim to the normalized base URL.

    Raises RequestBuildError when the result is not an absolute http(s) URL.
    """
    url = normalize_base_url(base_url) + (path or "")
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise RequestBuildError(f"invalid URL {url!r}: {exc}") from exc
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise RequestBuildError(f"invalid URL {url!r}: expected an absolute http(s) URL")
    return url


__all__ = ["build_api_url", "normalize_base_url"]

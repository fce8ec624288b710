# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for herokuapi."""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass

from .version import __version__

DEFAULT_API_URL = "https://api.heroku.com"
DEFAULT_USER_AGENT = f"herokuapi/{__version__} {platform.system().lower()} {platform.machine().lower()}"

HeaderOverrides = tuple[tuple[str, str], ...]


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_header_overrides(raw: str | None) -> HeaderOverrides:
    """
    Parse newline-separated ``Name: Value`` lines.

    Lines without a colon are skipped. Values may themselves contain colons or
    semicolons (e.g. ``Accept: application/vnd.heroku+json; version=3``).
    """
    if not raw:
        return ()
    pairs: list[tuple[str, str]] = []
    for line in raw.splitlines():
        name, sep, value = line.partition(":")
        if not sep:
            continue
        name = name.strip()
        if not name:
            continue
        pairs.append((name, value.strip()))
    return tuple(pairs)


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings shared read-only by every call a Client makes."""

    base_url: str = DEFAULT_API_URL
    username: str = ""
    password: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 30.0
    verify_ssl: bool = True
    debug: bool = False
    header_overrides: HeaderOverrides = ()

    @classmethod
    def from_env(cls) -> ClientSettings:
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("HEROKU_HTTP_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            base_url=os.getenv("HEROKU_API_URL") or cls.base_url,
            username=os.getenv("HEROKU_API_USER", cls.username),
            password=os.getenv("HEROKU_API_KEY", cls.password),
            user_agent=os.getenv("HEROKU_USER_AGENT") or cls.user_agent,
            timeout=timeout,
            verify_ssl=_bool_env("HEROKU_HTTP_VERIFY_SSL", cls.verify_ssl),
            debug=bool(os.getenv("HKDEBUG")),
            header_overrides=parse_header_overrides(os.getenv("HKHEADER")),
        )


def load_client_settings() -> ClientSettings:
    """Load client settings from environment with sensible defaults."""
    return ClientSettings.from_env()

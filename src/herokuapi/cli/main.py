# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""herokuapi CLI: issue a raw Heroku API call and print the response."""

from __future__ import annotations

import argparse
import dataclasses
import io
import json
import sys
from typing import Any

import httpx

from ..bodies import DecodeJson, NoBody, RawBody, WriteTo, decode_content
from ..client import Client
from ..config import ClientSettings, load_client_settings
from ..errors import DecodeError, HerokuError, categorize_exception, error_category_to_reason
from ..log import setup_logging

METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a request to the Heroku Platform API")
    parser.add_argument("method", type=str.upper, choices=METHODS, help="HTTP method")
    parser.add_argument("path", help="API path, e.g. /apps")
    body = parser.add_mutually_exclusive_group()
    body.add_argument("--data", "-d", help="JSON request body")
    body.add_argument("--data-file", help="Send the contents of FILE verbatim ('-' for stdin)")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write the response body to stdout unchanged instead of pretty-printing JSON",
    )
    parser.add_argument("--api-url", help="Override HEROKU_API_URL")
    parser.add_argument("--debug", action="store_true", help="Dump requests and responses to stderr (like HKDEBUG)")
    parser.add_argument("--log-level", help="Logging level (default: HEROKU_LOG_LEVEL or WARNING)")
    return parser


def _apply_args(settings: ClientSettings, args: argparse.Namespace) -> ClientSettings:
    overrides: dict[str, Any] = {}
    if args.api_url:
        overrides["base_url"] = args.api_url
    if args.debug:
        overrides["debug"] = True
    return dataclasses.replace(settings, **overrides) if overrides else settings


def _print_json(data: Any) -> None:
    json.dump(data, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.data is not None:
        try:
            body: Any = json.loads(args.data)
        except json.JSONDecodeError as exc:
            parser.error(f"--data is not valid JSON: {exc}")
    elif args.data_file == "-":
        body = RawBody(sys.stdin.buffer)
    elif args.data_file:
        with open(args.data_file, "rb") as fh:
            body = RawBody(fh.read())
    else:
        body = NoBody()

    settings = _apply_args(load_client_settings(), args)
    buffer = io.BytesIO()

    with Client(settings) as client:
        try:
            client.api_request(args.method, args.path, body, WriteTo(buffer))
        except (HerokuError, httpx.HTTPError) as exc:
            reason = error_category_to_reason(categorize_exception(exc))
            detail = str(exc)
            message = detail if not reason or reason == detail else f"{reason}: {detail}"
            print(f"herokuapi: {message}", file=sys.stderr)
            return 1

    content = buffer.getvalue()
    if args.raw:
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
    elif content.strip():
        try:
            result = decode_content(content, DecodeJson())
        except DecodeError:
            sys.stdout.write(content.decode("utf-8", errors="replace") + "\n")
        else:
            _print_json(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

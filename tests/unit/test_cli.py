# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import json

import httpx
import pytest

from herokuapi.cli import main as cli_main
from herokuapi.cli.main import build_parser
from herokuapi.client import Client
from herokuapi.http.adapters import StubHttpClient
from herokuapi.http.models import HttpResponse

BASE = "https://api.example.com"


@pytest.fixture
def stub(monkeypatch):
    stub = StubHttpClient()
    monkeypatch.setenv("HEROKU_API_URL", BASE)
    monkeypatch.delenv("HKDEBUG", raising=False)
    monkeypatch.delenv("HKHEADER", raising=False)
    monkeypatch.setattr(cli_main, "setup_logging", lambda level=None: None)
    monkeypatch.setattr(cli_main, "Client", lambda settings: Client(settings, stub))
    return stub


def test_build_parser():
    parser = build_parser()
    args = parser.parse_args(["post", "/apps", "--data", '{"name":"x"}', "--debug"])
    assert args.method == "POST"
    assert args.path == "/apps"
    assert args.data == '{"name":"x"}'
    assert args.debug is True
    assert args.raw is False

    with pytest.raises(SystemExit):
        parser.parse_args(["TRACE", "/apps"])
    with pytest.raises(SystemExit):
        parser.parse_args(["POST", "/apps", "--data", "{}", "--data-file", "body.json"])


def test_cli_get_pretty_prints_json(stub, capsys):
    stub.add("GET", f"{BASE}/apps", HttpResponse(status_code=200, content=b'[{"name":"web","id":"1"}]'))
    assert cli_main.main(["GET", "/apps"]) == 0
    out = capsys.readouterr().out
    assert json.loads(out) == [{"id": "1", "name": "web"}]
    assert '\n    "id": "1"' in out


def test_cli_post_sends_json_body(stub, capsys):
    stub.add("POST", f"{BASE}/apps", lambda req: HttpResponse(status_code=201, content=req.body))
    assert cli_main.main(["POST", "/apps", "--data", '{"name": "x"}']) == 0
    assert stub.last_request.header("Content-Type") == "application/json"
    assert json.loads(capsys.readouterr().out) == {"name": "x"}


def test_cli_data_file_is_sent_verbatim(stub, tmp_path, capsys):
    path = tmp_path / "body.bin"
    path.write_bytes(b"raw-bytes")
    stub.add("PUT", f"{BASE}/blob", HttpResponse(status_code=200, content=b"plain text"))
    assert cli_main.main(["PUT", "/blob", "--data-file", str(path)]) == 0
    assert stub.last_request.body == b"raw-bytes"
    assert stub.last_request.header("Content-Type") == ""
    assert capsys.readouterr().out == "plain text\n"


def test_cli_empty_response_prints_nothing(stub, capsys):
    stub.add("DELETE", f"{BASE}/apps/x", HttpResponse(status_code=204))
    assert cli_main.main(["DELETE", "/apps/x"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_rejects_invalid_json_data(stub):
    with pytest.raises(SystemExit):
        cli_main.main(["POST", "/apps", "--data", "{nope"])
    assert stub.requests == []


def test_cli_reports_unauthorized(stub, capsys):
    stub.add("GET", f"{BASE}/account", HttpResponse(status_code=401, reason="Unauthorized"))
    assert cli_main.main(["GET", "/account"]) == 1
    assert capsys.readouterr().err.strip() == "herokuapi: Unauthorized"


def test_cli_reports_transport_errors(stub, capsys):
    stub.add("GET", f"{BASE}/apps", httpx.ConnectTimeout("timed out"))
    assert cli_main.main(["GET", "/apps"]) == 1
    assert capsys.readouterr().err.strip() == "herokuapi: Network timeout talking to the API: timed out"


def test_cli_api_url_flag_overrides_env(stub, capsys):
    stub.add("GET", "http://localhost:5000/apps", HttpResponse(status_code=200, content=b"[]"))
    assert cli_main.main(["GET", "/apps", "--api-url", "http://localhost:5000/"]) == 0
    assert stub.last_request.url == "http://localhost:5000/apps"
    assert json.loads(capsys.readouterr().out) == []

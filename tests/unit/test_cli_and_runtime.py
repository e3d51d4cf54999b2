# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

import json

import pytest

from install_mcp.cli import main as cli_main
from install_mcp.cli.main import build_parser, main
from install_mcp.http import HttpResponse, StubHttpClient

URL = "https://mcp.example.com/mcp"


def _install_stub(monkeypatch, post=None, get=None) -> StubHttpClient:
    stub = StubHttpClient()
    stub.add("POST", URL, post)
    stub.add("GET", URL, get)
    captured = {}

    def factory(settings):
        captured["settings"] = settings
        return stub

    monkeypatch.setattr(cli_main, "create_default_http_client", factory)
    stub.captured = captured
    return stub


def test_build_parser_defaults():
    args = build_parser().parse_args([URL])
    assert args.url == URL
    assert args.json is False
    assert args.yes is False
    assert args.header == []
    assert args.timeout_ms is None


def test_json_output_with_yes(monkeypatch, capsys):
    stub = _install_stub(monkeypatch, post=HttpResponse(status_code=200, headers={"content-type": "application/json"}))
    code = main([URL, "--json", "--yes", "-H", "Authorization: Bearer abc", "--timeout-ms", "900"])
    assert code == 0

    result = json.loads(capsys.readouterr().out)
    assert result == {
        "args": ["-y", "supergateway", "--streamableHttp", URL],
        "command": "npx",
        "detected": "http",
        "name": "mcp-example-com",
        "transport": "http",
        "url": URL,
    }
    post = stub.calls("POST")[0]
    assert post.headers["Authorization"] == "Bearer abc"
    assert post.timeout == pytest.approx(0.9)
    assert stub.captured["settings"].timeout_ms == 900
    assert stub.closed is True


def test_unknown_with_yes_fails(monkeypatch, capsys):
    _install_stub(monkeypatch)
    assert main([URL, "--yes"]) == 1
    assert "could not be determined" in capsys.readouterr().out


def test_interactive_confirmation_overrides_detection(monkeypatch, capsys):
    stream = HttpResponse(
        status_code=200,
        headers={"content-type": "text/event-stream"},
        chunks=[b"event: endpoint\ndata: /messages\n\n"],
    )
    _install_stub(monkeypatch, post=HttpResponse(status_code=404), get=stream)
    questions = []

    def decline(question):
        questions.append(question)
        return False

    assert main([URL], ask=decline) == 0
    output = capsys.readouterr().out
    assert "legacy HTTP+SSE" in questions[0]
    assert "Detected transport: legacy HTTP+SSE (sse)" in output
    assert "--streamableHttp" in output


def test_ignore_ssl_errors_disables_verification(monkeypatch):
    stub = _install_stub(monkeypatch, get=HttpResponse(status_code=405))
    assert main([URL, "--ignore-ssl-errors", "--yes", "--json"]) == 0
    assert stub.captured["settings"].verify_ssl is False


@pytest.mark.parametrize("argv", [["npx some-server"], [URL, "-H", "no-colon"], [URL, "-H", ": empty"]])
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2

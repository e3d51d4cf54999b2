# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

import pytest

from install_mcp.gateway import confirm_transport, gateway_args, infer_server_name, is_url
from install_mcp.models.transport import TransportKind


def test_gateway_args_per_transport():
    url = "https://mcp.example.com/mcp"
    assert gateway_args(url, TransportKind.HTTP) == ["-y", "supergateway", "--streamableHttp", url]
    assert gateway_args(url, TransportKind.SSE) == ["-y", "supergateway", "--sse", url]
    assert gateway_args(url, "sse") == ["-y", "supergateway", "--sse", url]


def test_gateway_args_rejects_unknown():
    with pytest.raises(ValueError):
        gateway_args("https://mcp.example.com", TransportKind.UNKNOWN)


def test_is_url():
    assert is_url("http://localhost:3000/sse")
    assert is_url("https://mcp.example.com")
    assert not is_url("npx -y some-server")
    assert not is_url("ftp://example.com")


@pytest.mark.parametrize(
    ("url", "name"),
    [
        ("https://mcp.example.com/mcp", "mcp-example-com"),
        ("http://localhost:8080/sse", "localhost"),
        ("https://", "server"),
    ],
)
def test_infer_server_name(url, name):
    assert infer_server_name(url) == name


def test_confirm_definite_transport():
    questions = []

    def yes(question):
        questions.append(question)
        return True

    assert confirm_transport(TransportKind.SSE, yes) is TransportKind.SSE
    assert "legacy HTTP+SSE" in questions[0]
    assert confirm_transport(TransportKind.HTTP, lambda _q: False) is TransportKind.SSE
    assert confirm_transport(TransportKind.SSE, lambda _q: False) is TransportKind.HTTP


def test_confirm_unknown_transport_asks_yes_no():
    questions = []

    def ask(question):
        questions.append(question)
        return False

    assert confirm_transport(TransportKind.UNKNOWN, ask) is TransportKind.SSE
    assert "streamable HTTP" in questions[0]
    assert confirm_transport(TransportKind.UNKNOWN, lambda _q: True) is TransportKind.HTTP

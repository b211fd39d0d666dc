from __future__ import annotations

import json

from typer.testing import CliRunner

from webdriver_wire.cli import app
from webdriver_wire.client import WebDriver
from webdriver_wire.config import ClientConfig
from webdriver_wire.dispatcher import Dispatcher

from .conftest import RecordingTransport


def _install_driver(monkeypatch, transport: RecordingTransport, built: list[ClientConfig]) -> None:
    def fake_build_driver(config: ClientConfig) -> WebDriver:
        built.append(config)
        return WebDriver(config.base_url, Dispatcher(transport))

    monkeypatch.setattr("webdriver_wire.cli.build_driver", fake_build_driver)


def test_status_prints_json(monkeypatch) -> None:
    transport = RecordingTransport()
    transport.reply({"ready": True})
    built: list[ClientConfig] = []
    _install_driver(monkeypatch, transport, built)

    result = CliRunner().invoke(app, ["status", "--base-url", "http://grid:4444/wd/hub"])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"ready": True}
    assert built[0].base_url == "http://grid:4444/wd/hub"
    assert transport.last.url == "http://grid:4444/wd/hub/status"
    assert transport.closed


def test_new_session_prints_id(monkeypatch) -> None:
    transport = RecordingTransport()
    transport.reply({}, session_id="new-1")
    _install_driver(monkeypatch, transport, [])

    result = CliRunner().invoke(app, ["new-session", "--browser", "chrome"])

    assert result.exit_code == 0, result.output
    assert "new-1" in result.output.split()
    assert json.loads(transport.last.body)["desiredCapabilities"]["browserName"] == "chrome"


def test_invoke_parses_json_argument(monkeypatch) -> None:
    transport = RecordingTransport()
    transport.reply(3)
    _install_driver(monkeypatch, transport, [])

    result = CliRunner().invoke(
        app,
        ["invoke", "abc", "execute", '{"script": "return 1 + 2", "args": []}'],
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == 3
    assert transport.last.url.endswith("/session/abc/execute")
    assert json.loads(transport.last.body) == {"script": "return 1 + 2", "args": []}


def test_invoke_with_explicit_verb(monkeypatch) -> None:
    transport = RecordingTransport()
    transport.reply("http://example.com/")
    _install_driver(monkeypatch, transport, [])

    result = CliRunner().invoke(app, ["invoke", "abc", "url", "--verb", "get"])

    assert result.exit_code == 0, result.output
    assert transport.last.verb.value == "GET"


def test_errors_exit_with_code_one(monkeypatch) -> None:
    transport = RecordingTransport()
    _install_driver(monkeypatch, transport, [])

    result = CliRunner().invoke(app, ["invoke", "abc", "cookie", "name123", "--verb", "DELETE"])

    assert result.exit_code == 1
    assert "InvalidVerbForCommand" in result.output
    assert transport.requests == []


def test_close_session(monkeypatch) -> None:
    transport = RecordingTransport()
    _install_driver(monkeypatch, transport, [])

    result = CliRunner().invoke(app, ["close", "abc"])

    assert result.exit_code == 0, result.output
    assert transport.last.verb.value == "DELETE"
    assert transport.last.url.endswith("/session/abc")
    assert "Closed session abc" in result.output

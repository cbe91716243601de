from __future__ import annotations

from typing import Any, Dict

import httpx
import pytest
from typer.testing import CliRunner

from todo_service import main
from todo_service.config import Settings
from todo_service.store.memory import SEED_TODOS

runner = CliRunner()


@pytest.fixture(autouse=True)
def _settings(monkeypatch):
    settings = Settings(host="127.0.0.1", port=3999, idle_timeout_seconds=7, log_level="WARNING")
    monkeypatch.setattr(main, "get_settings", lambda: settings)
    monkeypatch.setattr(main, "configure_logging", lambda **kwargs: None)
    return settings


@pytest.fixture
def captured_run(monkeypatch) -> Dict[str, Any]:
    captured: Dict[str, Any] = {}

    def fake_run(app, **kwargs):
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(main.uvicorn, "run", fake_run)
    return captured


def test_info_prints_configuration():
    result = runner.invoke(main.app, ["info"])
    assert result.exit_code == 0
    assert "listen=127.0.0.1:3999" in result.stdout


def test_serve_seeds_store_and_applies_server_settings(captured_run):
    result = runner.invoke(main.app, ["serve"])

    assert result.exit_code == 0
    assert captured_run["host"] == "127.0.0.1"
    assert captured_run["port"] == 3999
    assert captured_run["timeout_keep_alive"] == 7
    assert captured_run["app"].state.store.count() == len(SEED_TODOS)


def test_serve_options_override_settings(captured_run):
    result = runner.invoke(main.app, ["serve", "--port", "4001", "--no-seed"])

    assert result.exit_code == 0
    assert captured_run["port"] == 4001
    assert captured_run["app"].state.store.count() == 0


def test_list_renders_todos(monkeypatch):
    def fake_get(url, timeout):
        assert url == "http://localhost:5000/todo"
        return httpx.Response(
            200,
            json=[{"id": "aaaaaaaaaa", "title": "Pay bills", "msg": "Better get it done.", "done": False}],
            request=httpx.Request("GET", url),
        )

    monkeypatch.setattr(main.httpx, "get", fake_get)
    result = runner.invoke(main.app, ["list", "--url", "http://localhost:5000/"])

    assert result.exit_code == 0
    assert "Pay bills" in result.stdout


def test_list_reports_unreachable_service(monkeypatch):
    def fake_get(url, timeout):
        raise httpx.ConnectError("connection refused", request=httpx.Request("GET", url))

    monkeypatch.setattr(main.httpx, "get", fake_get)
    result = runner.invoke(main.app, ["list"])

    assert result.exit_code == 1


def test_serve_accepts_port_zero(captured_run):
    result = runner.invoke(main.app, ["serve", "--port", "0", "--no-seed"])

    assert result.exit_code == 0
    assert captured_run["port"] == 0

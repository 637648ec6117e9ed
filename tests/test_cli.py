"""Tests for the linkwatch CLI (``serve`` and ``check``)."""

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app
from linkwatch.state import StateStore

runner = CliRunner()


@pytest.fixture
def sources_file(tmp_path):
    path = tmp_path / "sources.txt"
    path.write_text("https://one.test/\nhttps://two.test/\n", encoding="utf-8")
    return path


@pytest.fixture
def state_dir(tmp_path):
    return tmp_path / "state"


def _mock_sources():
    respx.get("https://one.test/").mock(
        return_value=httpx.Response(200, text='<a href="https://x.com/a">Alpha</a>')
    )
    respx.get("https://two.test/").mock(return_value=httpx.Response(404))


def test_check_prints_new_links(sources_file, state_dir):
    with respx.mock:
        _mock_sources()
        result = runner.invoke(app, ["check", str(sources_file), "--state-dir", str(state_dir)])

    assert result.exit_code == 0
    assert "https://one.test/" in result.stdout
    assert "Alpha  <https://x.com/a>" in result.stdout
    assert "No new links found" in result.stdout

    assert StateStore(state_dir).load("https://one.test/") == {"https://x.com/a": 1}


def test_check_twice_reports_nothing_new(sources_file, state_dir):
    with respx.mock:
        _mock_sources()
        runner.invoke(app, ["check", str(sources_file), "--state-dir", str(state_dir)])
        result = runner.invoke(app, ["check", str(sources_file), "--state-dir", str(state_dir)])

    assert result.exit_code == 0
    assert "https://x.com/a" not in result.stdout
    assert result.stdout.count("No new links found") == 2


def test_check_missing_sources_file(tmp_path):
    result = runner.invoke(app, ["check", str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_check_unreadable_state_exits(sources_file, state_dir):
    StateStore(state_dir).path_for("https://one.test/").mkdir(parents=True)
    result = runner.invoke(app, ["check", str(sources_file), "--state-dir", str(state_dir)])
    assert result.exit_code == 1


def test_serve_passes_port_to_uvicorn(sources_file, state_dir, monkeypatch):
    calls = {}

    def fake_run(application, host, port, log_level):
        calls.update(app=application, host=host, port=port)

    monkeypatch.setattr("uvicorn.run", fake_run)
    result = runner.invoke(app, ["serve", str(sources_file), "9090", "--state-dir", str(state_dir)])

    assert result.exit_code == 0
    assert "http://localhost:9090" in result.stdout
    assert calls["port"] == 9090
    assert calls["app"].state.monitor.sources == ["https://one.test/", "https://two.test/"]


def test_serve_defaults_port_from_config(sources_file, monkeypatch):
    calls = {}
    monkeypatch.setattr("linkwatch.config.settings.port", 8181)
    monkeypatch.setattr("uvicorn.run", lambda application, **kw: calls.update(kw))
    result = runner.invoke(app, ["serve", str(sources_file)])

    assert result.exit_code == 0
    assert calls["port"] == 8181


def test_serve_rejects_non_integer_port(sources_file):
    result = runner.invoke(app, ["serve", str(sources_file), "eighty"])
    assert result.exit_code != 0


def test_serve_requires_sources_file():
    result = runner.invoke(app, ["serve"])
    assert result.exit_code != 0

from __future__ import annotations

import os
from pathlib import Path

import pytest

from app import main as app_main


def test_main_renders_inline(monkeypatch, tmp_path) -> None:
    called = {}

    def fake_streamlit_app(*, default_url=None, config_path=None):
        called["default_url"] = default_url
        called["config_path"] = config_path

    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    # Patch the imported symbol used inside app.main (not the package attribute)
    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    cfg = str(tmp_path / "relgraph.toml")
    app_main.main(["--url", "https://example.org/g.csv", "--config", cfg])

    assert called["default_url"] == "https://example.org/g.csv"
    assert called["config_path"] == cfg


def test_main_renders_inline_without_args(monkeypatch) -> None:
    called = {}

    def fake_streamlit_app(*, default_url=None, config_path=None):
        called["args"] = (default_url, config_path)

    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    app_main.main([])

    assert called["args"] == (None, None)


def test_main_execs_streamlit(monkeypatch, tmp_path) -> None:
    # Ensure not in Streamlit context
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)

    captured = {}

    def fake_execv(exe: str, cmd: list[str]) -> None:
        captured["exe"] = exe
        captured["cmd"] = cmd
        # Prevent process handoff
        raise SystemExit

    monkeypatch.setattr(os, "execv", fake_execv, raising=True)

    with pytest.raises(SystemExit):
        app_main.main(["--url", "https://example.org/g.csv", "--config", "x.toml"])

    assert captured["cmd"][0] == captured["exe"]
    # Assert we launch `python -m streamlit run <path>`
    assert captured["cmd"][1:4] == ["-m", "streamlit", "run"]
    # The script path should be the path to app.main
    expected_main_path = str(Path(app_main.__file__).resolve())
    assert captured["cmd"][4] == expected_main_path
    # Passthrough args present after `--`
    assert "--" in captured["cmd"]
    dashdash_idx = captured["cmd"].index("--")
    passthrough = captured["cmd"][dashdash_idx + 1 :]
    assert passthrough == ["--url", "https://example.org/g.csv", "--config", "x.toml"]


def test_main_without_args_has_no_passthrough(monkeypatch) -> None:
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)
    captured = {}

    def fake_execv(exe: str, cmd: list[str]) -> None:
        captured["cmd"] = cmd
        raise SystemExit

    monkeypatch.setattr(os, "execv", fake_execv, raising=True)

    with pytest.raises(SystemExit):
        app_main.main([])

    assert "--" not in captured["cmd"]


def test_render_from_argv_ignores_unknown_args(monkeypatch) -> None:
    called = {}

    def fake_streamlit_app(*, default_url=None, config_path=None):
        called["args"] = (default_url, config_path)

    monkeypatch.setattr(app_main, "streamlit_app", fake_streamlit_app, raising=True)

    app_main.render_from_argv(["--url", "https://example.org/g.csv", "--server.port", "9"])
    assert called["args"] == ("https://example.org/g.csv", None)

    app_main.render_from_argv([])
    assert called["args"] == (None, None)

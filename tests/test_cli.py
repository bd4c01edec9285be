# tests/test_cli.py

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import pytest

from task_tracker import config
from task_tracker.cli import main as cli_main
from task_tracker.logging_setup import _ConsoleNoiseFilter, setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        ours = isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        )
        if ours:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("task_tracker.storage.storage_manager", logging.DEBUG))
    assert not f.filter(_record("uvicorn.access", logging.INFO))
    assert f.filter(_record("uvicorn.error", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert not f.filter(_record("httpx", logging.WARNING))
    assert f.filter(_record("httpx", logging.ERROR))


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("task_tracker.test").debug("hello file")

    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in (tmp_path / "logs" / "task_tracker.log").read_text(encoding="utf-8")


def test_main_runs_uvicorn_with_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_root_logging
) -> None:
    settings = replace(
        config.get_settings(),
        data_dir=tmp_path,
        port=4567,
        host="127.0.0.1",
        public_dir=tmp_path / "public",
        source_dir=tmp_path / "src",
    )
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)

    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli_main.uvicorn, "run", fake_run)

    cli_main.main()

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 4567
    assert calls["app"] is not None
    assert (tmp_path / "task_tracker.log").exists()

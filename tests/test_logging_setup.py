# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from todo_menu.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("todo_menu.cli.shell", logging.DEBUG))
    assert not f.filter(_record("dotenv.main", logging.WARNING))
    assert f.filter(_record("dotenv.main", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file_when_dir_given(tmp_path: Path, restore_root_logging) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")
    logging.getLogger("todo_menu.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file == tmp_path / "logs" / "todo.log"
    assert "hello file" in log_file.read_text("utf-8")


def test_setup_logging_without_dir_has_no_file(restore_root_logging) -> None:
    assert setup_logging() is None
    assert not any(isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)

# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_menu.config import Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_LOG_TO_FILE",
    "TODO_LOG_DIR",
    "TODO_CLEAR_SCREEN",
    "TODO_PAUSE_ON_NOTICE",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()
    assert s.app_name == "todo-menu"
    assert s.log_level == "WARNING"
    assert s.log_to_file is False
    assert s.log_dir == Path(".local/todo")
    assert s.clear_screen is True
    assert s.pause_on_notice is True


def test_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("TODO_APP_NAME", "tareas")
    clean_env.setenv("TODO_LOG_LEVEL", "debug")
    clean_env.setenv("TODO_LOG_TO_FILE", "yes")
    clean_env.setenv("TODO_LOG_DIR", str(tmp_path))
    clean_env.setenv("TODO_CLEAR_SCREEN", "0")
    clean_env.setenv("TODO_PAUSE_ON_NOTICE", "off")

    s = Settings.from_env()
    assert s.app_name == "tareas"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is True
    assert s.log_dir == tmp_path
    assert s.clear_screen is False
    assert s.pause_on_notice is False


def test_blank_values_fall_back_to_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("TODO_APP_NAME", "  ")
    clean_env.setenv("TODO_CLEAR_SCREEN", "")
    clean_env.setenv("TODO_LOG_DIR", " ")

    s = Settings.from_env()
    assert s.app_name == "todo-menu"
    assert s.clear_screen is True
    assert s.log_dir == Path(".local/todo")

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_menu.core.state import AppState
from todo_menu.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeConsole


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="todo-menu-test",
        log_level="WARNING",
        log_to_file=False,
        log_dir=tmp_path / "logs",
        clear_screen=False,
        pause_on_notice=False,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def console() -> FakeConsole:
    return FakeConsole()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, console: FakeConsole) -> AppState:
    """AppState wired with the in-memory store and a scripted console."""
    return AppState(
        settings=settings,
        task_store=store,
        console=console,
        clear_screen=False,
        pause_on_notice=False,
    )

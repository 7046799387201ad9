# src/todo_menu/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires the concrete console and
the in-memory task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import StdConsole
from ..core.ports import Console
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, console: Console | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and console injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        console=console if console is not None else StdConsole(),
        clear_screen=bool(getattr(settings, "clear_screen", True)),
        pause_on_notice=bool(getattr(settings, "pause_on_notice", True)),
    )
    logger.debug(
        "State created (clear_screen=%s pause_on_notice=%s)",
        state.clear_screen,
        state.pause_on_notice,
    )
    return state

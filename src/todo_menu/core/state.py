# src/todo_menu/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import Console, TaskRepo


@dataclass
class AppState:
    """
    Everything a running session owns.

    Created once by the composition root and passed explicitly to the shell;
    the task store lives exactly as long as this object.
    """

    # Settings object (config.Settings or any object with the same attributes).
    settings: object

    task_store: TaskRepo
    console: Console

    clear_screen: bool = True
    pause_on_notice: bool = True

# src/todo_menu/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell and the domain operations.

The shell depends on Protocols instead of concrete implementations.
This keeps the terminal and the task storage swappable and makes testing easier.
"""

from datetime import date
from typing import Protocol

from ..tasks.task_models import Task, TaskDifficulty, TaskStatus


class Console(Protocol):
    """
    Line-oriented terminal.

    ask() blocks until one full line arrives and may raise EOFError or
    KeyboardInterrupt when input ends.
    """

    def ask(self, prompt: str) -> str: ...
    def show(self, text: str = "") -> None: ...
    def clear(self) -> None: ...


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    def add_task(
            self,
            *,
            title: str,
            description: str = "",
            due_date: date | None = None,
            difficulty: TaskDifficulty = TaskDifficulty.EASY,
            status: TaskStatus = TaskStatus.PENDING,
    ) -> Task: ...

    def get_task(self, task_id: int) -> Task | None: ...
    def list_tasks(self) -> list[Task]: ...

    def update_task_fields(
            self,
            task_id: int,
            *,
            title: str | None = None,
            description: str | None = None,
            status: TaskStatus | None = None,
            difficulty: TaskDifficulty | None = None,
    ) -> Task: ...

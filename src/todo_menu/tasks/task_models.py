# src/todo_menu/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values double as the user-facing labels shown in listings.
    """

    PENDING = "Pendiente"
    IN_PROGRESS = "En Curso"
    DONE = "Terminada"
    CANCELLED = "Cancelada"


class TaskDifficulty(StrEnum):
    EASY = "Fácil"
    MEDIUM = "Medio"
    HARD = "Difícil"


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do record.

    Records are immutable: the store replaces a task by id on every edit,
    so a Task held by a listing is a snapshot of the record at that time.
    """

    id: int
    title: str
    description: str
    status: TaskStatus
    created_at: datetime
    difficulty: TaskDifficulty

    due_date: date | None = None
    last_edited_at: datetime | None = None

# src/todo_menu/ui/formatting.py

"""Pure string builders for the shell screens (no I/O)."""

from __future__ import annotations

from datetime import date, datetime

from ..tasks.task_models import Task, TaskDifficulty

NO_DUE_DATE = "Sin Vencimiento"
NO_DESCRIPTION = "Sin descripción"
RULE = "=" * 40

DIFFICULTY_STARS: dict[TaskDifficulty, str] = {
    TaskDifficulty.EASY: "★☆☆",
    TaskDifficulty.MEDIUM: "★★☆",
    TaskDifficulty.HARD: "★★★",
}


def difficulty_stars(difficulty: object) -> str:
    return DIFFICULTY_STARS.get(difficulty, "---")  # type: ignore[call-overload]


def format_date(value: date | datetime | None) -> str:
    """Locale calendar date (no time), or "Sin Vencimiento" when absent."""
    if value is None:
        return NO_DUE_DATE
    return value.strftime("%x")


def format_datetime(value: datetime) -> str:
    return value.strftime("%x %X")


def format_task_line(index: int, task: Task) -> str:
    return f"[{index}] {task.title} ({difficulty_stars(task.difficulty)}) - {task.status}"


def format_task_detail(task: Task) -> list[str]:
    return [
        RULE,
        "DETALLES DE TAREA".center(len(RULE)).rstrip(),
        RULE,
        f"Título:       {task.title}",
        f"Descripción:  {task.description or NO_DESCRIPTION}",
        f"Estado:       {task.status}",
        f"Dificultad:   {task.difficulty} {difficulty_stars(task.difficulty)}",
        f"Vencimiento:  {format_date(task.due_date)}",
        f"Creación:     {format_datetime(task.created_at)}",
        f"Ult. Edición: {format_date(task.last_edited_at)}",
        RULE,
    ]

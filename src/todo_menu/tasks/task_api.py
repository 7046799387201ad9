# src/todo_menu/tasks/task_api.py

from __future__ import annotations

import locale
import logging
from collections.abc import Iterable
from datetime import date, timedelta

from ..core.ports import TaskRepo
from .task_models import Task, TaskDifficulty, TaskStatus

logger = logging.getLogger(__name__)

# Menu selectors -> values. Anything not listed falls back per operation.
DIFFICULTY_CHOICES: dict[str, TaskDifficulty] = {
    "1": TaskDifficulty.EASY,
    "2": TaskDifficulty.MEDIUM,
    "3": TaskDifficulty.HARD,
}

STATUS_CHOICES: dict[str, TaskStatus] = {
    "1": TaskStatus.PENDING,
    "2": TaskStatus.IN_PROGRESS,
    "3": TaskStatus.DONE,
    "4": TaskStatus.CANCELLED,
}

# None means "no filter" (every task).
VIEW_FILTERS: dict[str, TaskStatus | None] = {
    "1": None,
    "2": TaskStatus.PENDING,
    "3": TaskStatus.IN_PROGRESS,
    "4": TaskStatus.DONE,
}


def parse_difficulty(choice: str | None) -> TaskDifficulty:
    """Difficulty for a creation selector; only an exact "2" or "3" moves off EASY."""
    return DIFFICULTY_CHOICES.get(choice or "", TaskDifficulty.EASY)


def parse_due_date(text: str | None) -> date | None:
    """
    Parse "YYYY-MM-DD" into a date, or None.

    Only the shape is checked (three dash-separated integers). Month and
    day overflow roll over into the following months/years, e.g.
    "2024-13-40" -> 2025-02-09 and "2024-03-00" -> 2024-02-29.
    """
    if not text or not text.strip():
        return None

    parts = text.strip().split("-")
    if len(parts) != 3:
        return None

    try:
        year, month, day = (int(p) for p in parts)
    except ValueError:
        return None

    month_index = month - 1
    year += month_index // 12
    month_index %= 12

    try:
        return date(year, month_index + 1, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def create_task(
    store: TaskRepo,
    title: str,
    description: str = "",
    due_date_text: str | None = None,
    difficulty_choice: str | None = None,
) -> Task:
    """
    Create a PENDING task with defaults applied and append it to the store.

    Raises ValueError when the title is blank.
    """
    task = store.add_task(
        title=title,
        description=description,
        due_date=parse_due_date(due_date_text),
        difficulty=parse_difficulty(difficulty_choice),
        status=TaskStatus.PENDING,
    )
    logger.info("Task created id=%s", task.id)
    return task


def list_tasks_by_status(store: TaskRepo, choice: str) -> list[Task]:
    """
    "1" all, "2" pending, "3" in progress, "4" done; anything else -> [].

    Always returns a fresh list in store order; sorting it never affects the store.
    """
    key = choice or ""
    if key not in VIEW_FILTERS:
        return []

    wanted = VIEW_FILTERS[key]
    tasks = store.list_tasks()
    if wanted is None:
        return tasks
    return [t for t in tasks if t.status is wanted]


def search_tasks_by_title(store: TaskRepo, query: str) -> list[Task]:
    needle = (query or "").casefold()
    return [t for t in store.list_tasks() if needle in t.title.casefold()]


def _title_sort_key(task: Task) -> str:
    return locale.strxfrm(task.title.casefold())


def sort_by_title(tasks: Iterable[Task]) -> list[Task]:
    """Alphabetical by title using the active locale's collation."""
    return sorted(tasks, key=_title_sort_key)


def edit_task(
    store: TaskRepo,
    task_id: int,
    *,
    title_text: str = "",
    description_text: str = "",
    status_choice: str = "",
    difficulty_choice: str = "",
) -> Task:
    """
    Apply the answers of the edit screen to a stored task.

    Blank title/description keep the current value. Status "1".."4" and
    difficulty "1".."3" select a new value; anything else keeps the current
    one. The edit timestamp is refreshed even if nothing changed.

    Raises KeyError for an unknown id.
    """
    title = title_text if title_text and title_text.strip() else None
    description = description_text if description_text and description_text.strip() else None

    return store.update_task_fields(
        task_id,
        title=title,
        description=description,
        status=STATUS_CHOICES.get(status_choice or ""),
        difficulty=DIFFICULTY_CHOICES.get(difficulty_choice or ""),
    )

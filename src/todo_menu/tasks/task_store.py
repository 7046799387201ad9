# src/todo_menu/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime

from .task_models import Task, TaskDifficulty, TaskStatus

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TaskStore:
    """
    In-memory task store.

    - tasks live for the lifetime of the process (nothing is written to disk)
    - insertion order is preserved; titles may repeat
    - each task gets a stable integer id; ids are never reused
    - records are immutable, edits replace the stored record by id
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        logger.debug("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _allocate_id(self) -> int:
        task_id = self._next_id
        self._next_id += 1
        return task_id

    @staticmethod
    def _require_title(title: str | None) -> str:
        if not title or not title.strip():
            raise ValueError("title is required")
        return title

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(
        self,
        *,
        title: str,
        description: str = "",
        due_date: date | None = None,
        difficulty: TaskDifficulty = TaskDifficulty.EASY,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        checked_title = self._require_title(title)

        now = self._clock()
        task = Task(
            id=self._allocate_id(),
            title=checked_title,
            description=description or "",
            status=status,
            created_at=now,
            difficulty=difficulty,
            due_date=due_date,
            last_edited_at=now,
        )
        self._tasks[task.id] = task
        logger.debug(
            "Task added id=%s status=%s difficulty=%s due_date=%s",
            task.id,
            task.status.name,
            task.difficulty.name,
            task.due_date,
        )
        return task

    def get_task(self, task_id: int) -> Task | None:
        return self._tasks.get(int(task_id))

    def list_tasks(self) -> list[Task]:
        """Snapshot of all tasks in insertion order (a new list every call)."""
        return list(self._tasks.values())

    def update_task_fields(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | None = None,
        difficulty: TaskDifficulty | None = None,
    ) -> Task:
        """
        Replace the stored record with the given fields changed.

        None leaves a field untouched. last_edited_at is always refreshed,
        even when nothing else changes, and never moves backwards.
        """
        current = self._tasks.get(int(task_id))
        if current is None:
            raise KeyError(task_id)

        changes: dict[str, object] = {}

        if title is not None:
            changes["title"] = self._require_title(title)

        if description is not None:
            changes["description"] = description

        if status is not None:
            changes["status"] = status

        if difficulty is not None:
            changes["difficulty"] = difficulty

        now = self._clock()
        previous = current.last_edited_at or current.created_at
        changes["last_edited_at"] = max(now, previous)

        updated = replace(current, **changes)
        self._tasks[updated.id] = updated
        logger.debug("Task updated id=%s fields=%s", updated.id, sorted(changes))
        return updated

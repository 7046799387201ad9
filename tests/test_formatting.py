# tests/test_formatting.py

from __future__ import annotations

from datetime import date, datetime

from todo_menu.tasks.task_models import Task, TaskDifficulty, TaskStatus
from todo_menu.ui.formatting import (
    difficulty_stars,
    format_date,
    format_datetime,
    format_task_detail,
    format_task_line,
)


def _task(**overrides) -> Task:
    fields = dict(
        id=1,
        title="Buy milk",
        description="",
        status=TaskStatus.PENDING,
        created_at=datetime(2024, 5, 1, 9, 30, 0),
        difficulty=TaskDifficulty.MEDIUM,
        due_date=None,
        last_edited_at=datetime(2024, 5, 2, 10, 0, 0),
    )
    fields.update(overrides)
    return Task(**fields)


def test_difficulty_stars() -> None:
    assert difficulty_stars(TaskDifficulty.EASY) == "★☆☆"
    assert difficulty_stars(TaskDifficulty.MEDIUM) == "★★☆"
    assert difficulty_stars(TaskDifficulty.HARD) == "★★★"
    assert difficulty_stars("Imposible") == "---"
    assert difficulty_stars(None) == "---"


def test_format_date() -> None:
    assert format_date(None) == "Sin Vencimiento"
    d = date(2024, 12, 31)
    assert format_date(d) == d.strftime("%x")
    # timestamps are shown as a calendar date only
    ts = datetime(2024, 12, 31, 23, 59, 58)
    assert format_date(ts) == ts.strftime("%x")


def test_format_datetime_includes_time() -> None:
    ts = datetime(2024, 12, 31, 23, 59, 58)
    assert format_datetime(ts) == f"{ts.strftime('%x')} {ts.strftime('%X')}"


def test_format_task_line() -> None:
    assert format_task_line(3, _task()) == "[3] Buy milk (★★☆) - Pendiente"
    done = _task(status=TaskStatus.DONE, difficulty=TaskDifficulty.HARD)
    assert format_task_line(1, done) == "[1] Buy milk (★★★) - Terminada"


def test_format_task_detail() -> None:
    lines = format_task_detail(_task(due_date=date(2024, 6, 1)))
    text = "\n".join(lines)

    assert "DETALLES DE TAREA" in text
    assert "Título:       Buy milk" in lines
    assert "Descripción:  Sin descripción" in lines
    assert "Estado:       Pendiente" in lines
    assert "Dificultad:   Medio ★★☆" in lines
    assert f"Vencimiento:  {date(2024, 6, 1).strftime('%x')}" in lines
    assert "Ult. Edición: " + datetime(2024, 5, 2).strftime("%x") in lines


def test_format_task_detail_without_due_date_and_with_description() -> None:
    lines = format_task_detail(_task(description="2 litres"))
    assert "Descripción:  2 litres" in lines
    assert "Vencimiento:  Sin Vencimiento" in lines

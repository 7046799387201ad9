# src/todo_menu/cli/shell.py

"""
Interactive menu shell.

Each screen handler prompts for input and returns the next Screen.
TaskShell.run() drives the handlers in a plain loop, so invalid input is
handled by returning the same screen again.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.state import AppState
from ..tasks.task_api import (
    create_task,
    edit_task,
    list_tasks_by_status,
    search_tasks_by_title,
    sort_by_title,
)
from ..tasks.task_models import Task
from ..ui.formatting import RULE, format_task_detail, format_task_line
from .commands import MenuRegistry

logger = logging.getLogger(__name__)

EXIT_OK = 0


class ScreenId(StrEnum):
    MAIN_MENU = "main_menu"
    VIEW_MENU = "view_menu"
    LIST_RESULTS = "list_results"
    TASK_DETAIL = "task_detail"
    ADD_TASK = "add_task"
    EDIT_TASK = "edit_task"
    SEARCH_TASK = "search_task"
    EXIT = "exit"


@dataclass(frozen=True, slots=True)
class Screen:
    id: ScreenId
    # LIST_RESULTS: the result set being browsed (kept as-is on redisplay).
    results: tuple[Task, ...] = ()
    # TASK_DETAIL / EDIT_TASK: id of the task in the store.
    task_id: int | None = None


MAIN = Screen(ScreenId.MAIN_MENU)


def build_main_menu() -> MenuRegistry[ScreenId]:
    menu: MenuRegistry[ScreenId] = MenuRegistry("TODO LIST - MENÚ PRINCIPAL")
    menu.register("1", ScreenId.VIEW_MENU, "Ver mis tareas")
    menu.register("2", ScreenId.SEARCH_TASK, "Buscar una tarea")
    menu.register("3", ScreenId.ADD_TASK, "Agregar una tarea")
    menu.register("0", ScreenId.EXIT, "Salir")
    return menu


def build_view_menu() -> MenuRegistry[str | None]:
    """Targets are list_tasks_by_status selectors; None means "back"."""
    menu: MenuRegistry[str | None] = MenuRegistry("VER MIS TAREAS")
    menu.register("1", "1", "Todas")
    menu.register("2", "2", "Pendientes")
    menu.register("3", "3", "En Curso")
    menu.register("4", "4", "Terminadas")
    menu.register("0", None, "Volver")
    return menu


class TaskShell:
    def __init__(self, state: AppState) -> None:
        self.state = state
        self.console = state.console
        self.store = state.task_store
        self.main_menu = build_main_menu()
        self.view_menu = build_view_menu()
        self._handlers: dict[ScreenId, Callable[[Screen], Screen]] = {
            ScreenId.MAIN_MENU: self.main_menu_screen,
            ScreenId.VIEW_MENU: self.view_menu_screen,
            ScreenId.LIST_RESULTS: self.list_results_screen,
            ScreenId.TASK_DETAIL: self.task_detail_screen,
            ScreenId.ADD_TASK: self.add_task_screen,
            ScreenId.EDIT_TASK: self.edit_task_screen,
            ScreenId.SEARCH_TASK: self.search_task_screen,
        }

    # ---- loop ----

    def run(self, start: Screen = MAIN) -> int:
        """Drive screens until the user exits. Returns the process exit code."""
        logger.info("Shell started (tasks=%s).", self.store.count_tasks())
        screen = start

        while screen.id is not ScreenId.EXIT:
            try:
                screen = self._step(screen)
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                self.console.show()
                break

        logger.info("Shell finished (tasks=%s).", self.store.count_tasks())
        return EXIT_OK

    def _step(self, screen: Screen) -> Screen:
        handler = self._handlers[screen.id]
        try:
            return handler(screen)
        except EOFError:
            raise
        except Exception:
            logger.exception("Screen handler crashed screen=%s", screen.id)
        return self._notice_then(MAIN, "Error interno al procesar la opción.")

    # ---- helpers ----

    def _begin(self, *header: str) -> None:
        if self.state.clear_screen:
            self.console.clear()
        for line in header:
            self.console.show(line)

    def _pause(self) -> None:
        if self.state.pause_on_notice:
            self.console.ask("\nPresione Enter para continuar...")

    def _notice_then(self, next_screen: Screen, message: str) -> Screen:
        self.console.show(message)
        self._pause()
        return next_screen

    # ---- screens ----

    def main_menu_screen(self, screen: Screen) -> Screen:
        self._begin(RULE, f"      {self.main_menu.title}", RULE, *self.main_menu.build_menu(), RULE)

        option = self.main_menu.resolve(self.console.ask("Ingrese una opción: "))
        if option is None:
            return self._notice_then(screen, "Opción no válida.")

        logger.debug("Main menu -> %s", option.target)
        return Screen(option.target)

    def view_menu_screen(self, screen: Screen) -> Screen:
        self._begin(f"--- {self.view_menu.title} ---", *self.view_menu.build_menu())

        option = self.view_menu.resolve(self.console.ask("¿Qué tareas deseas ver? "))
        if option is None:
            return self._notice_then(screen, "Opción incorrecta.")
        if option.target is None:
            return MAIN

        results = sort_by_title(list_tasks_by_status(self.store, option.target))
        return Screen(ScreenId.LIST_RESULTS, results=tuple(results))

    def list_results_screen(self, screen: Screen) -> Screen:
        self._begin("--- LISTADO ---")

        if not screen.results:
            self.console.show("No hay tareas para mostrar.")
        for index, task in enumerate(screen.results, start=1):
            self.console.show(format_task_line(index, task))

        self.console.show("\n--------------------------------")
        self.console.show("Ingrese el número de la tarea para ver detalles/editar")
        self.console.show("O ingrese 0 para volver")

        choice = self.console.ask("Opción: ")
        if choice == "0":
            return MAIN

        # int() rejects non-ASCII digits such as "²".
        if choice.isascii() and choice.isdigit() and 1 <= int(choice) <= len(screen.results):
            task = screen.results[int(choice) - 1]
            return Screen(ScreenId.TASK_DETAIL, task_id=task.id)

        return self._notice_then(screen, "Tarea no encontrada.")

    def task_detail_screen(self, screen: Screen) -> Screen:
        task = self._lookup(screen.task_id)
        if task is None:
            return self._notice_then(MAIN, "Tarea no encontrada.")

        self._begin(*format_task_detail(task))
        self.console.show("Presione [E] para Editar, o Enter para volver.")

        choice = self.console.ask("Opción: ")
        if choice.lower() == "e":
            return Screen(ScreenId.EDIT_TASK, task_id=task.id)
        return MAIN

    def add_task_screen(self, screen: Screen) -> Screen:
        self._begin("--- AGREGAR NUEVA TAREA ---")

        title = self.console.ask("Título (Obligatorio): ")
        if not title.strip():
            return self._notice_then(screen, "El título no puede estar vacío.")

        description = self.console.ask("Descripción: ")
        due_date_text = self.console.ask("Fecha Vencimiento (YYYY-MM-DD) [Enter para vacio]: ")

        self.console.show("Dificultad: 1. Fácil | 2. Medio | 3. Difícil")
        difficulty_choice = self.console.ask("Opción [Enter para Fácil]: ")

        create_task(self.store, title, description, due_date_text, difficulty_choice)
        return self._notice_then(MAIN, "¡Tarea guardada con éxito!")

    def edit_task_screen(self, screen: Screen) -> Screen:
        task = self._lookup(screen.task_id)
        if task is None:
            return self._notice_then(MAIN, "Tarea no encontrada.")

        self._begin(f"--- EDITANDO: {task.title} ---", "(Deje en blanco para mantener el valor actual)")

        title_text = self.console.ask(f"Título [{task.title}]: ")
        description_text = self.console.ask(f"Descripción [{task.description}]: ")

        self.console.show(f"Estado actual: {task.status}")
        self.console.show("1. Pendiente | 2. En Curso | 3. Terminada | 4. Cancelada")
        status_choice = self.console.ask("Nuevo Estado: ")

        self.console.show(f"Dificultad actual: {task.difficulty}")
        self.console.show("1. Fácil | 2. Medio | 3. Difícil")
        difficulty_choice = self.console.ask("Nueva Dificultad: ")

        edit_task(
            self.store,
            task.id,
            title_text=title_text,
            description_text=description_text,
            status_choice=status_choice,
            difficulty_choice=difficulty_choice,
        )
        return self._notice_then(
            Screen(ScreenId.TASK_DETAIL, task_id=task.id), "Tarea actualizada correctamente."
        )

    def search_task_screen(self, screen: Screen) -> Screen:
        self._begin("--- BUSCAR TAREA ---")

        term = self.console.ask("Ingrese palabra a buscar en el título: ")
        results = search_tasks_by_title(self.store, term)
        if results:
            return Screen(ScreenId.LIST_RESULTS, results=tuple(results))

        return self._notice_then(MAIN, "No se encontraron tareas con ese criterio.")

    def _lookup(self, task_id: int | None) -> Task | None:
        if task_id is None:
            return None
        return self.store.get_task(task_id)


def run_shell(state: AppState) -> int:
    return TaskShell(state).run()

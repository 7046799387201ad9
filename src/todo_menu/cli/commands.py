# src/todo_menu/cli/commands.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MenuOption(Generic[T]):
    key: str
    target: T
    label: str


class MenuRegistry(Generic[T]):
    """
    Numbered-option registry used by the shell menus.

    Maps what the user types ("1", "0", ...) to a target value and renders
    the option lines in registration order.
    """

    def __init__(self, title: str) -> None:
        self.title = title
        self._options: dict[str, MenuOption[T]] = {}

    def register(self, key: str, target: T, label: str) -> None:
        self._options[key] = MenuOption(key=key, target=target, label=label)

    def resolve(self, choice: str | None) -> MenuOption[T] | None:
        """Return the option for a typed choice (exact key match) or None."""
        return self._options.get(choice or "")

    def build_menu(self) -> list[str]:
        return [f"{opt.key}. {opt.label}" for opt in self._options.values()]

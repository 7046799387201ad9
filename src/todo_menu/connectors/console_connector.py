# src/todo_menu/connectors/console_connector.py

from __future__ import annotations

import logging
import sys

logger = logging.getLogger(__name__)

# ESC[3J drops scrollback, ESC[H homes the cursor, ESC[2J clears the screen.
CLEAR_SEQUENCE = "\033[3J\033[H\033[2J\033[H"


class StdConsole:
    """Console port over stdin/stdout."""

    def ask(self, prompt: str) -> str:
        # EOFError / KeyboardInterrupt propagate; the shell treats them as "quit".
        return input(prompt)

    def show(self, text: str = "") -> None:
        print(text)

    def clear(self) -> None:
        """Clear the terminal. Best-effort: no-op when stdout is not a TTY."""
        try:
            if sys.stdout.isatty():
                sys.stdout.write(CLEAR_SEQUENCE)
                sys.stdout.flush()
        except (OSError, ValueError):
            logger.debug("Console clear failed.", exc_info=True)

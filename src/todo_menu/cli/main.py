# src/todo_menu/cli/main.py

"""
CLI entrypoint.

Initializes locale and logging, builds AppState, then runs the menu shell
in the main thread until the user picks "0. Salir".
"""

from __future__ import annotations

import contextlib
import locale
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from .shell import run_shell

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # Dates are rendered and titles collated with the user's locale.
    with contextlib.suppress(locale.Error):
        locale.setlocale(locale.LC_ALL, "")

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_dir = settings.log_dir if settings.log_to_file else None
    log_file = setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (log_file=%s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    exit_code = run_shell(state)

    logger.info("Bye.")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())

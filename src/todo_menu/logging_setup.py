# src/todo_menu/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the interactive menus readable:
    - allow todo_menu logs (the handler level still applies)
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "todo_menu" or name.startswith("todo_menu."):
            return True

        # Python warnings captured into logging.
        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        # Any other 3rd party: only errors to console.
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure logging with:
    - Console handler (stderr): filtered so menus stay readable
    - File handler (only when log_dir is given): full logs for debugging

    Call this ONCE, very early (before first logger.info).
    Returns the log file path, or None when file logging is off.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Console (interactive)
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = None
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "todo.log"

        # File (everything)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file

# src/todo_menu/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing here affects task data: tasks are never persisted.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TODO"

# Local .env never overrides variables already set in the process environment.
load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool
    log_dir: Path

    # ---- Terminal behaviour ----
    clear_screen: bool
    pause_on_notice: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-menu").strip() or "todo-menu"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/todo"))

        clear_screen = _env_bool(_k("CLEAR_SCREEN"), True)
        pause_on_notice = _env_bool(_k("PAUSE_ON_NOTICE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            log_dir=log_dir,
            clear_screen=clear_screen,
            pause_on_notice=pause_on_notice,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS

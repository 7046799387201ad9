# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Settings only change how the terminal and logging behave; tasks are never stored on disk.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo-menu).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_TO_FILE": "Also write a full DEBUG log file (true/false, default: false).",
    "TODO_LOG_DIR": "Directory of todo.log when file logging is on (default: .local/todo).",
    # Terminal
    "TODO_CLEAR_SCREEN": "Clear the terminal before each screen (true/false, default: true).",
    "TODO_PAUSE_ON_NOTICE": "Wait for Enter after notices (true/false, default: true).",
}

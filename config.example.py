# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TASKBOARD_DATA_DIR": "Local data directory, also holds taskboard.log (default: .local/taskboard).",
    "TASKBOARD_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Console identity
    "TASKBOARD_USER_ID": "Owner id used by the console session (default: local).",
    "TASKBOARD_USERNAME": "Display name for the console session (default: the user id).",
}

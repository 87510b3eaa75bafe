# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time.
- Module-level constants are exported for simple scripts.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


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

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    # ---- Console identity ----
    console_user_id: str
    console_username: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskboard").strip() or "taskboard"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskboard"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / "tasks.sqlite3")

        console_user_id = (_first_env(_k("USER_ID"), default="local") or "local").strip()
        # Username defaults to the id so a bare TASKBOARD_USER_ID is enough.
        console_username = (
            _first_env(_k("USERNAME"), default=console_user_id) or console_user_id
        ).strip()

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
            console_user_id=console_user_id,
            console_username=console_username,
        )


SETTINGS = Settings.from_env()

# ---- Optional local overrides (never committed) ----
# Prefer .env; use config_local.py only for safe overrides.
try:
    import config_local as _config_local  # type: ignore
except ImportError:
    _config_local = None


def apply_local_overrides(settings: Settings, local: Any) -> Settings:
    """Apply the safe keys a config_local module may set. Keep it explicit."""
    changes: dict[str, Any] = {}
    if hasattr(local, "TASKS_DB_PATH"):
        changes["tasks_db_path"] = Path(local.TASKS_DB_PATH)
    if hasattr(local, "CONSOLE_USER_ID"):
        changes["console_user_id"] = str(local.CONSOLE_USER_ID)
        # Same rule as from_env: the username follows the id unless set too.
        changes["console_username"] = changes["console_user_id"]
    if hasattr(local, "CONSOLE_USERNAME"):
        changes["console_username"] = str(local.CONSOLE_USERNAME)
    return replace(settings, **changes) if changes else settings


if _config_local is not None:
    SETTINGS = apply_local_overrides(SETTINGS, _config_local)


def get_settings() -> Settings:
    return SETTINGS


# App / logging
APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

# Paths
DATA_DIR = SETTINGS.data_dir
TASKS_DB_PATH = SETTINGS.tasks_db_path

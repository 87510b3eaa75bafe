# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_models import User
from ..tasks.task_service import TaskQueryService
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings kept on the state so commands can read paths/names.
    settings: Any

    task_store: TaskStore
    task_service: TaskQueryService

    # Acting identity for this front-end session.
    user: User

# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The query service depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task, TaskFilter


class TaskRepo(Protocol):
    """
    Owner-scoped task lookups.

    Implementations must only ever return tasks whose user_id == owner_id.
    Store failures are raised as-is; "no match" is never an error here.
    """

    async def get_tasks(self, task_filter: TaskFilter, owner_id: str) -> Sequence[Task]: ...

    async def find_one(self, task_id: str, owner_id: str) -> Task | None: ...

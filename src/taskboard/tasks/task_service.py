# src/taskboard/tasks/task_service.py

from __future__ import annotations

"""
Task query service.

The policy layer between callers and the task store:
- every store call is scoped by the acting user's id,
- a missing single task becomes TaskNotFoundError,
- store failures propagate untouched (no wrapping, no retries).
"""

import logging
from collections.abc import Sequence

from ..core.ports import TaskRepo
from .errors import TaskNotFoundError
from .task_models import Task, TaskFilter, User

logger = logging.getLogger(__name__)


class TaskQueryService:
    def __init__(self, task_store: TaskRepo) -> None:
        self._task_store = task_store

    async def list_tasks(self, task_filter: TaskFilter, user: User) -> Sequence[Task]:
        """
        Return the acting user's tasks matching `task_filter`.

        The store's result is returned as-is: composition, ordering and owner
        scoping all happen at the store boundary.
        """
        logger.debug(
            "list_tasks user=%s status=%s search=%r",
            user.id,
            task_filter.status,
            task_filter.search,
        )
        return await self._task_store.get_tasks(task_filter, user.id)

    async def get_task_by_id(self, task_id: str, user: User) -> Task:
        """Return one of the acting user's tasks or raise TaskNotFoundError."""
        task = await self._task_store.find_one(task_id, user.id)
        if task is None:
            logger.info("Task not found id=%s user=%s", task_id, user.id)
            raise TaskNotFoundError(task_id)
        return task

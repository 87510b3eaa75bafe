# src/taskboard/tasks/errors.py

from __future__ import annotations


class TaskNotFoundError(LookupError):
    """No task with this id exists for the acting user."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f'Task with ID "{task_id}" not found')
        self.task_id = task_id


class TaskStoreError(RuntimeError):
    """The task store could not execute a query (the cause is chained)."""

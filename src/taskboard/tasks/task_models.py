# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TaskStatus(StrEnum):
    """Task lifecycle status (values are persisted as-is)."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.OPEN
        try:
            return cls(raw)
        except ValueError:
            return cls.OPEN


@dataclass(slots=True)
class User:
    """
    Authenticated identity.

    Owned by the identity subsystem; this package only ever reads `id`.
    The credential is opaque and kept out of repr/logs.
    """

    id: str
    username: str
    password: str = field(default="", repr=False)


@dataclass(slots=True)
class Task:
    id: str
    title: str
    description: str
    status: TaskStatus
    user_id: str


@dataclass(slots=True, frozen=True)
class TaskFilter:
    """
    Optional predicates for a task listing.

    status=None means "any status", search=None (or "") means "no text filter".
    """

    status: TaskStatus | None = None
    search: str | None = None

# src/taskboard/tasks/task_store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
import time
import uuid
from pathlib import Path
from typing import Any

from .errors import TaskStoreError
from .task_models import Task, TaskFilter, TaskStatus

logger = logging.getLogger(__name__)


def _casefold(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _like_pattern(text: str) -> str:
    escaped = text.casefold().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class TaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Every read is scoped by owner: a task that belongs to someone else is
    indistinguishable from a missing one.

    Thread-safety:
    - each method opens its own SQLite connection
    - async methods run the blocking part in a worker thread
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except sqlite3.Error:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")
        # SQLite LOWER() only folds ASCII; search needs full Unicode folding.
        conn.create_function("casefold", 1, _casefold, deterministic=True)

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()

            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    status TEXT NOT NULL DEFAULT 'OPEN',
                    user_id TEXT NOT NULL,
                    created_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(tasks)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE tasks ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("description", "TEXT NOT NULL DEFAULT ''")
            add_col("status", "TEXT NOT NULL DEFAULT 'OPEN'")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_tasks_owner_status ON tasks(user_id, status)")

            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=str(row["id"]),
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
            status=TaskStatus.from_db(row["status"]),
            user_id=str(row["user_id"]),
        )

    # ---- sync queries (run in a worker thread) ----

    def _select_tasks(self, task_filter: TaskFilter, owner_id: str) -> list[Task]:
        where = ["user_id = ?"]
        params: list[Any] = [owner_id]

        if task_filter.status is not None:
            where.append("status = ?")
            params.append(TaskStatus(task_filter.status).value)

        if task_filter.search:
            pattern = _like_pattern(task_filter.search)
            where.append(
                "(casefold(title) LIKE ? ESCAPE '\\' OR casefold(description) LIKE ? ESCAPE '\\')"
            )
            params.extend([pattern, pattern])

        sql = f"SELECT * FROM tasks WHERE {' AND '.join(where)} ORDER BY rowid ASC"

        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(sql, params)
            return [self._row_to_task(r) for r in cur.fetchall()]
        finally:
            conn.close()

    def _select_one(self, task_id: str, owner_id: str) -> Task | None:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute(
                "SELECT * FROM tasks WHERE id = ? AND user_id = ? LIMIT 1",
                (task_id, owner_id),
            )
            row = cur.fetchone()
            return self._row_to_task(row) if row else None
        finally:
            conn.close()

    # ---- public API ----

    async def get_tasks(self, task_filter: TaskFilter, owner_id: str) -> list[Task]:
        """
        Owner-scoped listing.

        - status: exact match when set
        - search: case-insensitive substring of title OR description when non-empty
        Results come back in insertion order; no match -> [].
        """
        try:
            return await asyncio.to_thread(self._select_tasks, task_filter, owner_id)
        except sqlite3.Error as e:
            logger.exception(
                "Failed to get tasks for user=%s status=%s search=%r",
                owner_id,
                task_filter.status,
                task_filter.search,
            )
            raise TaskStoreError(f"Failed to get tasks for user {owner_id}") from e

    async def find_one(self, task_id: str, owner_id: str) -> Task | None:
        try:
            return await asyncio.to_thread(self._select_one, task_id, owner_id)
        except sqlite3.Error as e:
            logger.exception("Failed to load task id=%s user=%s", task_id, owner_id)
            raise TaskStoreError(f"Failed to load task {task_id}") from e

    def count_tasks(self) -> int:
        conn = self._get_conn()
        try:
            cur = conn.cursor()
            cur.execute("SELECT COUNT(*) FROM tasks")
            (n,) = cur.fetchone()
            return int(n)
        finally:
            conn.close()

    def add_task(
        self,
        *,
        title: str,
        user_id: str,
        description: str = "",
        status: TaskStatus = TaskStatus.OPEN,
    ) -> Task:
        """Insert a task row (seeding / fixtures) and return it."""
        if not title or not title.strip():
            raise ValueError("title is required")
        if not user_id:
            raise ValueError("user_id is required")

        task = Task(
            id=str(uuid.uuid4()),
            title=title.strip(),
            description=(description or "").strip(),
            status=TaskStatus(status),
            user_id=user_id,
        )

        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO tasks(id, title, description, status, user_id, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (task.id, task.title, task.description, task.status.value, task.user_id, time.time()),
            )
            conn.commit()
            logger.debug("Task added id=%s user=%s status=%s", task.id, task.user_id, task.status.value)
            return task
        finally:
            conn.close()

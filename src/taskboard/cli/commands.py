# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence

from ..core.state import AppState
from ..tasks.errors import TaskNotFoundError, TaskStoreError
from ..tasks.task_models import Task, TaskFilter, TaskStatus, User

CommandHandler = Callable[[AppState, list[str], User], Awaitable[str]]

logger = logging.getLogger(__name__)

STATUS_PREFIX = "status:"


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /tasks, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    async def handle(self, state: AppState, line: str, user: User | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return await handler(state, args, user or state.user)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_filter(args: list[str]) -> TaskFilter:
    """
    Build a TaskFilter from command args.

    `status:<value>` selects a status (case-insensitive); every other token is
    joined into the search text. Raises ValueError on an unknown status.
    """
    status: TaskStatus | None = None
    words: list[str] = []
    for arg in args:
        if arg.lower().startswith(STATUS_PREFIX):
            raw = arg[len(STATUS_PREFIX):].strip().upper()
            status = TaskStatus(raw)
        else:
            words.append(arg)
    search = " ".join(words) or None
    return TaskFilter(status=status, search=search)


def _format_task(task: Task) -> str:
    line = f"[{task.status.value}] {task.id} {task.title}"
    if task.description:
        line += f" - {task.description}"
    return line


def _format_tasks(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No tasks found."
    lines = [f"Tasks ({len(tasks)}):"]
    for i, t in enumerate(tasks, start=1):
        lines.append(f"  {i}. {_format_task(t)}")
    return "\n".join(lines)


async def cmd_help(state: AppState, args: list[str], user: User) -> str:
    return registry.build_help()


async def cmd_status(state: AppState, args: list[str], user: User) -> str:
    app_name = getattr(state.settings, "app_name", "taskboard")
    db_path = getattr(state.settings, "tasks_db_path", "?")
    try:
        total = state.task_store.count_tasks()
    except Exception:
        logger.exception("count_tasks failed")
        total = -1
    return (
        "Status:\n"
        f"  App: {app_name}\n"
        f"  User: {user.username} ({user.id})\n"
        f"  Database: {db_path}\n"
        f"  Tasks stored (all users): {total}"
    )


async def cmd_tasks(state: AppState, args: list[str], user: User) -> str:
    """
    /tasks                         -> all of your tasks
    /tasks status:done             -> only DONE tasks
    /tasks status:open groceries   -> OPEN tasks mentioning "groceries"
    """
    try:
        task_filter = parse_task_filter(args)
    except ValueError:
        allowed = " | ".join(s.value for s in TaskStatus)
        return f"Usage: /tasks [status:{allowed}] [search words...]"

    try:
        tasks = await state.task_service.list_tasks(task_filter, user)
    except TaskStoreError:
        return "Could not load tasks right now."
    return _format_tasks(tasks)


async def cmd_task(state: AppState, args: list[str], user: User) -> str:
    if len(args) != 1:
        return "Usage: /task <id>"

    try:
        task = await state.task_service.get_task_by_id(args[0], user)
    except TaskNotFoundError as e:
        return f"{e}."
    except TaskStoreError:
        return "Could not load the task right now."
    return _format_task(task)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show current user and database.")
registry.register(
    "tasks",
    cmd_tasks,
    help_text="List your tasks: /tasks [status:OPEN|IN_PROGRESS|DONE] [search words...]",
    aliases=["ls"],
)
registry.register("task", cmd_task, help_text="Show one of your tasks: /task <id>.")

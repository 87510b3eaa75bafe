# tests/test_commands.py

from __future__ import annotations

import pytest

from taskboard.cli.commands import CommandRegistry, parse_task_filter, registry
from taskboard.tasks.task_models import TaskStatus


@pytest.mark.asyncio
async def test_command_registry_routes_with_acting_user(state) -> None:
    reg = CommandRegistry()
    seen = []

    async def handler(state, args, user):
        seen.append((args, user.id))
        return "ok"

    reg.register("a", handler, "a", aliases=["b"])

    assert await reg.handle(state, "/a x y") == "ok"
    assert await reg.handle(state, "/B") == "ok"
    assert seen == [(["x", "y"], "someId"), ([], "someId")]


@pytest.mark.asyncio
async def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert await reg.handle(state, "hello") is None
    assert "Unknown command" in (await reg.handle(state, "/nope") or "")
    assert "Empty command" in (await reg.handle(state, "/") or "")


def test_parse_task_filter() -> None:
    f = parse_task_filter(["status:done", "Hello", "world"])
    assert f.status is TaskStatus.DONE
    assert f.search == "Hello world"

    empty = parse_task_filter([])
    assert empty.status is None
    assert empty.search is None

    with pytest.raises(ValueError):
        parse_task_filter(["status:someday"])


@pytest.mark.asyncio
async def test_tasks_command_lists_only_own_matching_tasks(state) -> None:
    state.task_store.add_task(title="Say hello", user_id="someId", status=TaskStatus.DONE)
    state.task_store.add_task(title="Hello open", user_id="someId")
    state.task_store.add_task(title="Hello foreign", user_id="otherId", status=TaskStatus.DONE)

    reply = await registry.handle(state, "/tasks status:DONE hello")

    assert reply is not None
    assert reply.startswith("Tasks (1):")
    assert "Say hello" in reply
    assert "foreign" not in reply


@pytest.mark.asyncio
async def test_tasks_command_usage_and_empty(state) -> None:
    assert "Usage: /tasks" in (await registry.handle(state, "/tasks status:bogus") or "")
    assert await registry.handle(state, "/tasks") == "No tasks found."


@pytest.mark.asyncio
async def test_task_command_found_and_not_found(state) -> None:
    mine = state.task_store.add_task(title="Mine", description="desc", user_id="someId")
    theirs = state.task_store.add_task(title="Theirs", user_id="otherId")

    reply = await registry.handle(state, f"/task {mine.id}")
    assert reply == f"[OPEN] {mine.id} Mine - desc"

    assert await registry.handle(state, f"/task {theirs.id}") == (
        f'Task with ID "{theirs.id}" not found.'
    )
    assert await registry.handle(state, "/task") == "Usage: /task <id>"


@pytest.mark.asyncio
async def test_help_and_status(state) -> None:
    help_text = await registry.handle(state, "/help") or ""
    assert "/tasks" in help_text and "/task " in help_text

    status = await registry.handle(state, "/status") or ""
    assert "Ariel (someId)" in status
    assert "Tasks stored (all users): 0" in status

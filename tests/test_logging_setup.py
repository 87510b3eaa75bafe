# tests/test_logging_setup.py

from __future__ import annotations

import logging

from taskboard.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_the_rest() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("taskboard.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("taskboard", logging.INFO))

    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))

    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))

    # prefix match must not leak a look-alike package through
    assert not f.filter(_record("taskboardx", logging.INFO))

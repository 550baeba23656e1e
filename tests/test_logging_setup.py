# tests/test_logging_setup.py

from __future__ import annotations

import logging
import sys

from tasklist.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int, *, with_exc: bool = False) -> logging.LogRecord:
    exc_info = None
    if with_exc:
        try:
            raise RuntimeError("disk full")
        except RuntimeError:
            exc_info = sys.exc_info()
    return logging.LogRecord(name, level, __file__, 1, "msg", None, exc_info)


def test_controller_failure_traceback_stays_off_console() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasklist.core.controller", logging.ERROR, with_exc=True)) is False
    assert f.filter(_record("tasklist.core.controller", logging.CRITICAL, with_exc=True)) is True
    # Plain controller info lines still show.
    assert f.filter(_record("tasklist.core.controller", logging.INFO)) is True


def test_store_chatter_hidden_below_warning() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasklist.tasks.task_store", logging.INFO)) is False
    assert f.filter(_record("tasklist.tasks.task_store", logging.WARNING)) is True


def test_app_and_third_party_levels() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("tasklist.cli.main", logging.INFO)) is True
    assert f.filter(_record("py.warnings", logging.WARNING)) is False
    assert f.filter(_record("asyncio", logging.WARNING)) is False
    assert f.filter(_record("asyncio", logging.ERROR)) is True

# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
import pytest_asyncio

from tasklist.cli.bootstrap import create_initial_state, shutdown
from tasklist.core.state import AppState
from tasklist.tasks.task_store import TaskStore

from .fakes import Notices


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="tasklist-test",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "tasks.sqlite3",
        prefs_path=tmp_path / "preferences.json",
        refetch_after_write=True,
        color="never",
    )


@pytest.fixture()
def notices() -> Notices:
    return Notices()


@pytest_asyncio.fixture()
async def store(tmp_path: Path):
    """Real SQLite store: its ordering and row counts are what we want to test."""
    async with TaskStore(tmp_path / "tasks.sqlite3") as s:
        yield s


@pytest_asyncio.fixture()
async def state(settings: SimpleNamespace, notices: Notices):
    st: AppState = await create_initial_state(settings=settings, notify=notices)
    try:
        yield st
    finally:
        await shutdown(st)

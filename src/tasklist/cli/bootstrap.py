# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the task store and wires it, with preferences, into the controller.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskListController
from ..core.ports import Notifier
from ..core.preferences import JsonPreferenceStore
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)
    settings.prefs_path.parent.mkdir(parents=True, exist_ok=True)


async def create_initial_state(*, settings=None, notify: Notifier | None = None) -> AppState:
    """
    Open the store and build AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings(). The caller owns the result and
    must call shutdown() when done.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_db_path)
    await task_store.open()

    prefs = JsonPreferenceStore(settings.prefs_path)
    controller = TaskListController(
        task_store,
        prefs,
        notify=notify,
        refetch_after_write=bool(getattr(settings, "refetch_after_write", True)),
    )
    await controller.refresh()

    logger.info(
        "State ready tasks=%d dark_mode=%s", len(controller.tasks), controller.is_dark_mode
    )
    return AppState(settings=settings, task_store=task_store, prefs=prefs, controller=controller)


async def shutdown(state: AppState) -> None:
    try:
        await state.task_store.close()
    except Exception:
        logger.exception("Failed to close task store.")

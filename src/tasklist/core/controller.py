# src/tasklist/core/controller.py

"""
Task list controller.

Turns user intents (add, toggle, edit, delete, delete-all, refresh, theme)
into TaskRepo calls and keeps a display-ready copy of the list.

Rules:
- validation (empty names) happens here, never in the store;
- the caller's Task objects are never mutated; writes go through copies;
- on store failure the cache keeps its last-known-good value and the user is notified;
- every action, including the sync that follows it, runs under one asyncio.Lock.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..tasks.task_models import Priority, Task, sort_tasks
from ..tasks.task_store import TaskStoreError
from .ports import Notifier, PreferenceRepo, TaskRepo
from .preferences import IS_DARK_MODE

logger = logging.getLogger(__name__)

EMPTY_NAME_MESSAGE = "Enter a task name"

CachePatch = Callable[[list[Task]], list[Task]]


@dataclass(frozen=True, slots=True)
class EditIntent:
    """What the user accepted in an edit prompt. A cancelled prompt is None."""

    name: str
    priority: Priority


class TaskListController:
    def __init__(
        self,
        repo: TaskRepo,
        prefs: PreferenceRepo,
        *,
        notify: Notifier | None = None,
        refetch_after_write: bool = True,
    ) -> None:
        self._repo = repo
        self._prefs = prefs
        self._notify: Notifier = notify or (lambda _text: None)
        self._refetch = refetch_after_write
        self._lock = asyncio.Lock()

        self.tasks: list[Task] = []
        self.is_dark_mode = prefs.get_bool(IS_DARK_MODE, False)

    # ---- internals ----

    def _report(self, action: str, err: Exception) -> None:
        # Must be called from an except block.
        logger.exception("Failed to %s.", action)
        self._notify(f"Error: could not {action}: {err}")

    async def _refresh_locked(self) -> bool:
        try:
            data = await self._repo.list_tasks()
        except TaskStoreError as e:
            self._report("load tasks", e)
            return False
        self.tasks = data
        return True

    async def _sync(self, patch: CachePatch) -> None:
        if self._refetch:
            await self._refresh_locked()
        else:
            self.tasks = sort_tasks(patch(list(self.tasks)))

    async def _write(self, updated: Task, action: str) -> bool:
        async with self._lock:
            try:
                n = await self._repo.update(updated)
            except TaskStoreError as e:
                self._report(action, e)
                return False

            def patch(cache: list[Task]) -> list[Task]:
                if n == 0:
                    return cache
                return [replace(updated) if t.id == updated.id else t for t in cache]

            await self._sync(patch)
            return n > 0

    # ---- intents ----

    async def refresh(self) -> bool:
        async with self._lock:
            return await self._refresh_locked()

    async def add(self, name: str, priority: Priority | None = None) -> Task | None:
        clean = (name or "").strip()
        if not clean:
            self._notify(EMPTY_NAME_MESSAGE)
            return None

        task = Task(name=clean, priority=priority if priority is not None else Priority.default())
        async with self._lock:
            try:
                created = await self._repo.create(task)
            except TaskStoreError as e:
                self._report("add task", e)
                return None

            logger.info("Task created id=%s priority=%s", created.id, created.priority.label)
            await self._sync(lambda cache: [*cache, replace(created)])
        return created

    async def toggle_done(self, task: Task) -> bool:
        return await self._write(replace(task, done=not task.done), "update task")

    async def edit(self, task: Task, new_name: str, new_priority: Priority) -> bool:
        clean = (new_name or "").strip()
        if not clean:
            self._notify(EMPTY_NAME_MESSAGE)
            return False
        return await self._write(replace(task, name=clean, priority=new_priority), "edit task")

    async def apply_edit(self, task: Task, intent: EditIntent | None) -> bool:
        if intent is None:
            logger.debug("Edit cancelled id=%s", task.id)
            return False
        return await self.edit(task, intent.name, intent.priority)

    async def remove(self, task: Task) -> bool:
        task_id = task.id
        if task_id is None:
            return False

        async with self._lock:
            try:
                n = await self._repo.delete(task_id)
            except TaskStoreError as e:
                self._report("delete task", e)
                return False

            logger.info("Task removed id=%s rows=%s", task_id, n)
            await self._sync(lambda cache: [t for t in cache if t.id != task_id])
            return n > 0

    async def remove_all(self, confirm: Callable[[], bool]) -> int:
        """Delete every task, but only if confirm() (the second step of the prompt) says yes."""
        if not confirm():
            logger.debug("Delete-all cancelled.")
            return 0

        async with self._lock:
            try:
                n = await self._repo.delete_all()
            except TaskStoreError as e:
                self._report("delete all tasks", e)
                return 0

            await self._sync(lambda _cache: [])
            return n

    def toggle_theme(self) -> bool:
        self.is_dark_mode = not self.is_dark_mode
        try:
            self._prefs.set_bool(IS_DARK_MODE, self.is_dark_mode)
        except OSError as e:
            self._report("save theme preference", e)
        return self.is_dark_mode

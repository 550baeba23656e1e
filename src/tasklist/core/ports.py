# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Task

Notifier = Callable[[str], None]
# User-visible, dismissible message (console line, snackbar, ...).


class TaskRepo(Protocol):
    async def create(self, task: Task) -> Task: ...
    async def list_tasks(self) -> list[Task]: ...
    async def update(self, task: Task) -> int: ...
    async def delete(self, task_id: int) -> int: ...
    async def delete_all(self) -> int: ...


class PreferenceRepo(Protocol):
    def get_bool(self, name: str, default: bool = False) -> bool: ...
    def set_bool(self, name: str, value: bool) -> None: ...

# src/tasklist/tasks/task_models.py

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum


def now_ms() -> int:
    return int(time.time() * 1000)


class Priority(IntEnum):
    """
    Task priority.

    The integer value is what gets persisted (LOW=1, MEDIUM=2, HIGH=3).
    MEDIUM is the single default used whenever a value is missing or invalid.
    """

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def default(cls) -> Priority:
        return cls.MEDIUM

    @classmethod
    def from_db(cls, raw: int | None) -> Priority:
        if raw is None:
            return cls.default()
        try:
            return cls(int(raw))
        except (TypeError, ValueError):
            return cls.default()

    @classmethod
    def parse(cls, text: str | None) -> Priority | None:
        """Parse user input like "high", "h" or "3". Returns None if unrecognised."""
        s = (text or "").strip().lower()
        if not s:
            return None
        for p in cls:
            if s in (p.name.lower(), p.name[0].lower(), str(p.value)):
                return p
        return None


@dataclass(slots=True)
class Task:
    name: str
    done: bool = False
    priority: Priority = Priority.MEDIUM
    created_at: int = field(default_factory=now_ms)
    id: int | None = None


def _sort_key(task: Task) -> tuple[int, int, bool, int]:
    return (-int(task.priority), task.created_at, task.id is None, task.id or 0)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """
    Canonical display order: priority desc, then created_at asc.

    Ties fall back to id asc (unsaved tasks last), matching TaskStore.list_tasks().
    """
    return sorted(tasks, key=_sort_key)

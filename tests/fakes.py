# tests/fakes.py

from __future__ import annotations

from dataclasses import replace

from tasklist.tasks.task_models import Task, sort_tasks
from tasklist.tasks.task_store import TaskStoreError


class FakeTaskRepo:
    """
    In-memory TaskRepo used for controller unit tests.

    - Records every call for assertions
    - Can be switched into failure mode (raises TaskStoreError)
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.rows: dict[int, Task] = {}
        self.calls: list[str] = []
        self.fail = False
        self._next_id = 1
        for t in tasks or []:
            t.id = self._next_id
            self.rows[t.id] = replace(t)
            self._next_id += 1

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if self.fail:
            raise TaskStoreError(f"{name}: disk I/O error")

    async def create(self, task: Task) -> Task:
        self._enter("create")
        task.id = self._next_id
        self._next_id += 1
        self.rows[task.id] = replace(task)
        return task

    async def list_tasks(self) -> list[Task]:
        self._enter("list_tasks")
        return sort_tasks(replace(t) for t in self.rows.values())

    async def update(self, task: Task) -> int:
        self._enter("update")
        if task.id not in self.rows:
            return 0
        self.rows[task.id] = replace(task)
        return 1

    async def delete(self, task_id: int) -> int:
        self._enter("delete")
        return 1 if self.rows.pop(task_id, None) is not None else 0

    async def delete_all(self) -> int:
        self._enter("delete_all")
        n = len(self.rows)
        self.rows.clear()
        return n


class FakePreferences:
    def __init__(self, values: dict[str, bool] | None = None) -> None:
        self.values = dict(values or {})
        self.fail = False

    def get_bool(self, name: str, default: bool = False) -> bool:
        return self.values.get(name, default)

    def set_bool(self, name: str, value: bool) -> None:
        if self.fail:
            raise OSError("read-only file system")
        self.values[name] = value


class Notices:
    """Collects notify() messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, text: str) -> None:
        self.messages.append(text)

# src/tasklist/tasks/task_store.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import sqlite3
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from .task_models import Priority, Task

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

_T = TypeVar("_T")


class TaskStoreError(RuntimeError):
    """Any storage-level failure (I/O, corrupt DB, store not open)."""


class TaskStore:
    """
    SQLite task store.

    Lifecycle:
    - constructed without touching the disk
    - open() creates the single long-lived connection and the schema
    - close() releases it (also usable as `async with TaskStore(path) as store`)

    Concurrency:
    - blocking SQLite calls run in a worker thread (asyncio.to_thread)
    - a lock serialises access to the shared connection
    - each operation is a single transaction
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    @property
    def db_path(self) -> str | Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def __aenter__(self) -> TaskStore:
        await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def open(self) -> None:
        if self._conn is not None:
            return
        await asyncio.to_thread(self._open_sync)
        try:
            total = await self.count()
        except TaskStoreError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    async def close(self) -> None:
        conn = self._conn
        if conn is None:
            return
        self._conn = None
        await asyncio.to_thread(self._close_sync, conn)
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _close_sync(self, conn: sqlite3.Connection) -> None:
        with self._lock:
            conn.close()

    def _open_sync(self) -> None:
        try:
            if isinstance(self._db_path, Path):
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), timeout=30.0, check_same_thread=False)
        except (OSError, sqlite3.Error) as e:
            raise TaskStoreError(f"Cannot open task DB {self._db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        try:
            self._ensure_schema(conn)
        except BaseException:
            conn.close()
            raise
        self._conn = conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        try:
            (version,) = conn.execute("PRAGMA user_version").fetchone()
            if version not in (0, SCHEMA_VERSION):
                raise TaskStoreError(
                    f"Unsupported task DB schema version {version} (expected {SCHEMA_VERSION})"
                )

            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    done INTEGER NOT NULL,
                    priority INTEGER NOT NULL,
                    createdAt INTEGER NOT NULL
                )
                """
            )
            if version == 0:
                conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise TaskStoreError(f"Failed to prepare task DB schema: {e}") from e

    def _run(self, fn: Callable[[sqlite3.Connection], _T]) -> _T:
        """Run fn inside one transaction on the shared connection."""
        with self._lock:
            conn = self._conn
            if conn is None:
                raise TaskStoreError("TaskStore is not open")
            try:
                result = fn(conn)
                conn.commit()
                return result
            except sqlite3.Error as e:
                conn.rollback()
                raise TaskStoreError(str(e)) from e

    async def _call(self, fn: Callable[[sqlite3.Connection], _T]) -> _T:
        if self._conn is None:
            raise TaskStoreError("TaskStore is not open")
        return await asyncio.to_thread(self._run, fn)

    @staticmethod
    def _task_params(task: Task) -> dict[str, Any]:
        return {
            "id": task.id,
            "name": task.name,
            "done": 1 if task.done else 0,
            "priority": int(task.priority),
            "createdAt": int(task.created_at),
        }

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            name=str(row["name"] or ""),
            done=bool(row["done"]),
            priority=Priority.from_db(row["priority"]),
            created_at=int(row["createdAt"] or 0),
        )

    # ---- public API ----

    async def count(self) -> int:
        def op(conn: sqlite3.Connection) -> int:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

        return await self._call(op)

    async def create(self, task: Task) -> Task:
        params = self._task_params(task)

        def op(conn: sqlite3.Connection) -> int:
            cur = conn.execute(
                """
                INSERT INTO tasks(name, done, priority, createdAt)
                VALUES (:name, :done, :priority, :createdAt)
                """,
                params,
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise TaskStoreError("SQLite did not return lastrowid for tasks insert")
            return int(rowid)

        task.id = await self._call(op)
        logger.debug(
            "Task added id=%s priority=%s created_at=%s",
            task.id,
            task.priority.label,
            task.created_at,
        )
        return task

    async def list_tasks(self) -> list[Task]:
        def op(conn: sqlite3.Connection) -> list[Task]:
            rows = conn.execute(
                """
                SELECT id, name, done, priority, createdAt
                FROM tasks
                ORDER BY priority DESC, createdAt ASC, id ASC
                """
            ).fetchall()
            return [self._row_to_task(r) for r in rows]

        return await self._call(op)

    async def update(self, task: Task) -> int:
        if task.id is None:
            return 0
        params = self._task_params(task)

        def op(conn: sqlite3.Connection) -> int:
            cur = conn.execute(
                """
                UPDATE tasks
                SET name = :name,
                    done = :done,
                    priority = :priority,
                    createdAt = :createdAt
                WHERE id = :id
                """,
                params,
            )
            return int(cur.rowcount)

        n = await self._call(op)
        logger.debug("Task updated id=%s rows=%s", task.id, n)
        return n

    async def delete(self, task_id: int) -> int:
        def op(conn: sqlite3.Connection) -> int:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
            return int(cur.rowcount)

        n = await self._call(op)
        logger.debug("Task deleted id=%s rows=%s", task_id, n)
        return n

    async def delete_all(self) -> int:
        def op(conn: sqlite3.Connection) -> int:
            cur = conn.execute("DELETE FROM tasks")
            return int(cur.rowcount)

        n = await self._call(op)
        logger.info("All tasks deleted rows=%s", n)
        return n

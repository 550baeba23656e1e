# src/tasklist/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_store import TaskStore
from .controller import TaskListController
from .preferences import JsonPreferenceStore


@dataclass
class AppState:
    # Settings object (real Settings or a test SimpleNamespace).
    settings: Any

    task_store: TaskStore
    prefs: JsonPreferenceStore
    controller: TaskListController

    # /clear was asked once and awaits "/clear yes".
    clear_pending: bool = False

# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasklist.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "TASKLIST_DATA_DIR",
        "TASKLIST_TASKS_DB_PATH",
        "TASKLIST_PREFS_PATH",
        "TASKLIST_REFETCH_AFTER_WRITE",
        "TASKLIST_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.data_dir == Path(".local/tasklist")
    assert s.tasks_db_path == Path(".local/tasklist/tasks.sqlite3")
    assert s.prefs_path == Path(".local/tasklist/preferences.json")
    assert s.refetch_after_write is True
    assert s.color == "auto"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TASKLIST_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("TASKLIST_TASKS_DB_PATH", raising=False)
    monkeypatch.setenv("TASKLIST_PREFS_PATH", str(tmp_path / "p.json"))
    monkeypatch.setenv("TASKLIST_REFETCH_AFTER_WRITE", "off")
    monkeypatch.setenv("TASKLIST_COLOR", "always")
    monkeypatch.setenv("NO_COLOR", "1")

    s = Settings.from_env()
    assert s.tasks_db_path == tmp_path / "tasks.sqlite3"
    assert s.prefs_path == tmp_path / "p.json"
    assert s.refetch_after_write is False
    assert s.color == "never"

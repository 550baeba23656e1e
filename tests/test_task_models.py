# tests/test_task_models.py

from __future__ import annotations

import pytest

from tasklist.tasks.task_models import Priority, Task, now_ms, sort_tasks


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1, Priority.LOW),
        (2, Priority.MEDIUM),
        (3, Priority.HIGH),
        (0, Priority.MEDIUM),
        (4, Priority.MEDIUM),
        (None, Priority.MEDIUM),
    ],
)
def test_priority_from_db_defaults_to_medium(raw, expected) -> None:
    assert Priority.from_db(raw) is expected


def test_priority_parse_accepts_names_letters_and_numbers() -> None:
    assert Priority.parse("HIGH") is Priority.HIGH
    assert Priority.parse("m") is Priority.MEDIUM
    assert Priority.parse("1") is Priority.LOW
    assert Priority.parse("urgent") is None
    assert Priority.parse("") is None


def test_priority_labels() -> None:
    assert [p.label for p in Priority] == ["Low", "Medium", "High"]


def test_new_task_defaults() -> None:
    before = now_ms()
    t = Task(name="x")
    assert t.id is None
    assert t.done is False
    assert t.priority is Priority.MEDIUM
    assert before <= t.created_at <= now_ms()


def test_sort_tasks_is_pure_and_total() -> None:
    a = Task(name="A", priority=Priority.LOW, created_at=100, id=1)
    b = Task(name="B", priority=Priority.HIGH, created_at=50, id=2)
    c = Task(name="C", priority=Priority.MEDIUM, created_at=75, id=3)
    d = Task(name="D", priority=Priority.HIGH, created_at=50, id=4)
    unsaved = Task(name="U", priority=Priority.HIGH, created_at=50)

    given = [unsaved, a, d, c, b]
    out = sort_tasks(given)

    assert [t.name for t in out] == ["B", "D", "U", "C", "A"]
    assert [t.name for t in given] == ["U", "A", "D", "C", "B"]

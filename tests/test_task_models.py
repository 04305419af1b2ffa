# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from ezra.tasks.task_models import Task, TaskKind, parse_datetime

WHEN = datetime(2023, 1, 28, 18, 0)


def test_rendering() -> None:
    assert str(Task.todo("read")) == "[T][ ] read"
    assert str(Task.deadline("essay", WHEN).with_done(True)) == "[D][X] essay (by: Jan 28 2023 18:00)"
    assert (
        str(Task.event("fair", WHEN, datetime(2023, 1, 28, 20, 30)))
        == "[E][ ] fair (from: Jan 28 2023 18:00 to: Jan 28 2023 20:30)"
    )


def test_with_done_returns_new_value() -> None:
    task = Task.todo("read")
    done = task.with_done(True)
    assert task.done is False
    assert done.done is True
    assert done == Task(TaskKind.TODO, "read", done=True)


@pytest.mark.parametrize("desc", ["", "   "])
def test_description_required(desc: str) -> None:
    with pytest.raises(ValueError):
        Task.todo(desc)


def test_kind_specific_fields_are_enforced() -> None:
    with pytest.raises(ValueError):
        Task(TaskKind.TODO, "x", by=WHEN)
    with pytest.raises(ValueError):
        Task(TaskKind.DEADLINE, "x")
    with pytest.raises(ValueError):
        Task(TaskKind.EVENT, "x", start=WHEN)
    with pytest.raises(ValueError):
        Task(TaskKind.DEADLINE, "x", by=WHEN, end=WHEN)


def test_parse_datetime_is_strict() -> None:
    assert parse_datetime("28/01/2023 1800") == WHEN
    for raw in ("28/1/2023 1800", "28/01/2023 18:00", "28/01/2023  1800", "28/01/2023 1800 "):
        with pytest.raises(ValueError):
            parse_datetime(raw)

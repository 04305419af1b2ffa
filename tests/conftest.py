# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from ezra.core.state import Session
from ezra.tasks.task_list import TaskList
from ezra.tasks.task_models import Task
from ezra.tasks.task_store import TaskStore

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with Session and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Ezra",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "ezra.txt",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def three_tasks() -> list[Task]:
    return [
        Task.todo("read notes"),
        Task.todo("return book to library"),
        Task.todo("buy milk"),
    ]


@pytest.fixture()
def task_list(storage: FakeStorage, three_tasks: list[Task]) -> TaskList:
    return TaskList(storage, three_tasks)


@pytest.fixture()
def session(settings: SimpleNamespace, task_list: TaskList) -> Session:
    return Session(settings=settings, tasks=task_list)

# tests/fakes.py

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ezra.tasks.task_models import Task


@dataclass(slots=True)
class FakeStorage:
    """
    In-memory TaskStorage for unit tests.

    - Records every saved snapshot for assertions
    - `fail=True` makes save_tasks report failure
    """

    initial: list[Task] = field(default_factory=list)
    fail: bool = False
    saves: list[list[Task]] = field(default_factory=list)

    def load_tasks(self) -> list[Task]:
        return list(self.initial)

    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        if self.fail:
            return False
        self.saves.append(list(tasks))
        return True

    def describe(self) -> str:
        return "memory://tasks"

    @property
    def last_saved(self) -> list[Task]:
        return self.saves[-1]

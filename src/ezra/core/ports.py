# src/ezra/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task list depends on a Protocol instead of the concrete file store.
This keeps storage swappable and makes testing easier.
"""

from collections.abc import Sequence
from typing import Protocol

from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Durable storage for the whole task list (full overwrite on every save)."""

    def load_tasks(self) -> list[Task]: ...

    def save_tasks(self, tasks: Sequence[Task]) -> bool: ...

    def describe(self) -> str: ...

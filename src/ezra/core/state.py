# src/ezra/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList


@dataclass
class Session:
    # Settings are kept on the session for easy access from handlers and connectors.
    settings: object

    tasks: TaskList
    running: bool = True

# src/ezra/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the file store into a TaskList owned by a fresh Session.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import Session
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_session(*, settings=None) -> Session:
    """
    Create a Session from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(settings.tasks_path)
    tasks = TaskList.load(store)
    logger.info("Session ready: %d tasks from %s", len(tasks), store.describe())
    return Session(settings=settings, tasks=tasks)

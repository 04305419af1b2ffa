# src/ezra/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from .task_models import Task, TaskKind, format_datetime, parse_datetime

logger = logging.getLogger(__name__)

SEP = " | "


class TaskStore:
    """
    Text-file task store, one task per line:

        <0|1> | <T|D|E> | <description>[ | <by>] or [ | <from> | <to>]

    Date fields are split off from the right, so a description may itself contain " | ".
    Saving always rewrites the whole file (temp file + os.replace).
    """

    def __init__(self, path: str | Path = "ezra.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def describe(self) -> str:
        return str(self._path)

    # ---- encoding ----

    @staticmethod
    def encode(task: Task) -> str:
        fields = ["1" if task.done else "0", task.kind.value, task.description]
        if task.kind is TaskKind.DEADLINE and task.by is not None:
            fields.append(format_datetime(task.by))
        elif task.kind is TaskKind.EVENT and task.start is not None and task.end is not None:
            fields.append(format_datetime(task.start))
            fields.append(format_datetime(task.end))
        return SEP.join(fields)

    @staticmethod
    def decode(line: str) -> Task:
        """Parse one stored line. Raises ValueError if the line is malformed."""
        head = line.split(SEP, 2)
        if len(head) != 3:
            raise ValueError("expected '<done> | <kind> | <description>...'")
        done_raw, kind_raw, rest = head

        if done_raw not in ("0", "1"):
            raise ValueError(f"bad done flag {done_raw!r}")
        done = done_raw == "1"
        kind = TaskKind(kind_raw)

        if kind is TaskKind.TODO:
            return Task(kind, rest, done=done)

        if kind is TaskKind.DEADLINE:
            parts = rest.rsplit(SEP, 1)
            if len(parts) != 2:
                raise ValueError("deadline without /by date")
            description, by = parts
            return Task(kind, description, done=done, by=parse_datetime(by))

        parts = rest.rsplit(SEP, 2)
        if len(parts) != 3:
            raise ValueError("event without /from and /to dates")
        description, start, end = parts
        return Task(
            kind,
            description,
            done=done,
            start=parse_datetime(start),
            end=parse_datetime(end),
        )

    # ---- public API ----

    def load_tasks(self) -> list[Task]:
        """Load all tasks. A missing file is an empty list; malformed lines are skipped."""
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return []

        tasks: list[Task] = []
        skipped = 0
        # Only "\n" ends a record; a stray "\r" must not split a task in two.
        with self._path.open("r", encoding="utf-8", newline="\n") as f:
            for lineno, raw in enumerate(f, start=1):
                line = raw.rstrip("\r\n")
                if not line.strip():
                    continue
                try:
                    tasks.append(self.decode(line))
                except ValueError as e:
                    skipped += 1
                    logger.warning("Skipping malformed line %d in %s: %s", lineno, self._path, e)

        logger.info("Loaded %d tasks from %s (skipped=%d)", len(tasks), self._path, skipped)
        return tasks

    def save_tasks(self, tasks: Sequence[Task]) -> bool:
        """Overwrite the file with `tasks`. Returns False (and logs) on failure."""
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            body = "".join(self.encode(t) + "\n" for t in tasks)
            tmp.write_text(body, "utf-8", newline="\n")
            os.replace(tmp, self._path)
        except (OSError, ValueError):
            # ValueError: UnicodeEncodeError for lone surrogates read via surrogateescape
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
        return True

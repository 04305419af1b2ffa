# src/ezra/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from ..core.errors import TaskIndexError
from ..core.ports import TaskStorage
from .task_models import Task

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "You have no tasks in your list."
NO_MATCHES_MESSAGE = "No matching tasks found."


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class Listing:
    """
    Numbered rendering of (number, task) pairs.

    Lines are produced on iteration, and every iteration starts over, so a listing
    can be printed, joined or re-read any number of times.
    """

    def __init__(
        self,
        entries: Sequence[tuple[int, Task]],
        *,
        header: str,
        empty_message: str,
    ) -> None:
        self._entries = tuple(entries)
        self._header = header
        self._empty_message = empty_message

    def __iter__(self) -> Iterator[str]:
        if not self._entries:
            yield self._empty_message
            return
        yield self._header
        for number, task in self._entries:
            yield f"{number}.{task}"

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def numbers(self) -> list[int]:
        return [number for number, _ in self._entries]

    def __str__(self) -> str:
        return "\n".join(self)


class TaskList:
    """
    Ordered task list owned by one session.

    Indices are zero-based here; every user-facing number is index + 1.
    Each mutation rewrites the whole list through the storage port. A failed save
    does not undo the change; it is logged and noted at the end of the reply.
    """

    def __init__(self, storage: TaskStorage, tasks: Iterable[Task] = ()) -> None:
        self._storage = storage
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def load(cls, storage: TaskStorage) -> TaskList:
        return cls(storage, storage.load_tasks())

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    # ---- helpers ----

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index + 1, len(self._tasks))

    def _persist(self, reply: str) -> str:
        if self._storage.save_tasks(self.tasks()):
            return reply
        logger.warning("Task list changed in memory but was not saved (%d tasks).", len(self))
        return f"{reply}\nWarning: could not save tasks to {self._storage.describe()}."

    # ---- queries ----

    def listing(self) -> Listing:
        return Listing(
            list(enumerate(self._tasks, start=1)),
            header="Here are the tasks in your list:",
            empty_message=EMPTY_LIST_MESSAGE,
        )

    def find(self, keyword: str) -> Listing:
        """Tasks whose description contains `keyword` (case-sensitive), keeping their numbers."""
        matches = [
            (number, task)
            for number, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        ]
        return Listing(
            matches,
            header="Here are the matching tasks in your list:",
            empty_message=NO_MATCHES_MESSAGE,
        )

    # ---- mutations ----

    def add(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s total=%d", task.kind.name, len(self._tasks))
        return self._persist(
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(self._tasks))} in the list."
        )

    def delete(self, indices: int | Iterable[int]) -> str:
        """
        Remove one or more tasks by zero-based index.

        All indices are checked before anything is removed, so an out-of-range index
        leaves the list untouched. Repeated indices remove the task once.
        """
        wanted = [indices] if isinstance(indices, int) else list(indices)
        if not wanted:
            raise ValueError("at least one index is required")
        for index in wanted:
            self._check(index)

        doomed = sorted(set(wanted))
        removed = [self._tasks[i] for i in doomed]
        for i in reversed(doomed):
            del self._tasks[i]
        logger.debug("Tasks deleted numbers=%s total=%d", [i + 1 for i in doomed], len(self))

        noun = "this task" if len(removed) == 1 else "these tasks"
        lines = [f"Noted. I've removed {noun}:"]
        lines.extend(f"  {task}" for task in removed)
        lines.append(f"Now you have {_count(len(self._tasks))} in the list.")
        return self._persist("\n".join(lines))

    def mark(self, index: int) -> str:
        self._check(index)
        self._tasks[index] = self._tasks[index].with_done(True)
        return self._persist(f"Nice! I've marked this task as done:\n  {self._tasks[index]}")

    def unmark(self, index: int) -> str:
        self._check(index)
        self._tasks[index] = self._tasks[index].with_done(False)
        return self._persist(
            f"OK, I've marked this task as not done yet:\n  {self._tasks[index]}"
        )

# src/ezra/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime
from enum import StrEnum

# Input/storage format: 28/01/2023 1800
DATETIME_FORMAT = "%d/%m/%Y %H%M"
DATETIME_EXAMPLE = "28/01/2023 1800"
DISPLAY_FORMAT = "%b %d %Y %H:%M"

_DATETIME_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4} [0-9]{4}")


def parse_datetime(raw: str) -> datetime:
    """
    Parse `dd/MM/yyyy HHmm` strictly.

    strptime alone accepts single-digit days/months, so the shape is checked first.
    Raises ValueError for anything else (including impossible dates like 31/02).
    """
    if not _DATETIME_RE.fullmatch(raw):
        raise ValueError(f"not a dd/MM/yyyy HHmm date time: {raw!r}")
    return datetime.strptime(raw, DATETIME_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


class TaskKind(StrEnum):
    """Task variant. The value is the one-letter marker used in storage and rendering."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(frozen=True, slots=True)
class Task:
    kind: TaskKind
    description: str
    done: bool = False

    by: datetime | None = None  # DEADLINE only
    start: datetime | None = None  # EVENT only (/from)
    end: datetime | None = None  # EVENT only (/to)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")

        wants_by = self.kind is TaskKind.DEADLINE
        wants_span = self.kind is TaskKind.EVENT
        if (self.by is not None) != wants_by:
            raise ValueError(f"'by' must be set only for deadlines (kind={self.kind.name})")
        if (self.start is not None) != wants_span or (self.end is not None) != wants_span:
            raise ValueError(f"'start'/'end' must be set only for events (kind={self.kind.name})")

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: datetime) -> Task:
        return cls(TaskKind.DEADLINE, description, by=by)

    @classmethod
    def event(cls, description: str, start: datetime, end: datetime) -> Task:
        return cls(TaskKind.EVENT, description, start=start, end=end)

    # ---- state ----

    def with_done(self, done: bool) -> Task:
        return replace(self, done=done)

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    def __str__(self) -> str:
        text = f"[{self.kind.value}][{self.status_icon}] {self.description}"
        if self.kind is TaskKind.DEADLINE and self.by is not None:
            text += f" (by: {self.by.strftime(DISPLAY_FORMAT)})"
        elif self.kind is TaskKind.EVENT and self.start is not None and self.end is not None:
            text += (
                f" (from: {self.start.strftime(DISPLAY_FORMAT)}"
                f" to: {self.end.strftime(DISPLAY_FORMAT)})"
            )
        return text

# src/ezra/core/parser.py

"""
Command parser.

Each parse_* function takes the full raw line, matches it as a whole against one
fixed grammar and either returns the parsed value or raises FormatError with a
usage hint. Index range is not checked here (the task list does that).

parse_command() dispatches on the command keyword prefix and returns a ParseResult
instead of raising, so callers branch on the outcome rather than catch.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..tasks.task_models import DATETIME_EXAMPLE, Task, parse_datetime
from .errors import FormatError

DATETIME_ERROR = f"Date time must be in this format: {DATETIME_EXAMPLE}"

_TODO_RE = re.compile(r"todo\s(?P<desc>\S.*)")
_DEADLINE_RE = re.compile(r"deadline\s(?P<desc>\S.*?)\s/by\s(?P<by>\S.*)")
_EVENT_RE = re.compile(
    r"event\s(?P<desc>\S.*?)\s/from\s(?P<start>\S.*?)\s/to\s(?P<end>\S.*)"
)
_MARK_RE = re.compile(r"mark\s(?P<n>[0-9]+)", re.ASCII)
_UNMARK_RE = re.compile(r"unmark\s(?P<n>[0-9]+)", re.ASCII)
_DELETE_RE = re.compile(r"delete(?P<ns>(?:\s[0-9]+)+)", re.ASCII)
_FIND_RE = re.compile(r"find\s(?P<kw>\S.*)")

TODO_USAGE = "Invalid 'todo' command format. Usage: todo <description>"
DEADLINE_USAGE = (
    "Invalid 'deadline' command format. Usage: deadline <description> /by <date time>"
)
EVENT_USAGE = (
    "Invalid 'event' command format. "
    "Usage: event <description> /from <date time> /to <date time>"
)
MARK_USAGE = "Invalid 'mark' command format. Usage: mark <existing task number>"
UNMARK_USAGE = "Invalid 'unmark' command format. Usage: unmark <existing task number>"
DELETE_USAGE = (
    "Invalid 'delete' command format. Usage: delete <existing task number> [more numbers...]"
)
FIND_USAGE = "Invalid 'find' command format. Usage: find <keyword>"


def _when(raw: str) -> datetime:
    try:
        return parse_datetime(raw)
    except ValueError as e:
        raise FormatError(DATETIME_ERROR) from e


def _to_index(raw: str, usage: str) -> int:
    number = int(raw)
    if number < 1:
        raise FormatError(usage)
    return number - 1


def _text(raw: str, usage: str) -> str:
    # Control characters (\r, \x00, ...) would not survive the one-line-per-task file.
    if any(unicodedata.category(ch) == "Cc" for ch in raw):
        raise FormatError(usage)
    return raw


def _task(usage: str, build: Callable[[], Task]) -> Task:
    try:
        return build()
    except ValueError as e:
        raise FormatError(usage) from e


def parse_todo(line: str) -> Task:
    m = _TODO_RE.fullmatch(line)
    if not m:
        raise FormatError(TODO_USAGE)
    desc = _text(m["desc"], TODO_USAGE)
    return _task(TODO_USAGE, lambda: Task.todo(desc))


def parse_deadline(line: str) -> Task:
    m = _DEADLINE_RE.fullmatch(line)
    if not m:
        raise FormatError(DEADLINE_USAGE)
    desc = _text(m["desc"], DEADLINE_USAGE)
    by = _when(m["by"])
    return _task(DEADLINE_USAGE, lambda: Task.deadline(desc, by))


def parse_event(line: str) -> Task:
    m = _EVENT_RE.fullmatch(line)
    if not m:
        raise FormatError(EVENT_USAGE)
    desc = _text(m["desc"], EVENT_USAGE)
    start, end = _when(m["start"]), _when(m["end"])
    return _task(EVENT_USAGE, lambda: Task.event(desc, start, end))


def parse_mark(line: str) -> int:
    """Return the zero-based index of `mark N`."""
    m = _MARK_RE.fullmatch(line)
    if not m:
        raise FormatError(MARK_USAGE)
    return _to_index(m["n"], MARK_USAGE)


def parse_unmark(line: str) -> int:
    """Return the zero-based index of `unmark N`."""
    m = _UNMARK_RE.fullmatch(line)
    if not m:
        raise FormatError(UNMARK_USAGE)
    return _to_index(m["n"], UNMARK_USAGE)


def parse_delete(line: str) -> tuple[int, ...]:
    """Return zero-based indices of `delete N [N ...]`, in the order given."""
    m = _DELETE_RE.fullmatch(line)
    if not m:
        raise FormatError(DELETE_USAGE)
    return tuple(_to_index(raw, DELETE_USAGE) for raw in m["ns"].split())


def parse_find(line: str) -> str:
    m = _FIND_RE.fullmatch(line)
    if not m:
        raise FormatError(FIND_USAGE)
    return _text(m["kw"], FIND_USAGE)


# ---- command dispatch ----


class CommandKind(StrEnum):
    BYE = "bye"
    LIST = "list"
    ADD = "add"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    FIND = "find"
    INVALID = "invalid"


@dataclass(frozen=True, slots=True)
class Command:
    kind: CommandKind
    line: str
    task: Task | None = None
    indices: tuple[int, ...] = ()
    keyword: str | None = None

    @property
    def index(self) -> int:
        # mark/unmark carry exactly one index
        return self.indices[0]


@dataclass(frozen=True, slots=True)
class ParseResult:
    command: Command | None = None
    error: FormatError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse(line: str) -> Command:
    # Keyword prefixes are tried in this order: "markdown 1" is a malformed mark,
    # "todoread" a malformed todo.
    if line == "bye":
        return Command(CommandKind.BYE, line)
    if line == "list":
        return Command(CommandKind.LIST, line)
    if line.startswith("mark"):
        return Command(CommandKind.MARK, line, indices=(parse_mark(line),))
    if line.startswith("unmark"):
        return Command(CommandKind.UNMARK, line, indices=(parse_unmark(line),))
    if line.startswith("delete"):
        return Command(CommandKind.DELETE, line, indices=parse_delete(line))
    if line.startswith("todo"):
        return Command(CommandKind.ADD, line, task=parse_todo(line))
    if line.startswith("deadline"):
        return Command(CommandKind.ADD, line, task=parse_deadline(line))
    if line.startswith("event"):
        return Command(CommandKind.ADD, line, task=parse_event(line))
    if line.startswith("find"):
        return Command(CommandKind.FIND, line, keyword=parse_find(line))
    return Command(CommandKind.INVALID, line)


def parse_command(line: str) -> ParseResult:
    """Parse one raw line into a tagged success/failure outcome."""
    try:
        return ParseResult(command=_parse(line))
    except FormatError as e:
        return ParseResult(error=e)

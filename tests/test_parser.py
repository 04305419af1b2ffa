# tests/test_parser.py

from __future__ import annotations

from datetime import datetime

import pytest

from ezra.core.errors import FormatError
from ezra.core.parser import (
    DATETIME_ERROR,
    DEADLINE_USAGE,
    DELETE_USAGE,
    EVENT_USAGE,
    TODO_USAGE,
    CommandKind,
    parse_command,
    parse_deadline,
    parse_delete,
    parse_event,
    parse_find,
    parse_mark,
    parse_todo,
    parse_unmark,
)
from ezra.tasks.task_models import Task, TaskKind


@pytest.mark.parametrize("desc", ["read book", "x", "call mum /by tonight", "ends with space "])
def test_parse_todo_keeps_description_exactly(desc: str) -> None:
    task = parse_todo(f"todo {desc}")
    assert task.kind is TaskKind.TODO
    assert task.description == desc
    assert task.done is False


@pytest.mark.parametrize("line", ["todo", "todo ", "todo  read", "todoread", "TODO read"])
def test_parse_todo_rejects_bad_grammar(line: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_todo(line)
    assert str(exc.value) == TODO_USAGE
    assert "Usage: todo <description>" in str(exc.value)


def test_parse_deadline() -> None:
    task = parse_deadline("deadline return books /by 29/01/2024 1800")
    assert task == Task.deadline("return books", datetime(2024, 1, 29, 18, 0))
    assert task.description == "return books"
    assert task.by == datetime(2024, 1, 29, 18, 0)


@pytest.mark.parametrize(
    "line",
    [
        "deadline return books",
        "deadline /by 29/01/24 1800",
        "deadline return books /by",
        "deadline return books by 29/01/24 1800",
    ],
)
def test_parse_deadline_rejects_bad_grammar(line: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_deadline(line)
    assert str(exc.value) == DEADLINE_USAGE


@pytest.mark.parametrize(
    "when", ["29/01/24 1800", "2024-01-29 1800", "31/02/2024 1800", "29/01/2024 2500", "9/1/2024 1800"]
)
def test_parse_deadline_bad_date_time(when: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_deadline(f"deadline return books /by {when}")
    assert str(exc.value) == DATETIME_ERROR
    assert "28/01/2023 1800" in str(exc.value)


def test_parse_event() -> None:
    task = parse_event("event project meeting /from 29/01/2024 1400 /to 29/01/2024 1600")
    assert task.kind is TaskKind.EVENT
    assert task.description == "project meeting"
    assert task.start == datetime(2024, 1, 29, 14, 0)
    assert task.end == datetime(2024, 1, 29, 16, 0)


@pytest.mark.parametrize(
    "line",
    [
        "event meeting",
        "event meeting /from 29/01/2024 1400",
        "event meeting /to 29/01/2024 1600 /from 29/01/2024 1400",
        "event /from 29/01/2024 1400 /to 29/01/2024 1600",
        "event meeting /from /to 29/01/2024 1600",
    ],
)
def test_parse_event_rejects_bad_grammar(line: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_event(line)
    assert "Usage: event <description> /from <date time> /to <date time>" in str(exc.value)


def test_parse_event_bad_end_date_time() -> None:
    with pytest.raises(FormatError) as exc:
        parse_event("event meeting /from 29/01/2024 1400 /to tomorrow")
    assert str(exc.value) == DATETIME_ERROR


def test_parse_delete() -> None:
    assert parse_delete("delete 1") == (0,)
    assert parse_delete("delete 10") == (9,)
    assert parse_delete("delete 2 5 2") == (1, 4, 1)


@pytest.mark.parametrize(
    "line", ["delete -1", "delete abc", "delete 12a", "delete", "delete ", "delete 0", "delete 1 x"]
)
def test_parse_delete_rejects_bad_grammar(line: str) -> None:
    with pytest.raises(FormatError):
        parse_delete(line)


def test_parse_mark_and_unmark() -> None:
    assert parse_mark("mark 1") == 0
    assert parse_unmark("unmark 3") == 2


@pytest.mark.parametrize("line", ["mark", "mark abc", "mark -2", "mark 0", "mark 1 2"])
def test_parse_mark_rejects_bad_grammar(line: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_mark(line)
    assert "Usage: mark <existing task number>" in str(exc.value)


def test_parse_find() -> None:
    assert parse_find("find book") == "book"
    assert parse_find("find old book") == "old book"
    with pytest.raises(FormatError):
        parse_find("find")
    with pytest.raises(FormatError):
        parse_find("find  ")


def test_parse_command_dispatch() -> None:
    assert parse_command("bye").command.kind is CommandKind.BYE
    assert parse_command("list").command.kind is CommandKind.LIST

    add = parse_command("todo read").command
    assert add.kind is CommandKind.ADD
    assert add.task == Task.todo("read")

    delete = parse_command("delete 1 3").command
    assert delete.kind is CommandKind.DELETE
    assert delete.indices == (0, 2)

    assert parse_command("mark 2").command.index == 1
    assert parse_command("find book").command.keyword == "book"


@pytest.mark.parametrize("line", ["", " ", "hello", "list all", "bye now", "remove 1", "Todo read"])
def test_parse_command_invalid(line: str) -> None:
    result = parse_command(line)
    assert result.ok
    assert result.command.kind is CommandKind.INVALID


def test_parse_command_reports_format_error_without_raising() -> None:
    result = parse_command("deadline return books")
    assert not result.ok
    assert result.command is None
    assert isinstance(result.error, FormatError)
    assert str(result.error) == DEADLINE_USAGE


@pytest.mark.parametrize(
    ("line", "usage"),
    [
        ("todoread", TODO_USAGE),
        ("markdown 1", "Invalid 'mark' command format. Usage: mark <existing task number>"),
        ("deleted 1", DELETE_USAGE),
        ("findings", "Invalid 'find' command format. Usage: find <keyword>"),
    ],
)
def test_parse_command_matches_keyword_prefix(line: str, usage: str) -> None:
    result = parse_command(line)
    assert not result.ok
    assert str(result.error) == usage



@pytest.mark.parametrize(
    ("line", "usage"),
    [
        ("todo \u00a0", TODO_USAGE),
        ("todo \u3000\u3000", TODO_USAGE),
        ("deadline \u00a0 /by 29/01/2024 1800", DEADLINE_USAGE),
        ("event \u3000 /from 29/01/2024 1400 /to 29/01/2024 1600", EVENT_USAGE),
    ],
)
def test_unicode_blank_description_is_a_format_error(line: str, usage: str) -> None:
    result = parse_command(line)
    assert not result.ok
    assert str(result.error) == usage


@pytest.mark.parametrize("line", ["todo a\rb", "todo tab\there"])
def test_control_characters_in_description_are_rejected(line: str) -> None:
    with pytest.raises(FormatError) as exc:
        parse_todo(line)
    assert str(exc.value) == TODO_USAGE


def test_control_characters_in_keyword_are_rejected() -> None:
    with pytest.raises(FormatError):
        parse_find("find a\x00b")

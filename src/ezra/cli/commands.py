# src/ezra/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import EzraError
from ..core.parser import Command, CommandKind, parse_command
from ..core.state import Session

CommandHandler = Callable[[Session, Command], str]

logger = logging.getLogger(__name__)

BYE_MESSAGE = "Bye. Hope to see you again soon!"
INVALID_MESSAGE = "Invalid command"
INTERNAL_ERROR_MESSAGE = "Internal error while handling a command."


class CommandRegistry:
    """
    Routes parsed commands to handlers.

    handle() always returns one reply string: parse errors, bad task numbers and
    handler crashes all become replies so the session keeps going.
    """

    def __init__(self) -> None:
        self._handlers: dict[CommandKind, CommandHandler] = {}
        self._help: dict[CommandKind, str] = {}

    def register(self, kind: CommandKind, handler: CommandHandler, help_text: str) -> None:
        self._handlers[kind] = handler
        self._help[kind] = help_text

    def handle(self, session: Session, line: str) -> str:
        try:
            result = parse_command(line)
            if result.command is None:
                logger.debug("Rejected input %r: %s", line, result.error)
                return str(result.error)

            command = result.command
            handler = self._handlers.get(command.kind)
            if handler is None:
                return INVALID_MESSAGE
            return handler(session, command)
        except EzraError as e:
            logger.debug("Command %r failed: %s", line, e)
            return str(e)
        except Exception:
            logger.exception("Command handler crashed (line=%r).", line)
            return INTERNAL_ERROR_MESSAGE

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


def cmd_bye(session: Session, command: Command) -> str:
    session.running = False
    return BYE_MESSAGE


def cmd_list(session: Session, command: Command) -> str:
    return str(session.tasks.listing())


def cmd_add(session: Session, command: Command) -> str:
    if command.task is None:
        raise ValueError(f"{command.kind} command carries no task")
    return session.tasks.add(command.task)


def cmd_mark(session: Session, command: Command) -> str:
    return session.tasks.mark(command.index)


def cmd_unmark(session: Session, command: Command) -> str:
    return session.tasks.unmark(command.index)


def cmd_delete(session: Session, command: Command) -> str:
    return session.tasks.delete(command.indices)


def cmd_find(session: Session, command: Command) -> str:
    if command.keyword is None:
        raise ValueError(f"{command.kind} command carries no keyword")
    return str(session.tasks.find(command.keyword))


def build_registry() -> CommandRegistry:
    reg = CommandRegistry()
    reg.register(CommandKind.BYE, cmd_bye, "bye - end the session")
    reg.register(CommandKind.LIST, cmd_list, "list - show all tasks")
    reg.register(
        CommandKind.ADD,
        cmd_add,
        "todo <description> | deadline <description> /by <date time> | "
        "event <description> /from <date time> /to <date time>",
    )
    reg.register(CommandKind.MARK, cmd_mark, "mark <number> - mark a task as done")
    reg.register(CommandKind.UNMARK, cmd_unmark, "unmark <number> - mark a task as not done")
    reg.register(CommandKind.DELETE, cmd_delete, "delete <number> [more numbers...] - remove tasks")
    reg.register(CommandKind.FIND, cmd_find, "find <keyword> - search task descriptions")
    return reg


registry = build_registry()

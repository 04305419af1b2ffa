# src/ezra/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import Session

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60


def _print_reply(text: str) -> None:
    print(DIVIDER)
    print(text)
    print(DIVIDER)


def run_console_loop(
    session: Session,
    *,
    registry: CommandRegistry | None = None,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = _print_reply,
) -> None:
    """
    Read one command per line and print its reply until `bye`, EOF or Ctrl+C.

    Input is passed to the registry as typed (only the trailing newline is removed by input()),
    so a blank line gets the same reply as any other unknown command.
    """
    reg = registry or command_registry
    app_name = str(getattr(session.settings, "app_name", "Ezra"))

    logger.info("Console connector started.")
    write(f"Hello! I'm {app_name}.\nWhat can I do for you?\n\n{reg.build_help()}")

    while session.running:
        try:
            line = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        write(reg.handle(session, line))

    logger.info("Console connector finished.")

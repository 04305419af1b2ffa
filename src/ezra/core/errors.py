# src/ezra/core/errors.py

"""User-facing error types. Both are recovered at the command boundary."""

from __future__ import annotations


class EzraError(Exception):
    """Base class for errors that become a reply instead of a crash."""


class FormatError(EzraError):
    """Raw input does not match a command's grammar (message is the usage hint)."""


class TaskIndexError(EzraError, IndexError):
    """A syntactically valid task number that does not refer to an existing task."""

    def __init__(self, number: int, size: int) -> None:
        self.number = number
        self.size = size
        if size == 0:
            msg = f"Task {number} does not exist. Your list is empty."
        else:
            msg = f"Task {number} does not exist. Choose a number from 1 to {size}."
        super().__init__(msg)

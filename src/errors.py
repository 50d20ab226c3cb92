"""Exception types shared by the parser, task list, commands and storage.

Everything derives from TaskNookError so the interaction loop can catch the
whole family in one place and render it as a user-facing message.
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional


class TaskNookError(Exception):
    """Base class for every error the application reports to the user."""


class UnknownCommand(TaskNookError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__("Invalid command! Type 'help' to see the available commands.")


class MalformedCommand(TaskNookError):
    """Arguments are missing, non-numeric, badly separated, or a date is invalid."""

    def __init__(self, reason: str, expected_format: str):
        self.reason = reason
        self.expected_format = expected_format
        super().__init__(f"{reason}\nFormat: {expected_format}")


class IndexOutOfRange(TaskNookError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} is outside a list of {size} task(s).")


class AlreadyInStatus(TaskNookError):
    def __init__(self, done: bool):
        self.done = done
        label = "done" if done else "not done"
        super().__init__(f"The task is already marked as {label}.")


class MalformedRecord(TaskNookError):
    """A persisted line could not be decoded into a task."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class StorageIOFailure(TaskNookError):
    """Creating, reading or writing the data file failed."""

    def __init__(self, path: Path, operation: str, cause: Optional[BaseException] = None):
        self.path = path
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Could not {operation} {path}{detail}")


class CommandExecutionFailure(TaskNookError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)

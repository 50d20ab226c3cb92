"""Command-line interface loop for tasknook.

The CLI object is the session: it owns the TaskList and hands it to one
command at a time. Parse and execution errors are rendered and the loop
carries on; only ``bye``, EOF or Ctrl-C end the session.
"""
from __future__ import annotations
import logging
from typing import Callable, Optional

import click

import command_parser
from commands import CommandResult
from errors import StorageIOFailure, TaskNookError
from storage import LoadResult, Storage
from task_list import TaskList
from theme import Theme

PROMPT = "> "
DIVIDER = "_" * 60

logger = logging.getLogger(__name__)


class CLI:
    def __init__(self, storage: Storage, theme: Theme, task_list: Optional[TaskList] = None,
                 read_line: Callable[[str], str] = input):
        self.storage: Storage = storage
        self.theme: Theme = theme
        self.tasks: TaskList = task_list if task_list is not None else TaskList()
        self._read_line = read_line

    def load(self) -> LoadResult:
        """Replace the in-memory list with the file contents and report how it went."""
        result = self.storage.load()
        self.tasks = TaskList(result.tasks)
        if result.error is not None:
            self._warn(result.error)
        if result.skipped:
            self._echo(f"Skipped {result.skipped} line(s) with corrupted data.")
        if result.tasks:
            self._echo(f"Loaded {len(result.tasks)} task(s) from {self.storage.path}.")
        return result

    def run(self) -> None:
        """Main REPL loop: read, parse, execute, render until exit."""
        logger.info("Session started with %d task(s).", self.tasks.size())
        self._intro()
        exit_message: Optional[str] = None
        try:
            while True:
                line = self._read_line(PROMPT).strip()
                if not line:
                    continue
                self._echo(DIVIDER)
                result = self.handle_line(line)
                self._echo(DIVIDER)
                if result is not None and result.is_exit:
                    break
        except (KeyboardInterrupt, EOFError):
            exit_message = "Interrupted. Goodbye."
        finally:
            if exit_message:
                self._echo(exit_message)
            logger.info("Session finished with %d task(s).", self.tasks.size())

    # -------------------- command dispatch --------------------
    def handle_line(self, line: str) -> Optional[CommandResult]:
        try:
            command = command_parser.parse(line)
            result = command.execute(self.tasks, self.storage)
        except TaskNookError as e:
            self._show_error(type(e).__name__, str(e))
            return None
        except Exception:
            logger.exception("Command handler crashed on %r.", line)
            self._show_error("InternalError", "Something went wrong while handling that command.")
            return None
        self._echo(self.theme.task_lines(result.text))
        if result.storage_error is not None:
            self._warn(result.storage_error)
        return result

    # -------------------- output helpers --------------------
    def _intro(self) -> None:
        self._echo(DIVIDER)
        self._echo("Hello! I'm tasknook, your task tracker.")
        self._echo("What can I do for you? Type 'help' to see the commands.")
        self._echo(DIVIDER)

    def _echo(self, text: str) -> None:
        click.echo(text)

    def _show_error(self, name: str, message: str) -> None:
        self._echo(self.theme.error(f"[{name}] {message}"))

    def _warn(self, failure: StorageIOFailure) -> None:
        self._echo(self.theme.error(f"Warning: {failure}. Changes are kept in memory only."))

"""Executable commands produced by the parser.

Each command receives the session's TaskList and Storage for the duration of
execute() only and returns a CommandResult. Mutating commands save before
returning; a failed save does not undo the change, it is reported through
CommandResult.storage_error.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from errors import AlreadyInStatus, CommandExecutionFailure, IndexOutOfRange, StorageIOFailure
from models import Task, format_date
from storage import Storage
from task_list import TaskList

INVALID_INDEX = "Invalid index provided!"


@dataclass
class CommandResult:
    text: str
    is_exit: bool = False
    storage_error: Optional[StorageIOFailure] = None


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class Command:
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        raise NotImplementedError


@dataclass
class ExitCommand(Command):
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        return CommandResult("Bye. Hope to see you again soon!", is_exit=True)


@dataclass
class HelpCommand(Command):
    usages: Tuple[str, ...] = ()

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        lines = ["Commands:"]
        lines.extend(f"  {usage}" for usage in self.usages)
        return CommandResult("\n".join(lines))


@dataclass
class ListTasksCommand(Command):
    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        if task_list.is_empty():
            return CommandResult("You have no tasks in your list.")
        return CommandResult("Here are the tasks in your list:\n" + task_list.render())


@dataclass
class AddTaskCommand(Command):
    task: Task

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        task_list.add(self.task)
        error = storage.save(task_list)
        return CommandResult(
            f"Got it. I've added this task:\n  {self.task}\n"
            f"Now you have {_count(task_list.size())} in the list.",
            storage_error=error,
        )


@dataclass
class DeleteTaskCommand(Command):
    index: int

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        try:
            removed = task_list.remove(self.index)
        except IndexOutOfRange as e:
            raise CommandExecutionFailure(INVALID_INDEX) from e
        error = storage.save(task_list)
        return CommandResult(
            f"Noted. I've removed this task:\n  {removed}\n"
            f"Now you have {_count(task_list.size())} in the list.",
            storage_error=error,
        )


@dataclass
class MarkTaskCommand(Command):
    """Mark (done=True) or unmark (done=False) one task."""
    index: int
    done: bool

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        try:
            task = task_list.mark(self.index, self.done)
        except IndexOutOfRange as e:
            raise CommandExecutionFailure(INVALID_INDEX) from e
        except AlreadyInStatus as e:
            raise CommandExecutionFailure(f"The task is already in that status! {e}") from e
        error = storage.save(task_list)
        if self.done:
            text = f"Nice! I've marked this task as done:\n  {task}"
        else:
            text = f"OK, I've marked this task as not done yet:\n  {task}"
        return CommandResult(text, storage_error=error)


@dataclass
class FindTasksContainKeywordCommand(Command):
    keyword: str

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        found = task_list.filter(lambda t: t.matches_keyword(self.keyword))
        if found.is_empty():
            return CommandResult(f'No tasks contain the keyword "{self.keyword}".')
        return CommandResult(f'Here are the tasks containing "{self.keyword}":\n' + found.render())


@dataclass
class FindTasksOnDateCommand(Command):
    day: date

    def execute(self, task_list: TaskList, storage: Storage) -> CommandResult:
        found = task_list.filter(lambda t: t.is_on_date(self.day))
        label = format_date(self.day)
        if found.is_empty():
            return CommandResult(f"No tasks are happening on {label}.")
        return CommandResult(f"Here are the tasks happening on {label}:\n" + found.render())

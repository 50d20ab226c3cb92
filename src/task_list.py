"""Task list logic: ordered storage, index-checked mutation, filtering and rendering.

Indices are 0-based here; the parser converts the user's 1-based numbers
before they reach this module. Insertion order is display order and
persisted order.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional

from errors import IndexOutOfRange
from models import Task

TaskPredicate = Callable[[Task], bool]


class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self._tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- queries --------------------
    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def filter(self, predicate: TaskPredicate) -> "TaskList":
        """Return a new list of copies of the matching tasks, order preserved."""
        return TaskList(replace(t) for t in self._tasks if predicate(t))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    # -------------------- task operations --------------------
    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def mark(self, index: int, done: bool) -> Task:
        """Set the done flag of one task; AlreadyInStatus propagates unchanged."""
        task = self.get(index)
        if done:
            task.mark_done()
        else:
            task.mark_not_done()
        return task

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))

    # -------------------- display --------------------
    def render(self) -> str:
        return "\n".join(f"{n}. {task.render()}" for n, task in enumerate(self._tasks, start=1))

    def __str__(self) -> str:
        return self.render()

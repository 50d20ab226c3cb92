# tests/conftest.py

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

import pytest

from errors import StorageIOFailure
from models import Deadline, Event, Task, ToDo
from storage import Storage
from task_list import TaskList


class FailingStorage(Storage):
    """Storage whose save always fails, as if the disk were read-only."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self.save_calls = 0

    def save(self, tasks: Iterable[Task]) -> Optional[StorageIOFailure]:
        self.save_calls += 1
        return StorageIOFailure(self.path, "save tasks to", OSError("read-only file system"))


@pytest.fixture()
def storage(tmp_path: Path) -> Storage:
    return Storage(tmp_path / "data" / "tasks.txt")


@pytest.fixture()
def failing_storage(tmp_path: Path) -> FailingStorage:
    return FailingStorage(tmp_path / "data" / "tasks.txt")


@pytest.fixture()
def tasks() -> TaskList:
    """A small mixed list: one of each kind, the deadline already done."""
    done_deadline = Deadline("submit report", by=date(2024, 12, 1))
    done_deadline.mark_done()
    return TaskList([
        ToDo("return book"),
        done_deadline,
        Event("hackathon", start=date(2024, 12, 1), end=date(2024, 12, 3)),
    ])

"""Data models for tasknook: the three task variants and their line encoding.

Every variant renders itself as ``[<kind>][<status>] <description>`` plus a
kind-specific suffix, and knows how to write and read its storable line:

    T | 0 | read book
    D | 1 | submit report | 2024-12-01
    E | 0 | hackathon | 2024-12-01 | 2024-12-03

Dates are always ``yyyy-mm-dd`` (DATE_FORMAT), both on input and on output.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import ClassVar, Dict, List, Type

from errors import AlreadyInStatus, MalformedRecord

DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = "yyyy-mm-dd"
FIELD_SEP = " | "
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(text: str) -> date:
    """Parse a ``yyyy-mm-dd`` date; raises ValueError for anything else."""
    if not _DATE_RE.fullmatch(text):
        raise ValueError(f"Invalid date '{text}'. Use {DATE_PATTERN}.")
    return datetime.strptime(text, DATE_FORMAT).date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


class TaskKind(Enum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass
class Task:
    """Common state of every task.

    Fields:
        description: Free text, never empty.
        done: Completion flag, toggled only through mark_done/mark_not_done.
    """
    description: str
    done: bool = False

    kind: ClassVar[TaskKind]

    # -------------------- status --------------------
    def mark_done(self) -> None:
        if self.done:
            raise AlreadyInStatus(True)
        self.done = True

    def mark_not_done(self) -> None:
        if not self.done:
            raise AlreadyInStatus(False)
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "

    # -------------------- queries --------------------
    def matches_keyword(self, keyword: str) -> bool:
        return keyword in self.description

    def is_on_date(self, day: date) -> bool:
        return False

    # -------------------- rendering --------------------
    def render(self) -> str:
        return f"[{self.kind.value}][{self.status_icon}] {self.description}{self._suffix()}"

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render()

    # -------------------- storable line --------------------
    def to_storable_line(self) -> str:
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        fields.extend(self._date_fields())
        return FIELD_SEP.join(fields)

    def _date_fields(self) -> List[str]:
        return []

    @classmethod
    def from_storable_line(cls, line: str) -> "Task":
        """Decode one persisted line, raising MalformedRecord on any mismatch."""
        head = line.rstrip("\r\n").split(FIELD_SEP, 2)
        if len(head) != 3:
            raise MalformedRecord(line, "Too few fields")
        tag, flag, rest = head
        try:
            kind = TaskKind(tag)
        except ValueError:
            raise MalformedRecord(line, f"Unknown task kind '{tag}'") from None
        if flag not in ("0", "1"):
            raise MalformedRecord(line, f"Invalid status flag '{flag}'")
        task_cls = _VARIANTS[kind]
        n_dates = task_cls.date_field_count
        if n_dates:
            parts = rest.rsplit(FIELD_SEP, n_dates)
            if len(parts) != n_dates + 1:
                raise MalformedRecord(line, f"Expected {n_dates} date field(s)")
            description, raw_dates = parts[0], parts[1:]
        else:
            description, raw_dates = rest, []
        if not description.strip():
            raise MalformedRecord(line, "Empty description")
        try:
            dates = [parse_date(d) for d in raw_dates]
        except ValueError as e:
            raise MalformedRecord(line, str(e)) from e
        task = task_cls._from_fields(description, dates)
        task.done = flag == "1"
        return task

    date_field_count: ClassVar[int] = 0

    @classmethod
    def _from_fields(cls, description: str, dates: List[date]) -> "Task":
        return cls(description)


@dataclass
class ToDo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass
class Deadline(Task):
    by: date = None  # type: ignore[assignment]

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE
    date_field_count: ClassVar[int] = 1

    def __post_init__(self) -> None:
        if self.by is None:
            raise TypeError("Deadline requires a 'by' date")

    def is_on_date(self, day: date) -> bool:
        return day == self.by

    def _suffix(self) -> str:
        return f" (by: {format_date(self.by)})"

    def _date_fields(self) -> List[str]:
        return [format_date(self.by)]

    @classmethod
    def _from_fields(cls, description: str, dates: List[date]) -> "Deadline":
        return cls(description, by=dates[0])


@dataclass
class Event(Task):
    """A task spanning start..end inclusive. start > end is accepted as given."""
    start: date = None  # type: ignore[assignment]
    end: date = None  # type: ignore[assignment]

    kind: ClassVar[TaskKind] = TaskKind.EVENT
    date_field_count: ClassVar[int] = 2

    def __post_init__(self) -> None:
        if self.start is None or self.end is None:
            raise TypeError("Event requires 'start' and 'end' dates")

    def is_on_date(self, day: date) -> bool:
        return self.start <= day <= self.end

    def _suffix(self) -> str:
        return f" (from: {format_date(self.start)} to: {format_date(self.end)})"

    def _date_fields(self) -> List[str]:
        return [format_date(self.start), format_date(self.end)]

    @classmethod
    def _from_fields(cls, description: str, dates: List[date]) -> "Event":
        return cls(description, start=dates[0], end=dates[1])


_VARIANTS: Dict[TaskKind, Type[Task]] = {
    TaskKind.TODO: ToDo,
    TaskKind.DEADLINE: Deadline,
    TaskKind.EVENT: Event,
}

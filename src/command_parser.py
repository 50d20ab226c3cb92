"""Turn one line of user input into a Command.

The first whitespace-delimited token selects the command (exact,
case-sensitive); the rest of the line is its argument. Separators inside
add-commands (" /by ", " /from ", " /to ") must each appear exactly once.
"""
from __future__ import annotations
import re
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from commands import (
    AddTaskCommand,
    Command,
    DeleteTaskCommand,
    ExitCommand,
    FindTasksContainKeywordCommand,
    FindTasksOnDateCommand,
    HelpCommand,
    ListTasksCommand,
    MarkTaskCommand,
)
from errors import MalformedCommand, UnknownCommand
from models import DATE_PATTERN, Deadline, Event, ToDo, parse_date

BY_SEP = " /by "
FROM_SEP = " /from "
TO_SEP = " /to "
_INDEX_RE = re.compile(r"[0-9]+")


class CommandType(Enum):
    BYE = ("bye", "bye")
    LIST = ("list", "list")
    MARK = ("mark", "mark <task number>")
    UNMARK = ("unmark", "unmark <task number>")
    TODO = ("todo", "todo <description>")
    DEADLINE = ("deadline", f"deadline <description> /by <{DATE_PATTERN}>")
    EVENT = ("event", f"event <description> /from <{DATE_PATTERN}> /to <{DATE_PATTERN}>")
    DELETE = ("delete", "delete <task number>")
    DATE = ("date", f"date <{DATE_PATTERN}>")
    FIND = ("find", "find <keyword>")
    HELP = ("help", "help")

    def __init__(self, keyword: str, usage: str):
        self.keyword = keyword
        self.usage = usage

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["CommandType"]:
        for cmd in cls:
            if cmd.keyword == keyword:
                return cmd
        return None


def _split(line: str) -> Tuple[str, str]:
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    return keyword, rest


def parse(line: str) -> Command:
    """Parse a full input line; raises UnknownCommand or MalformedCommand."""
    keyword, rest = _split(line)
    cmd = CommandType.from_keyword(keyword)
    if cmd is None:
        raise UnknownCommand(keyword)

    if cmd in (CommandType.BYE, CommandType.LIST, CommandType.HELP):
        if rest:
            raise MalformedCommand("No argument is needed!", cmd.usage)
        if cmd is CommandType.BYE:
            return ExitCommand()
        if cmd is CommandType.LIST:
            return ListTasksCommand()
        return HelpCommand(tuple(c.usage for c in CommandType))

    if not rest:
        raise MalformedCommand("No argument is provided!", cmd.usage)

    if cmd is CommandType.MARK:
        return MarkTaskCommand(_parse_index(rest, cmd), done=True)
    if cmd is CommandType.UNMARK:
        return MarkTaskCommand(_parse_index(rest, cmd), done=False)
    if cmd is CommandType.DELETE:
        return DeleteTaskCommand(_parse_index(rest, cmd))
    if cmd is CommandType.DATE:
        return FindTasksOnDateCommand(_parse_date_arg(rest, cmd))
    if cmd is CommandType.FIND:
        return FindTasksContainKeywordCommand(rest)
    if cmd is CommandType.TODO:
        return AddTaskCommand(ToDo(rest))
    if cmd is CommandType.DEADLINE:
        return _new_deadline(rest)
    return _new_event(rest)


# -------------------- argument helpers --------------------
def _parse_index(raw: str, cmd: CommandType) -> int:
    """1-based task number -> 0-based index. Bounds are checked on execution."""
    if not _INDEX_RE.fullmatch(raw) or int(raw) < 1:
        raise MalformedCommand("Please provide a valid task number!", cmd.usage)
    return int(raw) - 1


def _parse_date_arg(raw: str, cmd: CommandType) -> date:
    try:
        return parse_date(raw)
    except ValueError:
        raise MalformedCommand("Invalid date format!", cmd.usage) from None


def _require_single(text: str, sep: str, cmd: CommandType) -> None:
    name = sep.strip()
    count = text.count(sep)
    if count == 0:
        raise MalformedCommand(f"Missing {name} argument!", cmd.usage)
    if count > 1:
        raise MalformedCommand(f"Only one {name} argument is needed.", cmd.usage)


def _require_description(description: str, cmd: CommandType) -> str:
    description = description.strip()
    if not description:
        raise MalformedCommand("The description cannot be empty!", cmd.usage)
    return description


def _reject_leading_sep(rest: str, sep: str, cmd: CommandType) -> None:
    """The line was stripped, so "deadline /by ..." arrives without the space before /by."""
    if rest.startswith(sep.lstrip()):
        raise MalformedCommand("The description cannot be empty!", cmd.usage)


def _new_deadline(rest: str) -> Command:
    cmd = CommandType.DEADLINE
    _reject_leading_sep(rest, BY_SEP, cmd)
    _require_single(rest, BY_SEP, cmd)
    description, raw_by = rest.split(BY_SEP, 1)
    description = _require_description(description, cmd)
    by = _parse_date_arg(raw_by.strip(), cmd)
    return AddTaskCommand(Deadline(description, by=by))


def _new_event(rest: str) -> Command:
    cmd = CommandType.EVENT
    _reject_leading_sep(rest, FROM_SEP, cmd)
    _require_single(rest, FROM_SEP, cmd)
    _require_single(rest, TO_SEP, cmd)
    description, duration = rest.split(FROM_SEP, 1)
    if TO_SEP not in duration:
        raise MalformedCommand("/to must come after /from!", cmd.usage)
    description = _require_description(description, cmd)
    raw_start, raw_end = duration.split(TO_SEP, 1)
    start = _parse_date_arg(raw_start.strip(), cmd)
    end = _parse_date_arg(raw_end.strip(), cmd)
    # start after end is accepted as entered
    return AddTaskCommand(Event(description, start=start, end=end))

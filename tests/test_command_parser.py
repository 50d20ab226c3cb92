from datetime import date

import pytest

from command_parser import CommandType, parse
from commands import (
    AddTaskCommand,
    DeleteTaskCommand,
    ExitCommand,
    FindTasksContainKeywordCommand,
    FindTasksOnDateCommand,
    HelpCommand,
    ListTasksCommand,
    MarkTaskCommand,
)
from errors import MalformedCommand, UnknownCommand
from models import Deadline, Event, ToDo


def test_simple_commands():
    assert isinstance(parse("bye"), ExitCommand)
    assert isinstance(parse("list"), ListTasksCommand)
    assert isinstance(parse("help"), HelpCommand)


def test_keyword_is_case_sensitive():
    with pytest.raises(UnknownCommand):
        parse("List")
    with pytest.raises(UnknownCommand):
        parse("blah blah")


@pytest.mark.parametrize("line", ["bye now", "list all", "help me"])
def test_no_argument_commands_reject_arguments(line):
    with pytest.raises(MalformedCommand) as exc:
        parse(line)
    assert exc.value.reason == "No argument is needed!"


def test_mark_unmark_delete_convert_to_zero_based():
    assert parse("mark 1") == MarkTaskCommand(0, done=True)
    assert parse("unmark 3") == MarkTaskCommand(2, done=False)
    assert parse("delete 12") == DeleteTaskCommand(11)


@pytest.mark.parametrize("line", [
    "mark", "mark two", "unmark -1", "delete 0", "delete 1.5",
    # unicode digits that int() rejects
    "mark ²", "unmark ²", "delete ٣",
])
def test_bad_task_numbers(line):
    with pytest.raises(MalformedCommand) as exc:
        parse(line)
    assert exc.value.expected_format == CommandType.from_keyword(line.split()[0]).usage


def test_todo():
    assert parse("todo read book") == AddTaskCommand(ToDo("read book"))
    with pytest.raises(MalformedCommand):
        parse("todo")


def test_deadline():
    cmd = parse("deadline submit report /by 2024-12-01")
    assert cmd == AddTaskCommand(Deadline("submit report", by=date(2024, 12, 1)))


@pytest.mark.parametrize("line, reason", [
    ("deadline submit report", "Missing /by argument!"),
    ("deadline a /by 2024-12-01 /by 2024-12-02", "Only one /by argument is needed."),
    ("deadline submit report /by tomorrow", "Invalid date format!"),
    ("deadline   /by 2024-12-01", "The description cannot be empty!"),
    ("deadline /by 2024-12-01", "The description cannot be empty!"),
])
def test_deadline_errors(line, reason):
    with pytest.raises(MalformedCommand) as exc:
        parse(line)
    assert exc.value.reason == reason
    assert "/by" in exc.value.expected_format


def test_event():
    cmd = parse("event hackathon /from 2024-12-01 /to 2024-12-03")
    assert cmd == AddTaskCommand(Event("hackathon", start=date(2024, 12, 1), end=date(2024, 12, 3)))


def test_event_with_start_after_end_is_accepted():
    cmd = parse("event oops /from 2024-12-05 /to 2024-12-01")
    assert cmd.task.start > cmd.task.end


@pytest.mark.parametrize("line, reason", [
    ("event hackathon /to 2024-12-03", "Missing /from argument!"),
    ("event hackathon /from 2024-12-01", "Missing /to argument!"),
    ("event a /from 2024-12-01 /from 2024-12-02 /to 2024-12-03", "Only one /from argument is needed."),
    ("event a /from 2024-12-01 /to 2024-12-02 /to 2024-12-03", "Only one /to argument is needed."),
    ("event a /to 2024-12-02 /from 2024-12-01", "/to must come after /from!"),
    ("event a /from 2024-12-01 /to soon", "Invalid date format!"),
    ("event /from 2024-12-01 /to 2024-12-02", "The description cannot be empty!"),
])
def test_event_errors(line, reason):
    with pytest.raises(MalformedCommand) as exc:
        parse(line)
    assert exc.value.reason == reason


def test_date_and_find():
    assert parse("date 2024-12-01") == FindTasksOnDateCommand(date(2024, 12, 1))
    assert parse("find old Book") == FindTasksContainKeywordCommand("old Book")
    with pytest.raises(MalformedCommand):
        parse("date 1 Dec")
    with pytest.raises(MalformedCommand):
        parse("find")


def test_help_lists_every_usage():
    cmd = parse("help")
    assert cmd.usages == tuple(c.usage for c in CommandType)
    assert "event <description> /from <yyyy-mm-dd> /to <yyyy-mm-dd>" in cmd.usages

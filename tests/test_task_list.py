from datetime import date

import pytest

from errors import AlreadyInStatus, IndexOutOfRange
from models import ToDo
from task_list import TaskList


def test_add_appends_at_end_not_done(tasks):
    tasks.add(ToDo("water plants"))
    assert tasks.size() == 4
    assert tasks.get(3).render() == "[T][ ] water plants"
    assert tasks.render().splitlines()[-1] == "4. [T][ ] water plants"


def test_empty_list():
    empty = TaskList()
    assert empty.is_empty()
    assert empty.size() == 0
    assert empty.render() == ""


def test_render_numbers_from_one(tasks):
    assert tasks.render() == (
        "1. [T][ ] return book\n"
        "2. [D][X] submit report (by: 2024-12-01)\n"
        "3. [E][ ] hackathon (from: 2024-12-01 to: 2024-12-03)"
    )


def test_remove_shifts_following_tasks(tasks):
    removed = tasks.remove(0)
    assert removed.description == "return book"
    assert tasks.size() == 2
    assert tasks.get(0).description == "submit report"


def test_mark_then_unmark_restores_rendering(tasks):
    for i in range(tasks.size()):
        before = tasks.get(i).render()
        target = not tasks.get(i).done
        tasks.mark(i, target)
        tasks.mark(i, not target)
        assert tasks.get(i).render() == before


def test_mark_twice_fails(tasks):
    tasks.mark(0, True)
    with pytest.raises(AlreadyInStatus):
        tasks.mark(0, True)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_out_of_range_leaves_list_unchanged(tasks, index):
    before = tasks.render()
    with pytest.raises(IndexOutOfRange):
        tasks.get(index)
    with pytest.raises(IndexOutOfRange):
        tasks.remove(index)
    with pytest.raises(IndexOutOfRange):
        tasks.mark(index, True)
    assert tasks.render() == before


def test_filter_keeps_order_and_does_not_alias(tasks):
    found = tasks.filter(lambda t: t.is_on_date(date(2024, 12, 1)))
    assert [t.description for t in found] == ["submit report", "hackathon"]
    found.get(1).mark_done()
    found.remove(0)
    assert tasks.size() == 3
    assert tasks.get(2).done is False

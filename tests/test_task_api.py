# tests/test_task_api.py

from __future__ import annotations

from datetime import date

import pytest

from jett.tasks import task_api
from jett.tasks.task_api import DerivedStatus
from jett.tasks.task_models import ZERO_DATE, Priority, Status, Task, TaskList

TODAY = date(2024, 6, 10)


def _task(task_id: int, due: date, *, status: Status = Status.PENDING, priority=Priority.MEDIUM) -> Task:
    return Task(
        id=task_id,
        title=f"task {task_id}",
        start_date=date(2024, 6, 1),
        due_date=due,
        priority=priority,
        status=status,
    )


@pytest.mark.parametrize(
    ("due", "expected"),
    [
        (date(2024, 6, 9), DerivedStatus.OVERDUE),
        (date(2024, 6, 10), DerivedStatus.DUE_TODAY),
        (date(2024, 6, 11), DerivedStatus.ON_SCHEDULE),
        (ZERO_DATE, DerivedStatus.OVERDUE),
    ],
)
def test_derive_status_pending(due: date, expected: DerivedStatus) -> None:
    assert task_api.derive_status(_task(1, due), TODAY) is expected


@pytest.mark.parametrize("due", [date(2024, 6, 9), date(2024, 6, 10), date(2024, 6, 11)])
def test_derive_status_done_ignores_due_date(due: date) -> None:
    assert task_api.derive_status(_task(1, due, status=Status.DONE), TODAY) is DerivedStatus.DONE


def test_parse_task_id() -> None:
    assert task_api.parse_task_id("12") == 12
    assert task_api.parse_task_id("abc") == 0
    assert task_api.parse_task_id("") == 0


def test_add_task_assigns_next_id_and_defaults() -> None:
    tl = TaskList(tasks=[_task(4, TODAY)])
    task = task_api.add_task(tl, title="New", start="2024-06-01", due="2024-06-30")
    assert task.id == 5
    assert task.priority is Priority.MEDIUM
    assert task.status is Status.PENDING
    assert task.due_date == date(2024, 6, 30)
    assert tl.tasks[-1] is task


def test_add_task_priority_parsing() -> None:
    tl = TaskList()
    assert task_api.add_task(tl, title="a", start="", due="", priority="h").priority is Priority.HIGH
    assert task_api.add_task(tl, title="b", start="", due="", priority="bogus").priority is Priority.MEDIUM
    assert tl.tasks[0].start_date == ZERO_DATE
    assert [t.id for t in tl.tasks] == [1, 2]


def test_edit_updates_only_named_fields() -> None:
    tl = TaskList(tasks=[_task(3, TODAY, priority=Priority.HIGH)])
    (task,) = task_api.edit_task(tl, 3, ["title=Foo", "due=2024-01-01"])
    assert task is tl.tasks[0]
    assert task.title == "Foo"
    assert task.due_date == date(2024, 1, 1)
    assert task.priority is Priority.HIGH
    assert task.status is Status.PENDING


def test_edit_ignores_malformed_and_invalid_values() -> None:
    tl = TaskList(tasks=[_task(1, TODAY)])
    task_api.edit_task(tl, 1, ["nonsense", "color=red", "priority=urgent", "status=later", "title=a=b"])
    task = tl.tasks[0]
    assert task.title == "a=b"
    assert task.priority is Priority.MEDIUM
    assert task.status is Status.PENDING


def test_edit_priority_and_status() -> None:
    tl = TaskList(tasks=[_task(1, TODAY)])
    task_api.edit_task(tl, 1, ["priority=low", "status=d"])
    assert tl.tasks[0].priority is Priority.LOW
    assert tl.tasks[0].status is Status.DONE


def test_edit_unknown_id_changes_nothing() -> None:
    tl = TaskList(tasks=[_task(1, TODAY)])
    before = TaskList(tasks=[_task(1, TODAY)])
    assert task_api.edit_task(tl, 99, ["title=Foo"]) == []
    assert tl == before


def test_delete_preserves_order_of_the_rest() -> None:
    tl = TaskList(tasks=[_task(1, TODAY), _task(2, TODAY), _task(3, TODAY)])
    assert task_api.delete_task(tl, 2) is True
    assert [t.id for t in tl.tasks] == [1, 3]


def test_delete_unknown_id_is_noop() -> None:
    tl = TaskList(tasks=[_task(1, TODAY), _task(2, TODAY)])
    assert task_api.delete_task(tl, 42) is False
    assert [t.id for t in tl.tasks] == [1, 2]


def test_mark_done() -> None:
    tl = TaskList(tasks=[_task(1, TODAY)])
    assert task_api.mark_done(tl, 1) == [tl.tasks[0]]
    assert tl.tasks[0].status is Status.DONE
    assert task_api.mark_done(tl, 2) == []


def test_parse_filters() -> None:
    assert task_api.parse_filters([]) == (None, None)
    assert task_api.parse_filters(["high", "done"]) == (Priority.HIGH, Status.DONE)
    assert task_api.parse_filters(["P"]) == (None, Status.PENDING)
    assert task_api.parse_filters(["whatever", "l"]) == (Priority.LOW, None)


def test_select_tasks_sorts_by_due_and_filters() -> None:
    tl = TaskList(
        tasks=[
            _task(1, date(2024, 6, 12), priority=Priority.HIGH),
            _task(2, date(2024, 6, 9)),
            _task(3, date(2024, 6, 10), priority=Priority.HIGH, status=Status.DONE),
            _task(4, date(2024, 6, 9), priority=Priority.HIGH),
        ]
    )
    assert [t.id for t in task_api.select_tasks(tl)] == [2, 4, 3, 1]
    assert [t.id for t in task_api.select_tasks(tl, priority=Priority.HIGH)] == [4, 3, 1]
    assert [t.id for t in task_api.select_tasks(tl, priority=Priority.HIGH, status=Status.PENDING)] == [4, 1]
    assert task_api.select_tasks(tl, priority=Priority.LOW) == []
    # File order untouched.
    assert [t.id for t in tl.tasks] == [1, 2, 3, 4]


def test_summarize() -> None:
    tl = TaskList(
        tasks=[
            _task(1, date(2024, 6, 1)),
            _task(2, date(2024, 6, 9)),
            _task(3, TODAY),
            _task(4, date(2024, 7, 1)),
            _task(5, date(2024, 6, 1), status=Status.DONE),
        ]
    )
    assert task_api.summarize(tl, TODAY) == task_api.Summary(total=5, overdue=2, due_today=1, done=1)
    assert task_api.summarize(TaskList(), TODAY) == task_api.Summary(0, 0, 0, 0)


def test_duplicate_ids_are_all_updated() -> None:
    # Hand-edited files can repeat an id; edit/done/delete treat every copy alike.
    tl = TaskList(tasks=[_task(2, TODAY), _task(1, TODAY), _task(2, TODAY)])

    assert len(task_api.edit_task(tl, 2, ["title=Same"])) == 2
    assert [t.title for t in tl.tasks] == ["Same", "task 1", "Same"]

    assert len(task_api.mark_done(tl, 2)) == 2
    assert [t.status for t in tl.tasks] == [Status.DONE, Status.PENDING, Status.DONE]

    assert task_api.delete_task(tl, 2) is True
    assert [t.id for t in tl.tasks] == [1]


def test_unparseable_id_targets_tasks_loaded_without_id() -> None:
    tl = TaskList(tasks=[Task.from_dict({"title": "no id"}), _task(1, TODAY)])
    assert task_api.delete_task(tl, task_api.parse_task_id("abc")) is True
    assert [t.id for t in tl.tasks] == [1]

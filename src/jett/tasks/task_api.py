# src/jett/tasks/task_api.py

"""
Pure operations over a TaskList.

Nothing here touches the filesystem or reads the clock: callers load the
collection, pass "today" explicitly, and decide whether to save.
Lookups by id return the affected tasks (empty list / False when no
task matches) so the command layer can log the outcome and carry on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .task_models import Priority, Status, Task, TaskList, parse_date
from .task_store import next_id

logger = logging.getLogger(__name__)


class DerivedStatus(StrEnum):
    """Presentation-only status label; never persisted."""

    OVERDUE = "Overdue"
    DUE_TODAY = "Due today"
    ON_SCHEDULE = "On schedule"
    DONE = "Done"


def derive_status(task: Task, today: date) -> DerivedStatus:
    if task.status == Status.DONE:
        return DerivedStatus.DONE
    if task.due_date < today:
        return DerivedStatus.OVERDUE
    if task.due_date == today:
        return DerivedStatus.DUE_TODAY
    return DerivedStatus.ON_SCHEDULE


def parse_task_id(raw: str) -> int:
    """
    Integer id; anything unparseable maps to 0.

    0 is an ordinary id for matching purposes: tasks loaded with a missing
    or bad id also carry 0, so they are the ones affected.
    """
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug("Invalid task id %r", raw)
        return 0


def add_task(
    task_list: TaskList,
    *,
    title: str,
    start: str,
    due: str,
    priority: str | None = None,
) -> Task:
    prio = Priority.MEDIUM
    if priority is not None:
        try:
            prio = Priority.from_string(priority)
        except ValueError:
            logger.debug("Invalid priority %r on add, using %s", priority, prio)

    task = Task(
        id=next_id(task_list),
        title=title,
        start_date=parse_date(start),
        due_date=parse_date(due),
        priority=prio,
        status=Status.PENDING,
    )
    task_list.tasks.append(task)
    return task


def find_tasks(task_list: TaskList, task_id: int) -> list[Task]:
    """Every task carrying task_id (ids are unique unless the file was hand-edited)."""
    return [t for t in task_list.tasks if t.id == task_id]


def _apply_field(task: Task, key: str, value: str) -> None:
    if key == "title":
        task.title = value
    elif key == "due":
        task.due_date = parse_date(value)
    elif key == "priority":
        try:
            task.priority = Priority.from_string(value)
        except ValueError:
            logger.debug("Ignoring invalid priority %r for task %s", value, task.id)
    elif key == "status":
        try:
            task.status = Status.from_string(value)
        except ValueError:
            logger.debug("Ignoring invalid status %r for task %s", value, task.id)
    else:
        logger.debug("Ignoring unknown field %r for task %s", key, task.id)


def edit_task(task_list: TaskList, task_id: int, assignments: Iterable[str]) -> list[Task]:
    """Apply "key=value" assignments to every matching task.

    Malformed pairs and unknown keys are skipped.
    """
    tasks = find_tasks(task_list, task_id)
    pairs: list[tuple[str, str]] = []
    for kv in assignments:
        key, sep, value = kv.partition("=")
        if not sep:
            logger.debug("Ignoring malformed assignment %r", kv)
            continue
        pairs.append((key, value))
    for task in tasks:
        for key, value in pairs:
            _apply_field(task, key, value)
    return tasks


def delete_task(task_list: TaskList, task_id: int) -> bool:
    before = len(task_list.tasks)
    task_list.tasks = [t for t in task_list.tasks if t.id != task_id]
    return len(task_list.tasks) != before


def mark_done(task_list: TaskList, task_id: int) -> list[Task]:
    tasks = find_tasks(task_list, task_id)
    for task in tasks:
        task.status = Status.DONE
    return tasks


def parse_filters(tokens: Iterable[str]) -> tuple[Priority | None, Status | None]:
    """Each token is tried as a priority, then as a status; the rest are ignored."""
    prio: Priority | None = None
    status: Status | None = None
    for tok in tokens:
        try:
            prio = Priority.from_string(tok)
            continue
        except ValueError:
            pass
        try:
            status = Status.from_string(tok)
        except ValueError:
            logger.debug("Ignoring unknown list filter %r", tok)
    return prio, status


def select_tasks(
    task_list: TaskList,
    *,
    priority: Priority | None = None,
    status: Status | None = None,
) -> list[Task]:
    """Matching tasks, ascending by due date (stable for equal dates)."""
    out = [
        t
        for t in task_list.tasks
        if (priority is None or t.priority == priority) and (status is None or t.status == status)
    ]
    out.sort(key=lambda t: t.due_date)
    return out


@dataclass(frozen=True, slots=True)
class Summary:
    total: int
    overdue: int
    due_today: int
    done: int


def summarize(task_list: TaskList, today: date) -> Summary:
    overdue = due_today = done = 0
    for t in task_list.tasks:
        st = derive_status(t, today)
        if st == DerivedStatus.DONE:
            done += 1
        elif st == DerivedStatus.OVERDUE:
            overdue += 1
        elif st == DerivedStatus.DUE_TODAY:
            due_today += 1
    return Summary(total=len(task_list.tasks), overdue=overdue, due_today=due_today, done=done)

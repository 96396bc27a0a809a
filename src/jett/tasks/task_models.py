# src/jett/tasks/task_models.py

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any

logger = logging.getLogger(__name__)

# Fallback for dates that fail to parse.
ZERO_DATE = date.min

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def from_string(cls, raw: str) -> Priority:
        """Case-insensitive name or one-letter abbreviation; ValueError otherwise."""
        try:
            return _PRIORITY_ALIASES[raw.strip().lower()]
        except KeyError:
            raise ValueError(f"invalid priority: {raw!r}") from None

    @classmethod
    def from_json(cls, raw: Any) -> Priority:
        if not isinstance(raw, str):
            return cls.MEDIUM
        try:
            return cls.from_string(raw)
        except ValueError:
            return cls.MEDIUM


class Status(StrEnum):
    PENDING = "Pending"
    DONE = "Done"

    @classmethod
    def from_string(cls, raw: str) -> Status:
        """Case-insensitive name or one-letter abbreviation; ValueError otherwise."""
        try:
            return _STATUS_ALIASES[raw.strip().lower()]
        except KeyError:
            raise ValueError(f"invalid status: {raw!r}") from None

    @classmethod
    def from_json(cls, raw: Any) -> Status:
        if not isinstance(raw, str):
            return cls.PENDING
        try:
            return cls.from_string(raw)
        except ValueError:
            return cls.PENDING


_PRIORITY_ALIASES: dict[str, Priority] = {
    "high": Priority.HIGH,
    "h": Priority.HIGH,
    "medium": Priority.MEDIUM,
    "m": Priority.MEDIUM,
    "low": Priority.LOW,
    "l": Priority.LOW,
}

_STATUS_ALIASES: dict[str, Status] = {
    "pending": Status.PENDING,
    "p": Status.PENDING,
    "done": Status.DONE,
    "d": Status.DONE,
}


def parse_date(raw: str) -> date:
    """Strict YYYY-MM-DD. Anything else yields ZERO_DATE."""
    s = raw.strip()
    if not _DATE_RE.match(s):
        logger.debug("Unparseable date %r, using zero date.", raw)
        return ZERO_DATE
    try:
        return date.fromisoformat(s)
    except ValueError:
        logger.debug("Invalid calendar date %r, using zero date.", raw)
        return ZERO_DATE


def date_to_json(d: date) -> str:
    return f"{d.isoformat()}T00:00:00Z"


def date_from_json(raw: Any) -> date:
    """Accept ISO-8601 date-time or plain date strings; keep the calendar day."""
    if not isinstance(raw, str) or not raw:
        return ZERO_DATE
    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return ZERO_DATE


@dataclass(slots=True)
class Task:
    id: int
    title: str
    start_date: date
    due_date: date
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "start_date": date_to_json(self.start_date),
            "due_date": date_to_json(self.due_date),
            "priority": str(self.priority),
            "status": str(self.status),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        raw_id = data.get("id", 0)
        try:
            task_id = int(raw_id)
        except (TypeError, ValueError):
            task_id = 0
        return cls(
            id=task_id,
            title=str(data.get("title") or ""),
            start_date=date_from_json(data.get("start_date")),
            due_date=date_from_json(data.get("due_date")),
            priority=Priority.from_json(data.get("priority")),
            status=Status.from_json(data.get("status")),
        )


@dataclass(slots=True)
class TaskList:
    """Ordered task collection; persisted as {"tasks": [...]}."""

    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [t.to_dict() for t in self.tasks]}

    @classmethod
    def from_dict(cls, data: Any) -> TaskList:
        if not isinstance(data, dict):
            return cls()
        raw_tasks = data.get("tasks")
        if not isinstance(raw_tasks, list):
            return cls()
        return cls(tasks=[Task.from_dict(t) for t in raw_tasks if isinstance(t, dict)])

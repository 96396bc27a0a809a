# src/jett/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .task_models import TaskList

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole collection is read on load() and rewritten on save().
    Both directions are best-effort: read problems yield an empty
    collection, write problems are logged and reported as False.
    There is no locking; concurrent writers race and the last one wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("No tasks file at %s, starting empty.", self._path)
            return TaskList()
        except OSError:
            logger.warning("Failed to read %s, starting empty.", self._path, exc_info=True)
            return TaskList()

        if not raw.strip():
            return TaskList()

        try:
            # Bytes in: undecodable text is a ValueError like any other bad JSON.
            data = json.loads(raw)
        except ValueError:
            logger.warning("Corrupt tasks file %s, starting empty.", self._path, exc_info=True)
            return TaskList()

        task_list = TaskList.from_dict(data)
        logger.debug("Loaded %d tasks from %s", len(task_list.tasks), self._path)
        return task_list

    def save(self, task_list: TaskList) -> bool:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = _to_utf8(json.dumps(task_list.to_dict(), ensure_ascii=False, indent=2))
            tmp.write_bytes(payload)
            os.replace(tmp, self._path)
        except (OSError, ValueError):
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            return False
        logger.debug("Saved %d tasks to %s", len(task_list.tasks), self._path)
        return True


def _to_utf8(text: str) -> bytes:
    """
    Encode for disk. Undecodable argv bytes arrive as surrogate escapes;
    they are restored and replaced with U+FFFD instead of failing the write.
    """
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError:
        pass
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace").encode("utf-8")


def next_id(task_list: TaskList) -> int:
    """Max existing id + 1 (1 for an empty collection)."""
    return max((t.id for t in task_list.tasks), default=0) + 1

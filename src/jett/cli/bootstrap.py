# src/jett/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the TaskStore and the output Console into AppState,
- reads today's date once for the whole invocation.
"""

from __future__ import annotations

import logging
from datetime import date

from rich.console import Console

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore
from .render import make_console

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    today: date | None = None,
    console: Console | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings, clock and console injectable makes command output
    deterministic in tests. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if console is None:
        console = make_console(color=bool(getattr(settings, "color", True)))

    state = AppState(
        settings=settings,
        task_store=TaskStore(settings.tasks_path),
        console=console,
        today=today or date.today(),
    )
    logger.debug("State ready tasks_path=%s today=%s", settings.tasks_path, state.today)
    return state

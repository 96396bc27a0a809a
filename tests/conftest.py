# tests/conftest.py

from __future__ import annotations

import io
from datetime import date
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from jett.cli.bootstrap import create_initial_state
from jett.core.state import AppState
from jett.tasks.task_store import TaskStore

TODAY = date(2024, 6, 10)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the caller's environment and .env.
    """
    return SimpleNamespace(
        app_name="Jett CLI",
        log_level="WARNING",
        log_dir=None,
        color=False,
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)


@pytest.fixture()
def console() -> Console:
    """Recording console: plain text, wide enough to never wrap."""
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture()
def state(settings: SimpleNamespace, console: Console) -> AppState:
    return create_initial_state(settings=settings, today=TODAY, console=console)


@pytest.fixture()
def output(console: Console):
    """Callable returning everything printed so far."""
    return lambda: console.file.getvalue()

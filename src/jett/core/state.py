# src/jett/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from rich.console import Console

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskStore
    console: Console

    # Read once per invocation; status derivation never looks at the clock itself.
    today: date

# src/jett/cli/render.py

"""
Terminal rendering (rich Text objects, printed by the command handlers).

Palette is xterm-256 (Catppuccin Mocha approximations). Titles are
appended as plain Text so user input is never parsed as markup.
"""

from __future__ import annotations

from datetime import date

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..tasks.task_api import DerivedStatus, Summary, derive_status
from ..tasks.task_models import Priority, Task

TEXT = Style(color="color(250)")
MUTED = Style(color="color(244)")
BORDER = Style(color="color(211)")
TITLE = Style(color="color(219)")

PRIORITY_STYLE: dict[Priority, Style] = {
    Priority.HIGH: Style(color="color(203)"),
    Priority.MEDIUM: Style(color="color(221)"),
    Priority.LOW: Style(color="color(114)"),
}

STATUS_STYLE: dict[DerivedStatus, Style] = {
    DerivedStatus.ON_SCHEDULE: Style(color="color(114)"),
    DerivedStatus.DUE_TODAY: Style(color="color(221)"),
    DerivedStatus.OVERDUE: Style(color="color(203)"),
    DerivedStatus.DONE: Style(color="color(244)"),
}

_BANNER_WIDTH = 38


def make_console(*, color: bool = True) -> Console:
    # rich already honors NO_COLOR and drops styles when stdout is not a TTY.
    return Console(highlight=False, no_color=not color)


def header(app_name: str = "Jett CLI") -> list[Text]:
    bar = "━" * _BANNER_WIDTH
    title = (" " * 14 + app_name).ljust(_BANNER_WIDTH)[:_BANNER_WIDTH]
    return [
        Text(f"┏{bar}┓", style=BORDER),
        Text(f"┃{title}┃", style=TITLE),
        Text(f"┗{bar}┛", style=BORDER),
    ]


def priority_text(priority: Priority) -> Text:
    return Text(str(priority), style=PRIORITY_STYLE.get(priority, ""))


def status_text(status: DerivedStatus) -> Text:
    return Text(str(status), style=STATUS_STYLE[status])


def task_lines(task: Task, today: date) -> list[Text]:
    first = Text(f"[{task.id:2d}]", style=BORDER)
    first.append(" ")
    first.append(task.title)

    second = Text(f"  Due: {task.due_date.isoformat()}  Priority: ")
    second.append_text(priority_text(task.priority))

    third = Text("  Status: ")
    third.append_text(status_text(derive_status(task, today)))

    return [first, second, third, Text("")]


def summary_lines(summary: Summary) -> list[Text]:
    def line(label: str, style: Style, n: int) -> Text:
        out = Text(f"{label}:", style=style)
        out.append(f" {n}")
        return out

    return [
        Text(f"Total: {summary.total}"),
        line("Overdue", STATUS_STYLE[DerivedStatus.OVERDUE], summary.overdue),
        line("Due today", STATUS_STYLE[DerivedStatus.DUE_TODAY], summary.due_today),
        line("Done", STATUS_STYLE[DerivedStatus.DONE], summary.done),
    ]


def added_line(task: Task) -> Text:
    out = Text("Added:", style=TEXT)
    out.append(f" {task.title}")
    return out


def no_matches_line() -> Text:
    return Text("No matching tasks", style=MUTED)


def print_lines(console: Console, lines: list[Text]) -> None:
    for ln in lines:
        console.print(ln, soft_wrap=True)

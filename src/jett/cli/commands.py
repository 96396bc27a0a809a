# src/jett/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks import task_api
from . import render

CommandHandler = Callable[[AppState, list[str]], None]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Verb registry used by the entrypoint (add, list, edit, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._usage: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        usage: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._usage[key] = usage
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def usage(self, name: str) -> str:
        return self._usage[name.lower()]

    def usage_lines(self) -> list[str]:
        return list(self._usage.values())

    def handle(self, state: AppState, argv: list[str]) -> bool:
        """
        Dispatch argv (without the program name) to a handler.
        Returns False when no handler matched and usage was printed instead.
        """
        if not argv:
            print_usage(state, self)
            return False

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", argv[0])
            print_usage(state, self)
            return False

        try:
            handler(state, argv[1:])
        except Exception:
            # One-shot CLI: log and fall through to a normal exit.
            logger.exception("Command %r failed", name)
        return True


registry = CommandRegistry()


def print_usage(state: AppState, reg: CommandRegistry | None = None) -> None:
    reg = reg or registry
    render.print_lines(state.console, render.header(_app_name(state)))
    for line in reg.usage_lines():
        state.console.print(line, soft_wrap=True, markup=False)


def _app_name(state: AppState) -> str:
    return str(getattr(state.settings, "app_name", "Jett CLI"))


def _print_cmd_usage(state: AppState, name: str) -> None:
    state.console.print(f"Usage: {registry.usage(name)}", soft_wrap=True, markup=False)


def cmd_add(state: AppState, args: list[str]) -> None:
    """add "Title" START DUE [PRIORITY]"""
    if len(args) < 3:
        _print_cmd_usage(state, "add")
        return

    task_list = state.task_store.load()
    task = task_api.add_task(
        task_list,
        title=args[0],
        start=args[1],
        due=args[2],
        priority=args[3] if len(args) > 3 else None,
    )
    state.task_store.save(task_list)
    logger.info("Added task id=%s", task.id)

    render.print_lines(state.console, render.header(_app_name(state)))
    state.console.print(render.added_line(task), soft_wrap=True)


def cmd_list(state: AppState, args: list[str]) -> None:
    """list [high|medium|low] [pending|done]"""
    task_list = state.task_store.load()
    render.print_lines(state.console, render.header(_app_name(state)))

    prio, status = task_api.parse_filters(args)
    shown = task_api.select_tasks(task_list, priority=prio, status=status)

    for task in shown:
        render.print_lines(state.console, render.task_lines(task, state.today))

    if not shown:
        state.console.print(render.no_matches_line(), soft_wrap=True)


def cmd_edit(state: AppState, args: list[str]) -> None:
    """edit <id> key=value ... (keys: title, due, priority, status)"""
    if not args:
        _print_cmd_usage(state, "edit")
        return

    task_id = task_api.parse_task_id(args[0])
    task_list = state.task_store.load()
    if not task_api.edit_task(task_list, task_id, args[1:]):
        logger.debug("edit: no task with id=%s", task_id)
    state.task_store.save(task_list)


def cmd_delete(state: AppState, args: list[str]) -> None:
    if not args:
        _print_cmd_usage(state, "delete")
        return

    task_id = task_api.parse_task_id(args[0])
    task_list = state.task_store.load()
    if not task_api.delete_task(task_list, task_id):
        logger.debug("delete: no task with id=%s", task_id)
    state.task_store.save(task_list)


def cmd_done(state: AppState, args: list[str]) -> None:
    if not args:
        _print_cmd_usage(state, "done")
        return

    task_id = task_api.parse_task_id(args[0])
    task_list = state.task_store.load()
    if not task_api.mark_done(task_list, task_id):
        logger.debug("done: no task with id=%s", task_id)
    state.task_store.save(task_list)


def cmd_summary(state: AppState, args: list[str]) -> None:
    task_list = state.task_store.load()
    render.print_lines(state.console, render.header(_app_name(state)))
    render.print_lines(state.console, render.summary_lines(task_api.summarize(task_list, state.today)))


def cmd_help(state: AppState, args: list[str]) -> None:
    print_usage(state)


registry.register("add", cmd_add, usage='jett add "Title" START DUE [PRIORITY]')
registry.register("list", cmd_list, usage="jett list [high|medium|low] [pending|done]", aliases=["ls"])
registry.register("edit", cmd_edit, usage="jett edit <id> field=value")
registry.register("delete", cmd_delete, usage="jett delete <id>", aliases=["rm"])
registry.register("done", cmd_done, usage="jett done <id>")
registry.register("summary", cmd_summary, usage="jett summary")
registry.register("help", cmd_help, usage="jett help", aliases=["-h", "--help"])

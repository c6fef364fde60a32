# src/taskboard/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..board.board_api import confirm_delete, describe_selection, submit_task_form, toggle_done
from ..board.board_models import Board, BoardError, Task
from ..board.time_values import format_time_estimate
from ..core.state import AppState

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

EDIT_FIELDS = ("title", "description", "notes", "hours", "minutes")


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, /move, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        BoardError (e.g. unknown list on /add) is turned into a reply; anything else propagates.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)

            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except BoardError as e:
            logger.info("/%s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- rendering helpers ----


def _task_line(task: Task, selected_id: str | None) -> str:
    mark = "x" if task.is_done else " "
    sel = "*" if task.id == selected_id else " "
    clip = f" +{len(task.attachments)} att" if task.attachments else ""
    return f" {sel}[{mark}] {task.id}  {task.title}  ({format_time_estimate(task.time_estimate)}){clip}"


def render_board(state: AppState) -> str:
    board: Board = state.store.board
    if not board.lists:
        return "Board is empty."

    lines: list[str] = []
    for lst in board.lists:
        stats = state.store.get_list_stats(lst.id)
        noun = "task" if stats.total == 1 else "tasks"
        lines.append(f"{lst.title} [{lst.id}]: {stats.total} {noun} • {format_time_estimate(stats.total_time)}")
        if not lst.tasks:
            lines.append("   (empty)")
        for task in lst.tasks:
            lines.append(_task_line(task, state.selected_task_id))
    return "\n".join(lines)


def render_timer(state: AppState) -> str:
    timer = state.timer
    title = describe_selection(state.store, timer.bound_task_id)
    mode = "running" if timer.is_active else ("paused" if title else "idle")
    suffix = f" | Selected Task: {title}" if title else ""
    return f"Timer {timer.formatted()} ({mode}){suffix}"


# ---- board commands ----


def cmd_help(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_board(state: AppState, args: list[str]) -> str:
    return render_board(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    list_ids = args[:1] or state.store.board.list_ids()
    lines = []
    for list_id in list_ids:
        stats = state.store.get_list_stats(list_id)
        lines.append(f"{list_id}: total={stats.total} time={format_time_estimate(stats.total_time)}")
    return "\n".join(lines) if lines else "No lists."


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add <list_id> <hours> <minutes> <title...>
    hours/minutes are parsed leniently (garbage -> 0).
    """
    if len(args) < 4:
        return "Usage: /add <list_id> <hours> <minutes> <title...>"

    list_id, hours, minutes = args[0], args[1], args[2]
    form = {"title": " ".join(args[3:]), "description": "", "hours": hours, "minutes": minutes, "notes": ""}
    task = submit_task_form(state.store, form, list_id=list_id)
    return f"Created task {task.id} in {list_id} ({format_time_estimate(task.time_estimate)})."


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit <task_id> <field> <value...>
    field: title | description | notes | hours | minutes
    """
    if len(args) < 2 or args[1].lower() not in EDIT_FIELDS:
        return f"Usage: /edit <task_id> <{'|'.join(EDIT_FIELDS)}> <value...>"

    task_id, field_name = args[0], args[1].lower()
    value = " ".join(args[2:])

    task = state.store.find_task(task_id)
    if task is None:
        return f"Task '{task_id}' not found."

    form = {
        "title": task.title,
        "description": task.description,
        "hours": task.time_estimate.hours,
        "minutes": task.time_estimate.minutes,
        "notes": task.notes,
    }
    form[field_name] = value
    updated = submit_task_form(state.store, form, task_id=task_id)
    return f"Updated task {updated.id}: {field_name}."


def cmd_move(state: AppState, args: list[str]) -> str:
    if len(args) != 2:
        return "Usage: /move <task_id> <list_id>"

    task_id, list_id = args
    if state.store.find_task(task_id) is None:
        return f"Task '{task_id}' not found."
    if state.store.find_list(list_id) is None:
        return f"List '{list_id}' not found."

    state.store.move_task(task_id, list_id)
    return f"Moved task {task_id} to {list_id}."


def _set_done(state: AppState, args: list[str], checked: bool) -> str:
    if len(args) != 1:
        return f"Usage: /{'done' if checked else 'undone'} <task_id>"
    task_id = args[0]
    if state.store.find_task(task_id) is None:
        return f"Task '{task_id}' not found."
    toggle_done(state.store, task_id, checked)
    return f"Task {task_id} marked {'done' if checked else 'not done'}."


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, True)


def cmd_undone(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, False)


def cmd_delete(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /delete <task_id> [yes]
    With confirm_delete enabled the deletion only happens when "yes" is given.
    """
    if not args:
        return "Usage: /delete <task_id> [yes]"

    task_id = args[0]
    if state.store.find_task(task_id) is None:
        return f"Task '{task_id}' not found."

    need_confirm = bool(getattr(state.settings, "confirm_delete", True))
    confirmed = not need_confirm or (len(args) > 1 and args[1].lower() in ("yes", "y"))

    def _confirm(prompt: str) -> bool:
        if not confirmed and emit:
            emit(f"{prompt} Re-run as /delete {task_id} yes")
        return confirmed

    if not confirm_delete(state.store, task_id, _confirm):
        return "Deletion not confirmed."
    return f"Deleted task {task_id}."


# ---- timer commands ----


def cmd_select(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /select <task_id> | /select none"

    target = None if args[0].lower() in ("none", "-") else args[0]
    if target is not None and state.store.find_task(target) is None:
        return f"Task '{target}' not found."

    state.timer.bind_task(target)
    return render_timer(state)


def cmd_start(state: AppState, args: list[str]) -> str:
    if state.timer.bound_task_id is None:
        return "No task selected. Use /select <task_id> first."
    state.timer.start()
    return render_timer(state)


def cmd_pause(state: AppState, args: list[str]) -> str:
    state.timer.pause()
    return render_timer(state)


def cmd_toggle(state: AppState, args: list[str]) -> str:
    state.timer.toggle()
    return render_timer(state)


def cmd_reset(state: AppState, args: list[str]) -> str:
    state.timer.reset()
    return render_timer(state)


def cmd_timer(state: AppState, args: list[str]) -> str:
    return render_timer(state)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("board", cmd_board, help_text="Show all lists with their tasks.", aliases=["b", "ls"])
registry.register("stats", cmd_stats, help_text="Task count and total estimate: /stats [list_id].")
registry.register("add", cmd_add, help_text="Create a task: /add <list_id> <hours> <minutes> <title...>.")
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <task_id> <field> <value...>.")
registry.register("move", cmd_move, help_text="Move a task to the end of a list: /move <task_id> <list_id>.")
registry.register("done", cmd_done, help_text="Mark a task done (stays in its list).")
registry.register("undone", cmd_undone, help_text="Mark a task not done.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <task_id> yes.", aliases=["rm"])
registry.register("select", cmd_select, help_text="Bind the timer to a task: /select <task_id> | none.")
registry.register("start", cmd_start, help_text="Start the countdown.")
registry.register("pause", cmd_pause, help_text="Pause the countdown.")
registry.register("toggle", cmd_toggle, help_text="Start/pause the countdown.")
registry.register("reset", cmd_reset, help_text="Reset the countdown to the task estimate.")
registry.register("timer", cmd_timer, help_text="Show the countdown.", aliases=["t"])

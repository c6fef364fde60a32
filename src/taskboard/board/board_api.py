# src/taskboard/board/board_api.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .board_models import Board, NotFoundError, Task, TaskStatus
from .board_store import BoardStore
from .time_values import TimeEstimate

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this task?"


def form_to_patch(form: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert raw task-form fields into an update patch.

    hours/minutes are parsed defensively (garbage -> 0) and normalized.
    """
    return {
        "title": str(form.get("title") or ""),
        "description": str(form.get("description") or ""),
        "time_estimate": TimeEstimate.of(form.get("hours"), form.get("minutes")),
        "notes": str(form.get("notes") or ""),
    }


def submit_task_form(
    store: BoardStore,
    form: Mapping[str, Any],
    *,
    list_id: str | None = None,
    task_id: str | None = None,
) -> Task:
    """
    Translate one form submission into exactly one store call.

    - task_id given -> update_task (edit mode)
    - list_id given -> create_task (create mode)
    Returns the resulting task. NotFoundError from the store propagates.
    """
    patch = form_to_patch(form)

    if task_id is not None:
        store.update_task(task_id, patch)
        task = store.find_task(task_id)
        if task is None:
            raise NotFoundError("task", task_id)
        return task

    if list_id is None:
        raise ValueError("submit_task_form needs list_id (create) or task_id (edit)")

    return store.create_task(
        list_id,
        patch["title"],
        patch["description"],
        patch["time_estimate"],
        patch["notes"],
    )


def toggle_done(store: BoardStore, task_id: str, checked: bool) -> Board:
    """Done checkbox: flips status without moving the card."""
    status = TaskStatus.DONE if checked else TaskStatus.TODO
    return store.set_task_status(task_id, status.value)


def drop_task(store: BoardStore, dragged_task_id: str | None, target_list_id: str | None) -> Board:
    """A completed drag: one move_task call, or nothing if the gesture carried no task/target."""
    if not dragged_task_id or not target_list_id:
        logger.debug("Ignoring drop task=%s target=%s", dragged_task_id, target_list_id)
        return store.board
    return store.move_task(dragged_task_id, target_list_id)


def confirm_delete(store: BoardStore, task_id: str, confirm: Callable[[str], bool]) -> bool:
    """Delete only after confirm(prompt) agrees. Returns whether deletion was requested."""
    if not confirm(DELETE_PROMPT):
        return False
    store.delete_task(task_id)
    return True


def describe_selection(store: BoardStore, task_id: str | None) -> str | None:
    task = store.find_task(task_id)
    return task.title if task else None

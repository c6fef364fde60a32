# src/taskboard/board/board_store.py

from __future__ import annotations

"""
Board operations.

Module-level functions are pure: each takes the current Board and returns a new one
(or the very same object when the operation is a no-op). BoardStore owns the single
current snapshot, applies those functions copy-on-write and notifies listeners.

Error policy:
- create_task / update_task raise NotFoundError for unknown ids.
- delete_task / move_task / set_task_status on unknown ids are silent no-ops
  (stale UI state such as a double click must not crash the interaction).
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from .board_models import Board, BoardList, ListStats, NotFoundError, Task
from .time_values import TimeEstimate

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]
BoardListener = Callable[[Board], None]

# Only these fields can be edited through update_task; status/membership are not.
EDITABLE_FIELDS: dict[str, str] = {
    "title": "title",
    "description": "description",
    "time_estimate": "time_estimate",
    "timeEstimate": "time_estimate",
    "notes": "notes",
}


def new_task_id() -> str:
    return uuid.uuid4().hex[:12]


def _unique_id(board: Board, id_factory: IdFactory) -> str:
    taken = {t.id for t in board.all_tasks()}
    while True:
        candidate = str(id_factory())
        if candidate not in taken:
            return candidate
        logger.debug("Task id collision on %s; drawing again", candidate)


def _replace_list(board: Board, updated: BoardList) -> Board:
    return Board(lists=tuple(updated if lst.id == updated.id else lst for lst in board.lists))


def _map_task(board: Board, task_id: str, fn: Callable[[Task], Task]) -> Board:
    lists = []
    for lst in board.lists:
        if lst.has_task(task_id):
            lst = replace(lst, tasks=tuple(fn(t) if t.id == task_id else t for t in lst.tasks))
        lists.append(lst)
    return Board(lists=tuple(lists))


def create_task(
    board: Board,
    list_id: str,
    title: str,
    description: str = "",
    time_estimate: TimeEstimate | Mapping[str, Any] | None = None,
    notes: str = "",
    *,
    id_factory: IdFactory = new_task_id,
) -> tuple[Board, Task]:
    target = board.find_list(list_id)
    if target is None:
        raise NotFoundError("list", list_id)

    task = Task(
        id=_unique_id(board, id_factory),
        title=str(title or ""),
        description=str(description or ""),
        time_estimate=TimeEstimate.coerce(time_estimate),
        status=target.id,
        notes=str(notes or ""),
        attachments=(),
    )
    new_board = _replace_list(board, replace(target, tasks=target.tasks + (task,)))
    return new_board, task


def update_task(board: Board, task_id: str, patch: Mapping[str, Any]) -> Board:
    """
    Merge editable fields from patch onto the task.

    Keys other than title/description/time_estimate(timeEstimate)/notes are ignored,
    so a patch carrying a stale status never changes list membership.
    """
    if board.find_task(task_id) is None:
        raise NotFoundError("task", task_id)

    changes: dict[str, Any] = {}
    for key, value in (patch or {}).items():
        attr = EDITABLE_FIELDS.get(key)
        if attr is None:
            continue
        if attr == "time_estimate":
            changes[attr] = TimeEstimate.coerce(value)
        else:
            changes[attr] = "" if value is None else str(value)

    if not changes:
        return board
    return _map_task(board, task_id, lambda t: replace(t, **changes))


def delete_task(board: Board, task_id: str) -> Board:
    source = board.list_containing(task_id)
    if source is None:
        return board
    updated = replace(source, tasks=tuple(t for t in source.tasks if t.id != task_id))
    return _replace_list(board, updated)


def move_task(board: Board, task_id: str, target_list_id: str) -> Board:
    """
    Remove the task from its list and append it to the end of target_list_id.

    Moving onto the list that already holds the task re-appends it at the end.
    Unknown task or unknown target: the board is returned unchanged.
    """
    source = board.list_containing(task_id)
    target = board.find_list(target_list_id)
    if source is None or target is None:
        return board

    task = next(t for t in source.tasks if t.id == task_id)
    moved = replace(task, status=target.id)

    lists = []
    for lst in board.lists:
        tasks = lst.tasks
        if lst.id == source.id:
            tasks = tuple(t for t in tasks if t.id != task_id)
        if lst.id == target.id:
            tasks = tasks + (moved,)
        lists.append(lst if tasks is lst.tasks else replace(lst, tasks=tasks))
    return Board(lists=tuple(lists))


def set_task_status(board: Board, task_id: str, status: str) -> Board:
    """Overwrite status only; the task stays in the list that holds it."""
    if board.find_task(task_id) is None:
        return board
    return _map_task(board, task_id, lambda t: replace(t, status=str(status)))


def get_list_stats(board: Board, list_id: str) -> ListStats:
    lst = board.find_list(list_id)
    if lst is None:
        return ListStats()

    total_time = TimeEstimate()
    for t in lst.tasks:
        total_time = total_time + t.time_estimate
    return ListStats(total=len(lst.tasks), total_time=total_time)


class BoardStore:
    """
    Owner of the current Board snapshot.

    Every mutation reads the snapshot, applies a pure operation and replaces it wholesale.
    Listeners are called with the new Board after each effective change (no-ops do not notify).
    Callers serialize access (single logical thread; the console uses AppState.lock).
    """

    def __init__(self, board: Board | None = None, *, id_factory: IdFactory = new_task_id) -> None:
        self._board = board if board is not None else Board()
        self._id_factory = id_factory
        self._listeners: list[BoardListener] = []
        logger.info(
            "BoardStore ready lists=%d tasks=%d",
            len(self._board.lists),
            len(self._board.all_tasks()),
        )

    @property
    def board(self) -> Board:
        return self._board

    def snapshot(self) -> Board:
        return self._board

    # ---- listeners ----

    def subscribe(self, listener: BoardListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _commit(self, new_board: Board, action: str, **details: Any) -> Board:
        if new_board is self._board:
            logger.debug("Board %s was a no-op %s", action, details)
            return new_board

        self._board = new_board
        logger.debug("Board %s %s", action, details)

        for listener in list(self._listeners):
            try:
                listener(new_board)
            except Exception:
                logger.exception("Board listener failed after %s", action)
        return new_board

    # ---- reads ----

    def find_task(self, task_id: str | None) -> Task | None:
        return self._board.find_task(task_id)

    def find_list(self, list_id: str | None) -> BoardList | None:
        return self._board.find_list(list_id)

    def get_list_stats(self, list_id: str) -> ListStats:
        return get_list_stats(self._board, list_id)

    # ---- commands ----

    def create_task(
        self,
        list_id: str,
        title: str,
        description: str = "",
        time_estimate: TimeEstimate | Mapping[str, Any] | None = None,
        notes: str = "",
    ) -> Task:
        new_board, task = create_task(
            self._board,
            list_id,
            title,
            description,
            time_estimate,
            notes,
            id_factory=self._id_factory,
        )
        self._commit(new_board, "create", task_id=task.id, list_id=list_id)
        return task

    def update_task(self, task_id: str, patch: Mapping[str, Any]) -> Board:
        new_board = update_task(self._board, task_id, patch)
        return self._commit(new_board, "update", task_id=task_id, fields=sorted(patch or {}))

    def delete_task(self, task_id: str) -> Board:
        return self._commit(delete_task(self._board, task_id), "delete", task_id=task_id)

    def move_task(self, task_id: str, target_list_id: str) -> Board:
        new_board = move_task(self._board, task_id, target_list_id)
        return self._commit(new_board, "move", task_id=task_id, target=target_list_id)

    def set_task_status(self, task_id: str, status: str) -> Board:
        new_board = set_task_status(self._board, task_id, status)
        return self._commit(new_board, "status", task_id=task_id, status=status)

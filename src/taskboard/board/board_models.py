# src/taskboard/board/board_models.py

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .time_values import TimeEstimate


class TaskStatus(StrEnum):
    """
    Values written by the done checkbox.

    Notes:
    - Task.status is a plain str: after create/move it holds the containing list id,
      the checkbox overwrites it with one of these without moving the card.
    """

    TODO = "todo"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    time_estimate: TimeEstimate
    status: str

    notes: str = ""
    attachments: tuple[Any, ...] = ()

    @property
    def is_done(self) -> bool:
        return self.status == TaskStatus.DONE


@dataclass(frozen=True, slots=True)
class BoardList:
    id: str
    title: str
    tasks: tuple[Task, ...] = ()

    def has_task(self, task_id: str) -> bool:
        return any(t.id == task_id for t in self.tasks)


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable snapshot of all lists and their tasks.

    Operations in board_store.py return new Board values; a snapshot is never mutated.
    """

    lists: tuple[BoardList, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[BoardList]:
        return iter(self.lists)

    def list_ids(self) -> list[str]:
        return [lst.id for lst in self.lists]

    def find_list(self, list_id: str | None) -> BoardList | None:
        for lst in self.lists:
            if lst.id == list_id:
                return lst
        return None

    def list_containing(self, task_id: str | None) -> BoardList | None:
        for lst in self.lists:
            if lst.has_task(task_id):  # type: ignore[arg-type]
                return lst
        return None

    def find_task(self, task_id: str | None) -> Task | None:
        for lst in self.lists:
            for t in lst.tasks:
                if t.id == task_id:
                    return t
        return None

    def all_tasks(self) -> list[Task]:
        return [t for lst in self.lists for t in lst.tasks]


@dataclass(frozen=True, slots=True)
class ListStats:
    total: int = 0
    total_time: TimeEstimate = field(default_factory=TimeEstimate)


class BoardError(Exception):
    """Base for all board errors."""


class NotFoundError(BoardError, LookupError):
    def __init__(self, kind: str, ident: str | None) -> None:
        super().__init__(f"{kind.capitalize()} '{ident}' not found.")
        self.kind = kind
        self.ident = ident

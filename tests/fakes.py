# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass(slots=True)
class FakeTickHandle:
    interval_seconds: float
    callback: Callable[[], None]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class FakeTickScheduler:
    """
    Deterministic TickScheduler for unit tests.

    - Captures every schedule so tests can assert cancellation
    - fire(n) calls the live (not cancelled) callbacks n times, like n elapsed seconds
    """

    handles: list[FakeTickHandle] = field(default_factory=list)

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> FakeTickHandle:
        handle = FakeTickHandle(interval_seconds=interval_seconds, callback=callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeTickHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for h in self.live:
                h.callback()


class RecordingStore:
    """BoardStore stand-in that only records calls (for board_api tests)."""

    def __init__(self, board=None) -> None:
        self.board = board
        self.calls: list[tuple] = []

    def find_task(self, task_id):
        return None if self.board is None else self.board.find_task(task_id)

    def create_task(self, *args):
        self.calls.append(("create_task", *args))

    def update_task(self, *args):
        self.calls.append(("update_task", *args))

    def delete_task(self, *args):
        self.calls.append(("delete_task", *args))

    def move_task(self, *args):
        self.calls.append(("move_task", *args))

    def set_task_status(self, *args):
        self.calls.append(("set_task_status", *args))


class FakeBoardFeed:
    """Minimal BoardFeed: hands out a fixed board and lets tests push new ones."""

    def __init__(self, board) -> None:
        self.board = board
        self.listeners: list[Callable] = []

    def snapshot(self):
        return self.board

    def subscribe(self, listener):
        self.listeners.append(listener)
        return lambda: self.listeners.remove(listener)

    def push(self, board) -> None:
        self.board = board
        for listener in list(self.listeners):
            listener(board)

# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The timer depends on Protocols instead of concrete implementations:
- it reads the board through BoardReader (never mutates it),
- it asks a TickScheduler for its recurring one-second callback.
This keeps the clock swappable (asyncio loop, manual ticks in tests).
"""

from collections.abc import Callable
from typing import Protocol

from ..board.board_models import Board


class BoardReader(Protocol):
    """Read path of the board store."""

    def snapshot(self) -> Board: ...


class TickHandle(Protocol):
    """A scheduled recurring callback. cancel() must be idempotent."""

    def cancel(self) -> None: ...


class TickScheduler(Protocol):
    """
    Recurring timer abstraction.

    schedule_repeating() calls callback every interval_seconds until the returned
    handle is cancelled.
    """

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> TickHandle: ...


class BoardFeed(BoardReader, Protocol):
    """A BoardReader that also pushes every new Board to subscribers."""

    def subscribe(self, listener: Callable[[Board], None]) -> Callable[[], None]: ...

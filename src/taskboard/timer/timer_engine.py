# src/taskboard/timer/timer_engine.py

from __future__ import annotations

"""
Countdown timer bound to at most one selected task.

States:
- Idle: no bound task, remaining is zero, inactive.
- Paused / Running: bound task present, is_active False / True.

The engine never raises on stale task ids: a bound task that disappeared from the
board degrades to Idle at the next synchronization point.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from ..board.board_models import Board, Task
from ..board.time_values import Countdown, TimeEstimate
from ..core.ports import BoardFeed, BoardReader, TickHandle, TickScheduler

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimerState:
    remaining: Countdown = Countdown()
    is_active: bool = False
    bound_task_id: str | None = None


class TimerEngine:
    def __init__(
        self,
        board_reader: BoardReader,
        *,
        scheduler: TickScheduler | None = None,
        interval_seconds: float = 1.0,
    ) -> None:
        self._reader = board_reader
        self._scheduler = scheduler
        self._interval_seconds = float(interval_seconds)

        self._state = TimerState()
        self._bound_estimate: TimeEstimate | None = None

        self._handle: TickHandle | None = None
        # Bumped on every (re)schedule/cancel; callbacks from older schedules are ignored.
        self._generation = 0
        self._detach: Callable[[], None] | None = None

    # ---- reads ----

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def remaining(self) -> Countdown:
        return self._state.remaining

    @property
    def is_active(self) -> bool:
        return self._state.is_active

    @property
    def bound_task_id(self) -> str | None:
        return self._state.bound_task_id

    def formatted(self) -> str:
        return str(self._state.remaining)

    # ---- wiring ----

    def attach(self, store: BoardFeed) -> None:
        """Follow a BoardStore: sync() runs after every board change."""
        if self._detach is not None:
            self._detach()
        self._detach = store.subscribe(self.sync)

    # ---- transitions ----

    def bind_task(self, task_id: str | None) -> TimerState:
        self._cancel_tick()

        task = self._lookup(task_id, self._reader.snapshot()) if task_id is not None else None
        if task is None:
            if task_id is not None:
                logger.info("Timer bind: task %s not found; going idle", task_id)
            self._bound_estimate = None
            self._state = TimerState()
            return self._state

        self._bound_estimate = task.time_estimate
        self._state = TimerState(
            remaining=Countdown.from_estimate(task.time_estimate),
            is_active=False,
            bound_task_id=task.id,
        )
        logger.debug("Timer bound task=%s remaining=%s", task.id, self._state.remaining)
        return self._state

    def start(self) -> TimerState:
        s = self._state
        if s.bound_task_id is None or s.is_active or s.remaining.is_zero:
            return s

        self._state = TimerState(remaining=s.remaining, is_active=True, bound_task_id=s.bound_task_id)
        self._schedule_tick()
        logger.debug("Timer started task=%s remaining=%s", s.bound_task_id, s.remaining)
        return self._state

    def pause(self) -> TimerState:
        self._cancel_tick()
        s = self._state
        if s.is_active:
            self._state = TimerState(remaining=s.remaining, is_active=False, bound_task_id=s.bound_task_id)
            logger.debug("Timer paused task=%s remaining=%s", s.bound_task_id, s.remaining)
        return self._state

    def toggle(self) -> TimerState:
        return self.pause() if self._state.is_active else self.start()

    def reset(self) -> TimerState:
        """Re-read the bound task's live estimate and pause."""
        if self._state.bound_task_id is None:
            return self._state
        return self.bind_task(self._state.bound_task_id)

    def tick(self) -> TimerState:
        s = self._state
        if not s.is_active:
            return s

        if s.remaining.is_zero:
            self._stop_at_zero()
            return self._state

        remaining = s.remaining.decremented()
        self._state = TimerState(remaining=remaining, is_active=True, bound_task_id=s.bound_task_id)
        if remaining.is_zero:
            self._stop_at_zero()
        return self._state

    def sync(self, board: Board | None = None) -> TimerState:
        """
        Re-align with the board after a change.

        - bound task gone -> Idle
        - bound task's estimate changed -> rebind (reset + pause)
        - anything else leaves the countdown alone
        """
        task_id = self._state.bound_task_id
        if task_id is None:
            return self._state

        board = board if board is not None else self._reader.snapshot()
        task = self._lookup(task_id, board)
        if task is None:
            logger.info("Timer: bound task %s no longer exists; going idle", task_id)
            return self.bind_task(None)

        if task.time_estimate != self._bound_estimate:
            logger.info("Timer: estimate of task %s changed; resetting", task_id)
            return self.bind_task(task_id)
        return self._state

    def shutdown(self) -> None:
        self.pause()
        if self._detach is not None:
            self._detach()
            self._detach = None

    # ---- internals ----

    @staticmethod
    def _lookup(task_id: str | None, board: Board) -> Task | None:
        return board.find_task(task_id)

    def _stop_at_zero(self) -> None:
        self._cancel_tick()
        s = self._state
        self._state = TimerState(remaining=s.remaining, is_active=False, bound_task_id=s.bound_task_id)
        logger.info("Timer finished task=%s", s.bound_task_id)

    def _scheduled_tick(self, generation: int) -> None:
        if generation != self._generation:
            return
        self.tick()

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        if self._scheduler is None:
            return
        self._handle = self._scheduler.schedule_repeating(
            self._interval_seconds,
            partial(self._scheduled_tick, self._generation),
        )

    def _cancel_tick(self) -> None:
        self._generation += 1
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

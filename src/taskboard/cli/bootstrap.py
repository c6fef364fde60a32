# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires BoardStore, TimerEngine and the tick scheduler into AppState.
"""

from __future__ import annotations

import asyncio
import logging
import threading

from ..board.board_store import BoardStore
from ..board.demo_data import demo_board, empty_board
from ..config import get_settings
from ..core.ports import TickScheduler
from ..core.state import AppState
from ..timer.tick_scheduler import AsyncioTickScheduler
from ..timer.timer_engine import TimerEngine

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    scheduler: TickScheduler | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings and the scheduler injectable makes the app easy to test
    (no background thread needed). If settings is None, falls back to get_settings().
    With loop and no scheduler, ticks run on that event loop under the state lock.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    lock = threading.RLock()
    if scheduler is None and loop is not None:
        scheduler = AsyncioTickScheduler(loop, lock=lock)

    board = demo_board() if settings.seed_demo else empty_board()
    store = BoardStore(board)

    timer = TimerEngine(
        store,
        scheduler=scheduler,
        interval_seconds=settings.tick_interval_seconds,
    )
    timer.attach(store)

    logger.debug("AppState created seed_demo=%s", settings.seed_demo)
    return AppState(settings=settings, store=store, timer=timer, lock=lock)

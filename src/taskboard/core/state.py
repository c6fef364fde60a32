# src/taskboard/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..board.board_store import BoardStore
from ..timer.timer_engine import TimerEngine


@dataclass
class AppState:
    # Settings object (Settings or a SimpleNamespace in tests).
    settings: Any

    store: BoardStore
    timer: TimerEngine

    # Console commands and timer ticks serialize on this lock.
    lock: threading.RLock = field(default_factory=threading.RLock)

    @property
    def selected_task_id(self) -> str | None:
        return self.timer.bound_task_id

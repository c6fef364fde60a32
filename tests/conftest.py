# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.board.board_models import Board, BoardList
from taskboard.cli.bootstrap import create_initial_state
from taskboard.core.state import AppState

from .fakes import FakeTickScheduler


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        console_enabled=False,
        confirm_delete=True,
        seed_demo=True,
        tick_interval_seconds=1.0,
    )


@pytest.fixture()
def scheduler() -> FakeTickScheduler:
    return FakeTickScheduler()


@pytest.fixture()
def state(settings: SimpleNamespace, scheduler: FakeTickScheduler) -> AppState:
    """AppState on the demo board with a manual tick scheduler."""
    return create_initial_state(settings=settings, scheduler=scheduler)


@pytest.fixture()
def ab_board() -> Board:
    """Two empty lists A and B."""
    return Board(lists=(BoardList(id="A", title="A"), BoardList(id="B", title="B")))


# tests/test_bootstrap.py

from __future__ import annotations

from taskboard.board.demo_data import empty_board
from taskboard.cli.bootstrap import create_initial_state
from taskboard.cli.commands import render_board


def test_empty_board_has_three_columns_without_tasks() -> None:
    board = empty_board()

    assert board.list_ids() == ["backlog", "thisWeek", "today"]
    assert board.all_tasks() == []


def test_seed_demo_off_starts_with_empty_board(settings, scheduler) -> None:
    settings.seed_demo = False

    state = create_initial_state(settings=settings, scheduler=scheduler)

    assert settings.data_dir.is_dir()
    assert state.store.board == empty_board()
    assert state.store.get_list_stats("today").total == 0
    assert "(empty)" in render_board(state)


def test_seed_demo_on_loads_demo_tasks(state) -> None:
    assert state.store.find_task("1") is not None
    assert state.timer.bound_task_id is None


def test_timer_follows_store_after_bootstrap(settings, scheduler) -> None:
    settings.seed_demo = False
    state = create_initial_state(settings=settings, scheduler=scheduler)

    task = state.store.create_task("today", "Write notes")
    state.timer.bind_task(task.id)
    state.store.delete_task(task.id)

    assert state.timer.bound_task_id is None

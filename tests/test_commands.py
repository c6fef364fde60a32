# tests/test_commands.py

from __future__ import annotations

from taskboard.board.time_values import Countdown, TimeEstimate
from taskboard.cli.commands import CommandRegistry, registry


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=lambda _: None) == "h3"
    assert called == {"h2": 1, "h3": 1}


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_board_shows_lists_with_stats(state) -> None:
    out = registry.handle(state, "/board") or ""
    assert "Backlog [backlog]: 2 tasks • 5h 30min" in out
    assert "Today [today]: 1 task • 45min" in out
    assert "Design new landing page" in out


def test_add_edit_move_done_flow(state) -> None:
    out = registry.handle(state, "/add today 1 90 Write release notes") or ""
    assert out.startswith("Created task ")
    task_id = out.split()[2]

    task = state.store.find_task(task_id)
    assert task.title == "Write release notes"
    assert task.time_estimate == TimeEstimate(2, 30)

    assert "Updated" in (registry.handle(state, f"/edit {task_id} minutes 15") or "")
    assert state.store.find_task(task_id).time_estimate == TimeEstimate(2, 15)

    registry.handle(state, f"/move {task_id} backlog")
    assert state.store.board.list_containing(task_id).id == "backlog"
    assert state.store.find_task(task_id).status == "backlog"

    registry.handle(state, f"/done {task_id}")
    assert state.store.find_task(task_id).status == "done"
    assert state.store.board.list_containing(task_id).id == "backlog"


def test_add_to_unknown_list_reports_error(state) -> None:
    out = registry.handle(state, "/add nowhere 1 0 Title") or ""
    assert "not found" in out


def test_delete_requires_confirmation(state) -> None:
    emitted: list[str] = []

    out = registry.handle(state, "/delete 2", emit=emitted.append)
    assert out == "Deletion not confirmed."
    assert state.store.find_task("2") is not None
    assert emitted and "/delete 2 yes" in emitted[0]

    assert registry.handle(state, "/delete 2 yes") == "Deleted task 2."
    assert state.store.find_task("2") is None


def test_delete_without_confirmation_setting(state) -> None:
    state.settings.confirm_delete = False
    assert registry.handle(state, "/rm 1") == "Deleted task 1."


def test_timer_commands_drive_engine(state, scheduler) -> None:
    assert "No task selected" in (registry.handle(state, "/start") or "")

    out = registry.handle(state, "/select 4") or ""
    assert "00:45:00" in out and "Update dependencies" in out

    registry.handle(state, "/start")
    scheduler.fire(5)
    assert state.timer.remaining == Countdown(0, 44, 55)
    assert "(running)" in (registry.handle(state, "/timer") or "")

    registry.handle(state, "/pause")
    scheduler.fire(5)
    assert state.timer.remaining == Countdown(0, 44, 55)

    registry.handle(state, "/reset")
    assert state.timer.remaining == Countdown(0, 45, 0)

    out = registry.handle(state, "/select none") or ""
    assert "(idle)" in out


def test_editing_selected_estimate_resets_timer(state, scheduler) -> None:
    registry.handle(state, "/select 3")
    registry.handle(state, "/toggle")
    scheduler.fire(2)

    registry.handle(state, "/edit 3 hours 1")

    assert state.timer.remaining == Countdown(1, 0, 0)
    assert state.timer.is_active is False


def test_deleting_selected_task_idles_timer(state) -> None:
    registry.handle(state, "/select 1")
    registry.handle(state, "/delete 1 yes")
    assert state.timer.bound_task_id is None
    assert "(idle)" in (registry.handle(state, "/t") or "")

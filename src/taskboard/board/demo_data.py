# src/taskboard/board/demo_data.py

from __future__ import annotations

from .board_models import Board, BoardList, Task
from .time_values import TimeEstimate


def _task(task_id: str, title: str, description: str, hours: int, minutes: int, status: str, attachments=()) -> Task:
    return Task(
        id=task_id,
        title=title,
        description=description,
        time_estimate=TimeEstimate.of(hours, minutes),
        status=status,
        notes="",
        attachments=tuple(attachments),
    )


def demo_board() -> Board:
    """Starter board: Backlog / This Week / Today with four sample tasks."""
    return Board(
        lists=(
            BoardList(
                id="backlog",
                title="Backlog",
                tasks=(
                    _task(
                        "1",
                        "Design new landing page",
                        "Create wireframes and mockups for the homepage redesign",
                        4,
                        30,
                        "backlog",
                        attachments=(1, 2),
                    ),
                    _task(
                        "2",
                        "Fix navigation bug",
                        "Mobile menu not closing on item selection",
                        1,
                        0,
                        "backlog",
                    ),
                ),
            ),
            BoardList(
                id="thisWeek",
                title="This Week",
                tasks=(
                    _task(
                        "3",
                        "Write documentation",
                        "Document the new API endpoints",
                        2,
                        0,
                        "thisWeek",
                        attachments=(1,),
                    ),
                ),
            ),
            BoardList(
                id="today",
                title="Today",
                tasks=(
                    _task(
                        "4",
                        "Update dependencies",
                        "Update all npm packages to latest versions",
                        0,
                        45,
                        "today",
                    ),
                ),
            ),
        )
    )


def empty_board() -> Board:
    """Same three columns, no tasks."""
    return Board(
        lists=(
            BoardList(id="backlog", title="Backlog"),
            BoardList(id="thisWeek", title="This Week"),
            BoardList(id="today", title="Today"),
        )
    )

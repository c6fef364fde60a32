# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Loggers that fire from the timer thread while the REPL owns the terminal.
TIMER_THREAD_LOGGERS = ("taskboard.timer.tick_scheduler",)


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the board REPL readable: taskboard records pass, timer-thread records only
    from WARNING up, everything else only from ERROR up.
    """

    def __init__(self, quiet_prefixes: tuple[str, ...] = TIMER_THREAD_LOGGERS) -> None:
        super().__init__()
        self._quiet = quiet_prefixes

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not name.startswith("taskboard."):
            return record.levelno >= logging.ERROR
        if name.startswith(self._quiet):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send filtered records to stderr and everything from file_level up to
    <log_dir>/taskboard.log. Replaces existing root handlers, so calling it twice
    does not duplicate output. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskboard.log"

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    return log_file

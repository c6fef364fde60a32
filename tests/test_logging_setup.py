# tests/test_logging_setup.py

from __future__ import annotations

import logging

from taskboard.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_hides_noise() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("taskboard.board.board_store", logging.DEBUG))
    assert not f.filter(_record("taskboard.timer.tick_scheduler", logging.INFO))
    assert f.filter(_record("taskboard.timer.tick_scheduler", logging.WARNING))
    assert not f.filter(_record("asyncio", logging.WARNING))
    assert f.filter(_record("asyncio", logging.ERROR))


def test_console_filter_accepts_custom_quiet_loggers() -> None:
    f = _ConsoleNoiseFilter(quiet_prefixes=("taskboard.board",))

    assert not f.filter(_record("taskboard.board.board_store", logging.INFO))
    assert f.filter(_record("taskboard.timer.tick_scheduler", logging.DEBUG))


def test_setup_logging_writes_file_and_replaces_handlers(tmp_path) -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(log_dir=tmp_path / "logs")
        setup_logging(log_dir=tmp_path / "logs")

        assert log_file == tmp_path / "logs" / "taskboard.log"
        assert len(root.handlers) == 2

        logging.getLogger("taskboard.test").debug("hello board")
        for h in root.handlers:
            h.flush()
        assert "hello board" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)

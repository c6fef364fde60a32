# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, starts the timer event loop in a background thread,
builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..timer.tick_scheduler import TimerBackgroundRunner, start_timer_loop_in_background

logger = logging.getLogger(__name__)


def _shutdown(state: AppState | None, runner: TimerBackgroundRunner | None) -> None:
    """Cancel the pending tick first, then tear the loop down."""
    if state is not None:
        with state.lock:
            state.timer.shutdown()

    if runner is not None:
        runner.stop()
        runner.join(timeout=5.0)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    runner = start_timer_loop_in_background()
    if runner is None:
        logger.warning("Timer loop unavailable; the countdown will not advance.")

    state = create_initial_state(settings=settings, loop=runner.loop if runner else None)

    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError):
        # Not available on every platform / outside the main thread.
        logger.debug("SIGTERM handler not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled. Nothing to drive the board; press Ctrl+C to stop.")
            try:
                stop_main.wait()
            except KeyboardInterrupt:
                pass
    finally:
        _shutdown(state, runner)
        logger.info("Bye.")


if __name__ == "__main__":
    main()

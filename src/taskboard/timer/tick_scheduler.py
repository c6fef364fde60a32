# src/taskboard/timer/tick_scheduler.py

from __future__ import annotations

"""
asyncio realization of the TickScheduler port.

- run_tick_loop: sleep, call, repeat; cancel the coroutine/task to stop it.
- AsyncioTickScheduler: runs one run_tick_loop per schedule on a given event loop,
  from the loop's own thread or from any other thread.
- start_timer_loop_in_background: a dedicated event loop in a daemon thread, so the
  blocking console REPL (input()) and the ticking clock can run side by side.
"""

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future
from contextlib import AbstractContextManager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


async def run_tick_loop(
        callback: Callable[[], None],
        *,
        interval_seconds: float = 1.0,
        lock: AbstractContextManager | None = None,
) -> None:
    """
    Call callback every interval_seconds.

    The callback runs under lock when one is given (shared with the console, so a tick
    never interleaves with a board/timer command). Callback failures are logged and
    the loop keeps going. To stop the loop, cancel the coroutine/task.
    """
    sleep_s = max(0.001, float(interval_seconds))

    while True:
        await asyncio.sleep(sleep_s)
        try:
            if lock is not None:
                with lock:
                    callback()
            else:
                callback()
        except Exception:
            logger.exception("tick callback failed")


class _TaskHandle:
    def __init__(self, fut: asyncio.Future | Future) -> None:
        self._fut = fut

    def cancel(self) -> None:
        self._fut.cancel()


class AsyncioTickScheduler:
    def __init__(self, loop: asyncio.AbstractEventLoop, *, lock: AbstractContextManager | None = None) -> None:
        self._loop = loop
        self._lock = lock

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> _TaskHandle:
        coro = run_tick_loop(callback, interval_seconds=interval_seconds, lock=self._lock)

        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            return _TaskHandle(self._loop.create_task(coro))

        # Called from another thread (console REPL): hand the coroutine to the loop thread.
        # Cancelling the concurrent future cancels the loop-side task thread-safely.
        return _TaskHandle(asyncio.run_coroutine_threadsafe(coro, self._loop))


@dataclass(slots=True)
class TimerBackgroundRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            logger.debug("Timer loop already closed.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


async def _serve_until_stopped(stop_event: asyncio.Event) -> None:
    await stop_event.wait()

    # Cancel whatever tick loops are still scheduled on this loop.
    current = asyncio.current_task()
    pending = [t for t in asyncio.all_tasks() if t is not current]
    for t in pending:
        t.cancel()
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)


def start_timer_loop_in_background() -> TimerBackgroundRunner | None:
    """Start an event loop in a daemon thread and return a handle to it."""
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_serve_until_stopped(stop_event))
        finally:
            with contextlib.suppress(Exception):
                loop.stop()
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="taskboard-timer", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Timer thread did not initialize properly.")
        return None

    logger.info("Timer background loop started.")
    return TimerBackgroundRunner(thread=t, loop=loop, stop_event=stop_event)

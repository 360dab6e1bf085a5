# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Fire-and-forget scheduling for asynchronous log operations.

Inside a running event loop, log coroutines are scheduled as tasks on that
loop. Synchronous callers have no loop to schedule on, so their coroutines are
handed to a single daemon thread that runs its own event loop. Either way the
caller returns immediately and failures are logged, never raised.
"""

import asyncio
import atexit
import concurrent.futures
import inspect
import logging
import threading
import time
from collections.abc import Awaitable, Coroutine
from typing import Any

logger = logging.getLogger(__name__)

# Upper bound on how long interpreter shutdown waits for queued publishes
EXIT_FLUSH_TIMEOUT = 5.0

# Strong references so pending tasks are not garbage collected
_pending_tasks: set[asyncio.Task] = set()
_pending_futures: set[concurrent.futures.Future] = set()
_futures_lock = threading.Lock()

_worker_lock = threading.Lock()
_worker_loop: asyncio.AbstractEventLoop | None = None


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def _on_task_done(task: asyncio.Task) -> None:
    _pending_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Background log operation failed: %s", exc)


def _on_future_done(future: concurrent.futures.Future) -> None:
    with _futures_lock:
        _pending_futures.discard(future)
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.error("Background log operation failed: %s", exc)


def _background_loop() -> asyncio.AbstractEventLoop:
    """Return the worker event loop, starting its daemon thread on first use."""
    global _worker_loop
    with _worker_lock:
        if _worker_loop is None:
            loop = asyncio.new_event_loop()
            thread = threading.Thread(
                target=loop.run_forever,
                name="contextlog-background",
                daemon=True,
            )
            thread.start()
            atexit.register(flush_background, EXIT_FLUSH_TIMEOUT)
            _worker_loop = loop
            logger.debug("Started background log thread %s", thread.name)
        return _worker_loop


def run_in_background(awaitable: Awaitable[Any]) -> asyncio.Task | concurrent.futures.Future:
    """Run an awaitable without making the caller wait for it.

    Args:
        awaitable: Coroutine or other awaitable to run

    Returns:
        The scheduled task when called inside a running event loop, otherwise
        the future of the coroutine submitted to the background thread
    """
    coro: Coroutine[Any, Any, Any] = (
        awaitable if inspect.iscoroutine(awaitable) else _await(awaitable)
    )

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    if loop is None:
        future = asyncio.run_coroutine_threadsafe(coro, _background_loop())
        with _futures_lock:
            _pending_futures.add(future)
        future.add_done_callback(_on_future_done)
        return future

    task = loop.create_task(coro)
    _pending_tasks.add(task)
    task.add_done_callback(_on_task_done)
    return task


def pending_count() -> int:
    """Number of scheduled log operations that have not finished."""
    with _futures_lock:
        return len(_pending_tasks) + len(_pending_futures)


def _undone_futures() -> list[concurrent.futures.Future]:
    with _futures_lock:
        return [f for f in _pending_futures if not f.done()]


def flush_background(timeout: float | None = None) -> bool:
    """Block until log operations submitted by synchronous callers have finished.

    Must not be called from inside a running event loop; use
    :func:`flush_pending` there.

    Args:
        timeout: Seconds to wait at most, or None to wait indefinitely

    Returns:
        True if nothing is left pending, False if the timeout expired first
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        futures = _undone_futures()
        if not futures:
            return True
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        _, not_done = concurrent.futures.wait(futures, timeout=remaining)
        if not_done and deadline is not None and time.monotonic() >= deadline:
            return False


async def flush_pending() -> None:
    """Wait until every scheduled log operation has finished.

    Covers tasks scheduled on the running loop and coroutines submitted to
    the background thread.
    """
    loop = asyncio.get_running_loop()
    while True:
        tasks = [t for t in _pending_tasks if t.get_loop() is loop and not t.done()]
        futures = [asyncio.wrap_future(f) for f in _undone_futures()]
        if not tasks and not futures:
            return
        await asyncio.gather(*tasks, *futures, return_exceptions=True)

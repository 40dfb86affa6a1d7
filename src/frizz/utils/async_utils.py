"""Run a command's coroutine to completion from synchronous CLI code."""

from __future__ import annotations

import asyncio
import signal
import sys
import threading
from collections.abc import Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")

_STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def _can_trap_signals() -> bool:
    return sys.platform != "win32" and threading.current_thread() is threading.main_thread()


def _drain_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Cancel leftover tasks, close async generators and the file-read executor."""
    pending = asyncio.all_tasks(loop)
    for task in pending:
        task.cancel()
    if pending:
        loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
    for finalizer in (loop.shutdown_asyncgens, loop.shutdown_default_executor):
        try:
            loop.run_until_complete(finalizer())
        except RuntimeError:
            pass


def _run_in_fresh_loop(coro: Coroutine[Any, Any, T]) -> T:
    """Run ``coro`` on a private loop; SIGINT/SIGTERM cancel it and surface as KeyboardInterrupt."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    main = loop.create_task(coro)
    stopped = False

    def stop() -> None:
        nonlocal stopped
        stopped = True
        main.cancel()

    trapped = []
    if _can_trap_signals():
        for sig in _STOP_SIGNALS:
            loop.add_signal_handler(sig, stop)
            trapped.append(sig)

    try:
        return loop.run_until_complete(main)
    except asyncio.CancelledError:
        if stopped:
            raise KeyboardInterrupt from None
        raise
    finally:
        for sig in trapped:
            loop.remove_signal_handler(sig)
        try:
            _drain_loop(loop)
        finally:
            asyncio.set_event_loop(None)
            loop.close()


def safe_async_run(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run an async coroutine with proper loop cleanup.

    When a loop is already running in this thread (pytest-asyncio, an
    embedding application) the coroutine gets its own loop on a worker
    thread and this call blocks until it finishes.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return _run_in_fresh_loop(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="frizz-loop") as pool:
        return pool.submit(_run_in_fresh_loop, coro).result()

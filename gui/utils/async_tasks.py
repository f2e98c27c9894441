"""Async helpers.

Tk owns the main thread, so controller coroutines run on an asyncio loop
hosted in a single daemon thread. Results come back to Tk through
`widget.after(0, ...)`, never by touching widgets from the loop thread.
"""

from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Optional

from gui.utils.logging import logger


class AsyncRunner:
    """One background event loop shared by every controller call."""

    def __init__(self) -> None:
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._thread: Optional[threading.Thread] = None
        self._ready = threading.Event()

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._ready.clear()
        self._thread = threading.Thread(target=self._run, name="artic-async", daemon=True)
        self._thread.start()
        self._ready.wait()

    def _run(self) -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        self._loop = loop
        self._ready.set()
        try:
            loop.run_forever()
        finally:
            loop.close()

    def submit(self, coro: Awaitable[Any], callback: Optional[Callable[[Any], None]] = None) -> Future:
        """Schedule `coro` on the loop. `callback` gets the result on success."""
        if self._loop is None or not self.running:
            raise RuntimeError("AsyncRunner.start() must be called first")
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)

        def done(fut: Future) -> None:
            if fut.cancelled():
                return
            exc = fut.exception()
            if exc is not None:
                logger.error("Background task failed: %s", exc, exc_info=exc)
                return
            if callback is not None:
                callback(fut.result())

        future.add_done_callback(done)
        return future

    def stop(self) -> None:
        if self._loop is not None and self.running:
            self._loop.call_soon_threadsafe(self._loop.stop)
            self._thread.join(timeout=2)
        self._thread = None
        self._loop = None


def run_async(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a coroutine function to completion on a fresh loop (scripts, tests)."""
    return asyncio.run(fn(*args, **kwargs))


async def as_coroutine(fn: Callable[..., Any], *args: Any) -> Any:
    """Wrap a plain call so it runs on the loop thread via AsyncRunner.submit."""
    return fn(*args)

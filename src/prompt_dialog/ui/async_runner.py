"""Background asyncio loop for network work."""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Coroutine, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DoneCallback = Callable[[Optional[Any], Optional[BaseException]], None]


class AsyncRunner:
    """Runs coroutines on a private event loop in a daemon thread."""

    def __init__(self) -> None:
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._run_loop, name="prompt-dialog-io", daemon=True)
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        logger.debug("Async runner loop started")
        self._loop.run_forever()
        logger.debug("Async runner loop stopped")

    def run(self, coro: Coroutine[Any, Any, T]) -> T:
        """Run ``coro`` on the loop and block until it finishes."""
        return asyncio.run_coroutine_threadsafe(coro, self._loop).result()

    def submit(self, coro: Coroutine[Any, Any, Any], on_done: DoneCallback) -> Future:
        """
        Schedule ``coro`` without waiting.

        ``on_done(result, error)`` is invoked from the loop thread when the
        coroutine finishes; ``error`` is None on success.
        """
        future = asyncio.run_coroutine_threadsafe(coro, self._loop)

        def _finished(done: Future) -> None:
            if done.cancelled():
                on_done(None, asyncio.CancelledError())
                return
            error = done.exception()
            if error is not None:
                on_done(None, error)
            else:
                on_done(done.result(), None)

        future.add_done_callback(_finished)
        return future

    def close(self) -> None:
        """Stop the loop and wait for the thread to exit."""
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=1.0)
        if not self._thread.is_alive():
            self._loop.close()


__all__ = ["AsyncRunner", "DoneCallback"]

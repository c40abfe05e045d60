"""Named cooperative tasks on the host's event loop.

Usage:
    runner = CoroutineRunner()
    runner.start("sweep", sweep())   # cancels any earlier "sweep" first
    runner.stop_all()                # on unload
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class CoroutineRunner:
    """Tracks at most one running asyncio task per name.

    Finished tasks forget themselves. Cancellation is synchronous from the
    caller's point of view: once stop() returns, the task will not resume
    past its current suspension point.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task[Any]] = {}

    def start(self, name: str, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
        """Schedule a coroutine under a name, replacing any running one.

        Raises:
            RuntimeError: If called outside a running event loop.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            msg = f"Cannot start coroutine {name!r} without a running event loop"
            raise RuntimeError(msg) from None

        self.stop(name)
        task = loop.create_task(coro, name=name)
        self._tasks[name] = task
        task.add_done_callback(lambda t: self._forget(name, t))
        return task

    def stop(self, name: str) -> bool:
        """Cancel the named task. Returns True if one was tracked."""
        task = self._tasks.pop(name, None)
        if task is None:
            return False
        if not task.done():
            task.cancel()
            logger.debug("Cancelled coroutine %r", name)
        return True

    def stop_all(self) -> None:
        for name in list(self._tasks):
            self.stop(name)

    def is_running(self, name: str) -> bool:
        task = self._tasks.get(name)
        return task is not None and not task.done()

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._tasks)

    def _forget(self, name: str, task: asyncio.Task[Any]) -> None:
        if self._tasks.get(name) is task:
            del self._tasks[name]
        if not task.cancelled() and task.exception() is not None:
            logger.error("Coroutine %r failed", name, exc_info=task.exception())

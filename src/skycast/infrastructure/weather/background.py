"""Repository-owned scope for refresh work that outlives its caller."""

from __future__ import annotations

import asyncio
import logging
from typing import Coroutine, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BackgroundScope:
    """Holds strong references to in-flight refresh tasks.

    Tasks launched here are not children of the coroutine that launched
    them: cancelling the consumer of a query stream leaves the remote fetch
    and its cache write running. A failing task never affects its siblings.
    """

    def __init__(self, name: str = "background"):
        self._name = name
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def launch(self, coro: Coroutine[object, object, T]) -> asyncio.Task[T]:
        if self._closed:
            coro.close()
            raise RuntimeError(f"{self._name} scope is closed")
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Unhandled error in %s task %s",
                self._name,
                task.get_name(),
                exc_info=exc,
            )

    async def join(self) -> None:
        """Wait until every task launched so far has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel remaining work and refuse new tasks (shutdown only)."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.debug("%s scope closed, %d task(s) cancelled", self._name, len(tasks))

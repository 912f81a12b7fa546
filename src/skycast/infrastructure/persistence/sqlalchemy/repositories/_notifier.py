"""In-process change notification backing the reactive cache reads."""

import asyncio


class ChangeNotifier:
    """Wakes up ``observe`` readers after a write commits.

    Readers remember the write counter they last saw and sleep until it
    moves; the counter never goes backwards so no write is missed between
    a read and the following wait.
    """

    def __init__(self) -> None:
        self._condition: asyncio.Condition | None = None
        self._version = 0

    @property
    def version(self) -> int:
        return self._version

    def _get_condition(self) -> asyncio.Condition:
        if self._condition is None:
            self._condition = asyncio.Condition()
        return self._condition

    async def notify(self) -> None:
        condition = self._get_condition()
        async with condition:
            self._version += 1
            condition.notify_all()

    async def wait_for_change(self, seen_version: int) -> int:
        """Block until a write newer than ``seen_version`` happened."""
        condition = self._get_condition()
        async with condition:
            await condition.wait_for(lambda: self._version > seen_version)
            return self._version

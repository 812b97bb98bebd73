"""Scheduler backed by the running asyncio event loop.

Callbacks run on the loop thread, one at a time, so store mutations never
interleave.  ``drain()`` lets a short-lived process wait until every
scheduled transition has fired.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from ordersim.domain.service.lifecycle_simulator import Scheduler


class AsyncioScheduler(Scheduler):

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop or asyncio.get_running_loop()
        self._pending = 0
        self._idle = asyncio.Event()
        self._idle.set()

    @property
    def pending(self) -> int:
        return self._pending

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        self._pending += 1
        self._idle.clear()
        self._loop.call_later(delay, self._run, callback)

    async def drain(self) -> None:
        """Return once no scheduled callback is outstanding."""
        await self._idle.wait()

    def _run(self, callback: Callable[[], None]) -> None:
        try:
            callback()
        finally:
            self._pending -= 1
            if self._pending == 0:
                self._idle.set()

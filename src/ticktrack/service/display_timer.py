# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class DisplayTimer:
    """
    Periodic clock source for display refreshes.

    While active, calls `on_tick` roughly every `interval` seconds. Ticks
    that were missed because the loop was busy are coalesced into one.
    Holds no entry data.
    """

    def __init__(self, on_tick: Callable[[], None], interval: float = 1.0) -> None:
        self.on_tick = on_tick
        self.interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        # Only one periodic task may be active
        self.stop()
        self._task = asyncio.create_task(self._run())
        logger.debug("display timer started (interval=%ss)", self.interval)

    def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.debug("display timer stopped")

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time() + self.interval
        while True:
            await asyncio.sleep(max(0.0, next_tick - loop.time()))
            self.on_tick()
            next_tick += self.interval
            now = loop.time()
            if next_tick <= now:
                next_tick = now + self.interval

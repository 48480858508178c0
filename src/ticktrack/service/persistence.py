# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Any, Callable, Coroutine, Protocol

from ticktrack.errors import PersistenceError
from ticktrack.model.action import Action
from ticktrack.model.entry import Entry
from ticktrack.template import action as actions

logger = logging.getLogger(__name__)


class PersistencePort(Protocol):
    def load(self) -> list[Entry]: ...

    def save(self, entries: list[Entry]) -> None: ...


class PersistenceCoordinator:
    """
    Runs load and save against the persistence port off the state loop.

    Results come back through `dispatch` as load_entries_result and
    save_entries_result actions. Failures are logged and reported as
    results, never raised. Delayed dispatches are keyed: scheduling a key
    again cancels the pending one, and a generation counter per key keeps a
    superseded task from firing even if it already woke up.
    """

    def __init__(self, port: PersistencePort, dispatch: Callable[[Action], None]) -> None:
        self.port = port
        self.dispatch = dispatch
        self._save_lock = asyncio.Lock()
        self._tasks: set[asyncio.Task[None]] = set()
        self._debounced: dict[str, tuple[asyncio.Task[None], Action]] = {}
        self._generations: dict[str, int] = {}

    def load(self) -> None:
        self.__spawn(self._load())

    def save(self, entries: list[Entry]) -> None:
        self.__spawn(self._save(entries))

    def debounce(self, key: str, delay: float, action: Action) -> None:
        self.cancel_debounce(key)
        generation = self._generations[key]
        task = asyncio.create_task(self._fire_later(key, generation, delay, action))
        self._debounced[key] = (task, action)

    def cancel_debounce(self, key: str) -> None:
        self._generations[key] = self._generations.get(key, 0) + 1
        pending = self._debounced.pop(key, None)
        if pending is not None:
            pending[0].cancel()

    def has_pending_debounce(self, key: str) -> bool:
        return key in self._debounced

    def flush_debounced(self) -> None:
        """Dispatch every pending delayed action now instead of later."""
        for key in list(self._debounced):
            action = self._debounced[key][1]
            self.cancel_debounce(key)
            self.dispatch(action)

    def cancel_all(self) -> None:
        for key in list(self._debounced):
            self.cancel_debounce(key)

    @property
    def is_idle(self) -> bool:
        return not self._tasks

    async def wait_idle(self) -> None:
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def _load(self) -> None:
        try:
            entries = await asyncio.to_thread(self.port.load)
        except (PersistenceError, OSError) as e:
            logger.warning("Failed to load entries: %s", e)
            self.dispatch(actions.load_entries_result([], str(e)))
            return
        logger.info("Loaded %s entries", len(entries))
        self.dispatch(actions.load_entries_result(entries))

    async def _save(self, entries: list[Entry]) -> None:
        # Saves run one at a time in the order they were requested
        async with self._save_lock:
            try:
                await asyncio.to_thread(self.port.save, entries)
            except (PersistenceError, OSError) as e:
                logger.warning("Failed to save entries: %s", e)
                self.dispatch(actions.save_entries_result(str(e)))
                return
        logger.debug("Saved %s entries", len(entries))
        self.dispatch(actions.save_entries_result())

    async def _fire_later(
        self, key: str, generation: int, delay: float, action: Action
    ) -> None:
        await asyncio.sleep(delay)
        if self._generations.get(key) != generation:
            return
        self._debounced.pop(key, None)
        self.dispatch(action)

    def __spawn(self, coroutine: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coroutine)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

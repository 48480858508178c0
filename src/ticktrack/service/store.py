# SPDX-License-Identifier: MIT

import asyncio
import logging
from collections import deque
from typing import Any, Awaitable, Callable, Coroutine, Optional, TypeAlias, cast

from ticktrack.model.action import Action
from ticktrack.model.collection import CollectionState, Environment
from ticktrack.model.effect import (
    CancelDebounce,
    Command,
    Debounce,
    Persist,
    TrackAnalytics,
)
from ticktrack.model.entry import Entry
from ticktrack.service.analytics import log_analytics_event
from ticktrack.service.collection import reduce
from ticktrack.service.display_timer import DisplayTimer
from ticktrack.service.persistence import PersistenceCoordinator, PersistencePort
from ticktrack.template import action as actions
from ticktrack.template.collection import get_collection_template

logger = logging.getLogger(__name__)

Listener: TypeAlias = Callable[[CollectionState], None]
AnalyticsSink: TypeAlias = Callable[[str], Awaitable[None]]


class Store:
    """
    Single owner of the entry collection.

    Actions are queued by `dispatch` and applied one at a time, in order, by
    a single consumer task. Follow-up actions produced by an action are
    applied right after it, before anything dispatched later. Commands are
    handed to the display timer, the persistence coordinator or the
    analytics sink, none of which touch the state directly.
    """

    def __init__(
        self,
        port: PersistencePort,
        environment: Environment,
        display_timer_interval: float = 1.0,
        analytics: AnalyticsSink = log_analytics_event,
        state: Optional[CollectionState] = None,
    ) -> None:
        self.environment = environment
        self.state: CollectionState = (
            state if state is not None else get_collection_template()
        )
        self.analytics = analytics
        self.coordinator = PersistenceCoordinator(port, self.dispatch)
        self.display_timer = DisplayTimer(
            lambda: self.dispatch(actions.refresh_all()), display_timer_interval
        )
        self._queue: asyncio.Queue[Action] = asyncio.Queue()
        self._listeners: list[Listener] = []
        self._task: asyncio.Task[None] | None = None
        self._analytics_tasks: set[asyncio.Task[None]] = set()

    @property
    def entries(self) -> list[Entry]:
        return list(self.state["entries"].values())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def dispatch(self, action: Action) -> None:
        self._queue.put_nowait(action)

    def start(self) -> None:
        if self._task is not None:
            raise RuntimeError("Store already started")
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        """Stop the store, running pending debounced saves first."""
        self.display_timer.stop()
        try:
            if self._task is not None and not self._task.done():
                await self.flush()
        finally:
            self.coordinator.cancel_all()
            if self._task is not None:
                if not self._task.done():
                    self._task.cancel()
                    try:
                        await self._task
                    except asyncio.CancelledError:
                        pass
                self._task = None

    async def settle(self) -> None:
        """
        Wait until the queue is drained and no load or save is in flight.

        Pending debounced actions are not waited for; call `flush` to run
        them now.
        """
        while True:
            await self.__join_queue()
            await self.coordinator.wait_idle()
            if self._queue.empty() and self.coordinator.is_idle:
                break

    async def flush(self) -> None:
        self.coordinator.flush_debounced()
        await self.settle()

    async def _run(self) -> None:
        while True:
            action = await self._queue.get()
            try:
                self.process(action)
            finally:
                self._queue.task_done()

    def process(self, action: Action) -> None:
        pending: deque[Action] = deque([action])
        while pending:
            current = pending.popleft()
            logger.debug("action: %s", current["type"])
            self.state, effects = reduce(self.state, current, self.environment)

            follow_ups: list[Action] = []
            for effect in effects:
                if "type" in effect:
                    follow_ups.append(cast(Action, effect))
                else:
                    self.__execute(cast(Command, effect))
            pending.extendleft(reversed(follow_ups))

        for listener in list(self._listeners):
            listener(self.state)

    def __execute(self, command: Command) -> None:
        match command["command"]:
            case "persist":
                self.coordinator.save(cast(Persist, command)["entries"])
            case "load":
                self.coordinator.load()
            case "debounce":
                debounce = cast(Debounce, command)
                self.coordinator.debounce(
                    debounce["key"], debounce["delay"], debounce["action"]
                )
            case "cancel_debounce":
                self.coordinator.cancel_debounce(cast(CancelDebounce, command)["key"])
            case "start_display_timer":
                self.display_timer.start()
            case "stop_display_timer":
                self.display_timer.stop()
            case "track_analytics":
                self.__spawn_analytics(
                    self.__track(cast(TrackAnalytics, command)["event"])
                )

    async def __track(self, event: str) -> None:
        try:
            await self.analytics(event)
        except Exception as e:
            logger.warning("Analytics sink failed: %s", e)

    def __spawn_analytics(self, coroutine: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coroutine)
        self._analytics_tasks.add(task)
        task.add_done_callback(self._analytics_tasks.discard)

    async def __join_queue(self) -> None:
        join = asyncio.create_task(self._queue.join())
        waiters: set[asyncio.Task[Any]] = {join}
        if self._task is not None:
            waiters.add(self._task)
        await asyncio.wait(waiters, return_when=asyncio.FIRST_COMPLETED)
        if self._task is not None and self._task.done():
            join.cancel()
            # Re-raises whatever stopped the consumer
            self._task.result()

# SPDX-License-Identifier: MIT

from contextlib import asynccontextmanager
from typing import AsyncIterator

from ticktrack.repository.configuration import CONFIGURATION_REPO
from ticktrack.repository.entry import EntryRepository
from ticktrack.service.store import Store
from ticktrack.template import action as actions
from ticktrack.template.collection import get_environment


def create_store() -> Store:
    config = CONFIGURATION_REPO.get_config()
    environment = get_environment(
        description_save_debounce_seconds=config["description_save_debounce_seconds"],
    )
    return Store(
        EntryRepository(),
        environment,
        display_timer_interval=config["display_timer_interval_seconds"],
    )


@asynccontextmanager
async def open_store() -> AsyncIterator[Store]:
    """Start a store with the persisted entries loaded; save everything on exit."""
    store = create_store()
    store.start()
    try:
        store.dispatch(actions.load_entries())
        await store.settle()
        yield store
    finally:
        await store.stop()

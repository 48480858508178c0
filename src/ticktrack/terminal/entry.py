# SPDX-License-Identifier: MIT

import asyncio
from typing import Annotated, Optional

import typer
from rich.console import Group
from rich.live import Live

from ticktrack.model.action import EntryScopedAction
from ticktrack.model.collection import CollectionState
from ticktrack.model.entry import EntryStatus
from ticktrack.template import action as actions
from ticktrack.terminal.parse import resolve_entry_ref
from ticktrack.terminal.session import open_store
from ticktrack.view import entry as entry_view


def add(
    description: Annotated[Optional[str], typer.Argument()] = None,
    start: Annotated[
        bool, typer.Option("--start", "-s", help="start timing right away")
    ] = False,
) -> None:
    status: EntryStatus = "running" if start else "stopped"
    asyncio.run(__add(description, status))


async def __add(description: Optional[str], status: EntryStatus) -> None:
    async with open_store() as store:
        store.dispatch(actions.create_new(description, status))
        await store.settle()
        entry_view.entries_view(store.entries)


def start(ref: str) -> None:
    asyncio.run(__dispatch_to_entry(ref, actions.set_status("running")))


def stop(ref: str) -> None:
    asyncio.run(__dispatch_to_entry(ref, actions.set_status("stopped")))


def toggle(ref: str) -> None:
    asyncio.run(__dispatch_to_entry(ref, actions.toggle_status()))


def describe(
    ref: str,
    description: Annotated[
        Optional[str], typer.Argument(help="omit to clear the description")
    ] = None,
) -> None:
    asyncio.run(__dispatch_to_entry(ref, actions.set_description(description)))


def remove(ref: str) -> None:
    asyncio.run(__dispatch_to_entry(ref, actions.remove_entry()))


async def __dispatch_to_entry(ref: str, entry_action: EntryScopedAction) -> None:
    async with open_store() as store:
        id = resolve_entry_ref(store.entries, ref)
        store.dispatch(actions.entry(id, entry_action))
        await store.settle()
        entry_view.entries_view(store.entries)


def clear(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    if not yes:
        typer.confirm("Remove all entries?", abort=True)
    asyncio.run(__clear())


async def __clear() -> None:
    async with open_store() as store:
        store.dispatch(actions.remove_all())
        await store.settle()
        entry_view.entries_view(store.entries)


def list_entries() -> None:
    asyncio.run(__list_entries())


async def __list_entries() -> None:
    async with open_store() as store:
        entry_view.entries_view(store.entries)


def show(ref: str) -> None:
    asyncio.run(__show(ref))


async def __show(ref: str) -> None:
    async with open_store() as store:
        id = resolve_entry_ref(store.entries, ref)
        entry_view.single_entry_view(store.state["entries"][id])


def watch(
    seconds: Annotated[
        Optional[float],
        typer.Option("--seconds", help="stop after this many seconds"),
    ] = None,
) -> None:
    try:
        asyncio.run(__watch(seconds))
    except KeyboardInterrupt:
        pass


async def __watch(seconds: Optional[float]) -> None:
    async with open_store() as store:
        with Live(__render(store.state), auto_refresh=False) as live:

            def redraw(state: CollectionState) -> None:
                live.update(__render(state), refresh=True)

            unsubscribe = store.subscribe(redraw)
            store.dispatch(actions.start_display_timer())
            try:
                if seconds is None:
                    await asyncio.Event().wait()
                else:
                    await asyncio.sleep(seconds)
            finally:
                unsubscribe()
                store.dispatch(actions.stop_display_timer())
                await store.settle()


def __render(state: CollectionState) -> Group:
    return Group(
        entry_view.header("watch"),
        entry_view.entries_table(list(state["entries"].values())),
    )

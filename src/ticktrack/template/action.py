# SPDX-License-Identifier: MIT

from typing import Optional

from ticktrack.model.action import (
    CreateNew,
    EntryAction,
    EntryScopedAction,
    LoadEntries,
    LoadEntriesResult,
    RefreshAll,
    RefreshElapsed,
    Remove,
    RemoveAll,
    RemoveEntry,
    SaveEntries,
    SaveEntriesResult,
    SetDescription,
    SetStatus,
    SortEntries,
    StartDisplayTimer,
    StopDisplayTimer,
    ToggleStatus,
)
from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import Entry, EntryStatus


def toggle_status() -> ToggleStatus:
    return {"type": "toggle_status"}


def set_status(status: EntryStatus) -> SetStatus:
    return {"type": "set_status", "status": status}


def set_description(description: Optional[str]) -> SetDescription:
    return {"type": "set_description", "description": description}


def refresh_elapsed() -> RefreshElapsed:
    return {"type": "refresh_elapsed"}


def remove_entry() -> RemoveEntry:
    return {"type": "remove"}


def create_new(
    description: Optional[str] = None, status: EntryStatus = "stopped"
) -> CreateNew:
    return {"type": "create_new", "description": description, "status": status}


def remove(id: EntityId) -> Remove:
    return {"type": "remove", "id": id}


def remove_all() -> RemoveAll:
    return {"type": "remove_all"}


def start_display_timer() -> StartDisplayTimer:
    return {"type": "start_display_timer"}


def stop_display_timer() -> StopDisplayTimer:
    return {"type": "stop_display_timer"}


def refresh_all() -> RefreshAll:
    return {"type": "refresh_all"}


def sort_entries() -> SortEntries:
    return {"type": "sort_entries"}


def entry(id: EntityId, action: EntryScopedAction) -> EntryAction:
    return {"type": "entry", "id": id, "action": action}


def load_entries() -> LoadEntries:
    return {"type": "load_entries"}


def load_entries_result(
    entries: list[Entry], error: Optional[str] = None
) -> LoadEntriesResult:
    return {"type": "load_entries_result", "entries": entries, "error": error}


def save_entries() -> SaveEntries:
    return {"type": "save_entries"}


def save_entries_result(error: Optional[str] = None) -> SaveEntriesResult:
    return {"type": "save_entries_result", "error": error}

# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypeAlias, TypedDict

from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import Entry, EntryStatus

# Entry-scoped actions, dispatched through EntryAction


class ToggleStatus(TypedDict):
    type: Literal["toggle_status"]


class SetStatus(TypedDict):
    type: Literal["set_status"]
    status: EntryStatus


class SetDescription(TypedDict):
    type: Literal["set_description"]
    description: Optional[str]


class RefreshElapsed(TypedDict):
    type: Literal["refresh_elapsed"]


class RemoveEntry(TypedDict):
    type: Literal["remove"]


EntryScopedAction: TypeAlias = (
    ToggleStatus | SetStatus | SetDescription | RefreshElapsed | RemoveEntry
)


# Collection actions


class CreateNew(TypedDict):
    type: Literal["create_new"]
    description: Optional[str]
    status: EntryStatus


class Remove(TypedDict):
    type: Literal["remove"]
    id: EntityId


class RemoveAll(TypedDict):
    type: Literal["remove_all"]


class StartDisplayTimer(TypedDict):
    type: Literal["start_display_timer"]


class StopDisplayTimer(TypedDict):
    type: Literal["stop_display_timer"]


class RefreshAll(TypedDict):
    type: Literal["refresh_all"]


class SortEntries(TypedDict):
    type: Literal["sort_entries"]


class EntryAction(TypedDict):
    type: Literal["entry"]
    id: EntityId
    action: EntryScopedAction


class LoadEntries(TypedDict):
    type: Literal["load_entries"]


class LoadEntriesResult(TypedDict):
    type: Literal["load_entries_result"]
    entries: list[Entry]
    error: Optional[str]


class SaveEntries(TypedDict):
    type: Literal["save_entries"]


class SaveEntriesResult(TypedDict):
    type: Literal["save_entries_result"]
    error: Optional[str]


Action: TypeAlias = (
    CreateNew
    | Remove
    | RemoveAll
    | StartDisplayTimer
    | StopDisplayTimer
    | RefreshAll
    | SortEntries
    | EntryAction
    | LoadEntries
    | LoadEntriesResult
    | SaveEntries
    | SaveEntriesResult
)

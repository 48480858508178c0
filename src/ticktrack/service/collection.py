# SPDX-License-Identifier: MIT

"""
Collection of time entries.

Each operation takes the current state and returns the next state with the
list of effects the driver must run afterwards: follow-up actions (which
carry a "type" key) and commands (which carry a "command" key). State is
never mutated in place and no I/O happens here.
"""

import logging
from copy import deepcopy
from typing import Optional, TypeAlias, cast

from ticktrack.errors import DuplicateEntryIdError
from ticktrack.model.action import (
    Action,
    CreateNew,
    EntryAction,
    EntryScopedAction,
    LoadEntriesResult,
    Remove,
)
from ticktrack.model.collection import CollectionState, Environment
from ticktrack.model.effect import Effect
from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import Entry, EntryStatus
from ticktrack.service import entry as entry_engine
from ticktrack.service.analytics import produce_analytics_event
from ticktrack.template import action as actions
from ticktrack.template import effect as effects
from ticktrack.template.entry import get_entry_template, normalize_description

logger = logging.getLogger(__name__)

Reduction: TypeAlias = tuple[CollectionState, list[Effect]]


def sort_entries(state: CollectionState) -> CollectionState:
    """Running entries first, then newest created first. Ties keep their order."""
    ordered = list(state["entries"].values())
    ordered.sort(key=lambda entry: entry["created"], reverse=True)
    ordered.sort(key=lambda entry: 0 if entry["status"] == "running" else 1)
    return {"entries": {entry["id"]: entry for entry in ordered}}


def create_new(
    state: CollectionState,
    description: Optional[str],
    status: EntryStatus,
    environment: Environment,
) -> Reduction:
    id = environment["generate_id"]()
    if id in state["entries"]:
        raise DuplicateEntryIdError(id)

    new_entry = get_entry_template(
        id=id,
        created=environment["now"](),
        status=status,
        description=description,
    )
    entries = dict(state["entries"])
    entries[id] = new_entry
    return {"entries": entries}, [actions.sort_entries(), actions.save_entries()]


def remove(state: CollectionState, id: EntityId) -> Reduction:
    if id not in state["entries"]:
        return state, []

    entries = {
        entry_id: entry for entry_id, entry in state["entries"].items() if entry_id != id
    }
    return {"entries": entries}, [actions.save_entries()]


def remove_all(state: CollectionState) -> Reduction:
    return {"entries": {}}, [actions.save_entries()]


def dispatch_to_entry(
    state: CollectionState,
    id: EntityId,
    entry_action: EntryScopedAction,
    environment: Environment,
) -> Reduction:
    current = state["entries"].get(id)
    if current is None:
        return state, []

    action_type = entry_action["type"]
    if action_type == "remove":
        return state, [actions.remove(id)]

    next_entry = entry_engine.reduce_entry(current, entry_action, environment["now"])
    if next_entry is current:
        return state, []

    entries = dict(state["entries"])
    entries[id] = next_entry
    next_state: CollectionState = {"entries": entries}

    if action_type in ("toggle_status", "set_status"):
        return next_state, [
            actions.sort_entries(),
            actions.save_entries(),
            effects.track_analytics(produce_analytics_event(next_entry)),
        ]
    if action_type == "set_description":
        return next_state, [
            __description_save(environment),
            effects.track_analytics(produce_analytics_event(next_entry)),
        ]
    # refresh_elapsed is a display refresh only
    return next_state, []


def __description_save(environment: Environment) -> Effect:
    delay = environment["description_save_debounce_seconds"]
    if delay <= 0:
        return actions.save_entries()
    return effects.debounce(effects.DESCRIPTION_SAVE_KEY, delay, actions.save_entries())


def refresh_all(state: CollectionState) -> Reduction:
    return state, [
        actions.entry(id, actions.refresh_elapsed())
        for id, entry in state["entries"].items()
        if entry["status"] == "running"
    ]


def save_entries(state: CollectionState) -> Reduction:
    # A full save supersedes any pending description save
    return state, [
        effects.cancel_debounce(effects.DESCRIPTION_SAVE_KEY),
        effects.persist(deepcopy(list(state["entries"].values()))),
    ]


def load_entries_result(state: CollectionState, loaded: list[Entry]) -> Reduction:
    entries: dict[EntityId, Entry] = {}
    for loaded_entry in loaded:
        if loaded_entry["id"] in entries:
            logger.warning("Skipping duplicate entry id on load: %s", loaded_entry["id"])
            continue
        loaded_entry = deepcopy(loaded_entry)
        loaded_entry["description"] = normalize_description(loaded_entry["description"])
        entries[loaded_entry["id"]] = loaded_entry
    return {"entries": entries}, [actions.sort_entries(), actions.refresh_all()]


def reduce(state: CollectionState, action: Action, environment: Environment) -> Reduction:
    match action["type"]:
        case "create_new":
            create_action = cast(CreateNew, action)
            return create_new(
                state,
                create_action["description"],
                create_action["status"],
                environment,
            )
        case "remove":
            return remove(state, cast(Remove, action)["id"])
        case "remove_all":
            return remove_all(state)
        case "entry":
            entry_action = cast(EntryAction, action)
            return dispatch_to_entry(
                state, entry_action["id"], entry_action["action"], environment
            )
        case "refresh_all":
            return refresh_all(state)
        case "sort_entries":
            return sort_entries(state), []
        case "start_display_timer":
            return state, [effects.start_ticker()]
        case "stop_display_timer":
            return state, [effects.stop_ticker()]
        case "load_entries":
            return state, [effects.load()]
        case "load_entries_result":
            return load_entries_result(state, cast(LoadEntriesResult, action)["entries"])
        case "save_entries":
            return save_entries(state)
        case "save_entries_result":
            # Failures are already logged by the persistence coordinator
            return state, []
    raise ValueError(f"unknown action: {action['type']}")

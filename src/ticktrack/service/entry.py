# SPDX-License-Identifier: MIT

"""
Per-entry state transitions.

Every function takes the current entry and a clock and returns the next
entry. The input entry is never mutated; a transition that changes
nothing returns the input object itself.
"""

from copy import deepcopy
from typing import Callable, Optional, TypeAlias, cast

import pendulum

from ticktrack.model.action import EntryScopedAction, SetDescription, SetStatus
from ticktrack.model.entry import Entry, EntryStatus
from ticktrack.template.entry import normalize_description
from ticktrack.time import seconds_between

Clock: TypeAlias = Callable[[], pendulum.DateTime]


def compute_elapsed(entry: Entry, now: pendulum.DateTime) -> float:
    """
    Duration of the current session at `now`.

    Falls back to the last known current session when the entry is not
    running or when `now` is not after the session start, so a skewed or
    backward clock never produces negative time.
    """
    accumulated_time = entry["accumulated_time"]
    start = accumulated_time["start"]
    if entry["status"] != "running" or start is None or not start < now:
        return accumulated_time["current_session"]
    return seconds_between(start, now)


def set_status(entry: Entry, status: EntryStatus, clock: Clock) -> Entry:
    if entry["status"] == status:
        return entry

    now = clock()
    next_entry = deepcopy(entry)
    accumulated_time = next_entry["accumulated_time"]

    if status == "running":
        accumulated_time["total"] = accumulated_time["accumulated_session"]
        accumulated_time["current_session"] = 0.0
        accumulated_time["start"] = now
    else:
        current_session = compute_elapsed(entry, now)
        accumulated_time["accumulated_session"] += current_session
        accumulated_time["total"] = accumulated_time["accumulated_session"]
        accumulated_time["current_session"] = 0.0
        accumulated_time["start"] = None

    next_entry["status"] = status
    next_entry["updated"] = now
    return next_entry


def toggle_status(entry: Entry, clock: Clock) -> Entry:
    if entry["status"] == "running":
        return set_status(entry, "stopped", clock)
    return set_status(entry, "running", clock)


def refresh_elapsed(entry: Entry, clock: Clock) -> Entry:
    # Display-only: status and updated stay untouched
    current_session = compute_elapsed(entry, clock())
    accumulated_time = entry["accumulated_time"]
    total = accumulated_time["accumulated_session"] + current_session
    if (
        current_session == accumulated_time["current_session"]
        and total == accumulated_time["total"]
    ):
        return entry

    next_entry = deepcopy(entry)
    next_entry["accumulated_time"]["current_session"] = current_session
    next_entry["accumulated_time"]["total"] = total
    return next_entry


def set_description(entry: Entry, description: Optional[str], clock: Clock) -> Entry:
    normalized = normalize_description(description)
    if normalized == entry["description"]:
        return entry

    next_entry = deepcopy(entry)
    next_entry["description"] = normalized
    next_entry["updated"] = clock()
    return next_entry


def reduce_entry(entry: Entry, action: EntryScopedAction, clock: Clock) -> Entry:
    match action["type"]:
        case "toggle_status":
            return toggle_status(entry, clock)
        case "set_status":
            return set_status(entry, cast(SetStatus, action)["status"], clock)
        case "set_description":
            return set_description(
                entry, cast(SetDescription, action)["description"], clock
            )
        case "refresh_elapsed":
            return refresh_elapsed(entry, clock)
        case "remove":
            # Removal is carried out by the collection
            return entry
    raise ValueError(f"unknown entry action: {action['type']}")

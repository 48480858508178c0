# SPDX-License-Identifier: MIT

from ticktrack.model.action import Action
from ticktrack.model.effect import (
    CancelDebounce,
    Debounce,
    Load,
    Persist,
    StartTicker,
    StopTicker,
    TrackAnalytics,
)
from ticktrack.model.entry import Entry

DESCRIPTION_SAVE_KEY = "save-description"


def persist(entries: list[Entry]) -> Persist:
    return {"command": "persist", "entries": entries}


def load() -> Load:
    return {"command": "load"}


def debounce(key: str, delay: float, action: Action) -> Debounce:
    return {"command": "debounce", "key": key, "delay": delay, "action": action}


def cancel_debounce(key: str) -> CancelDebounce:
    return {"command": "cancel_debounce", "key": key}


def start_ticker() -> StartTicker:
    return {"command": "start_display_timer"}


def stop_ticker() -> StopTicker:
    return {"command": "stop_display_timer"}


def track_analytics(event: str) -> TrackAnalytics:
    return {"command": "track_analytics", "event": event}

# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

from ticktrack.model.action import Action
from ticktrack.model.entry import Entry


class Persist(TypedDict):
    command: Literal["persist"]
    entries: list[Entry]


class Load(TypedDict):
    command: Literal["load"]


class Debounce(TypedDict):
    command: Literal["debounce"]
    key: str
    delay: float
    action: Action


class CancelDebounce(TypedDict):
    command: Literal["cancel_debounce"]
    key: str


class StartTicker(TypedDict):
    command: Literal["start_display_timer"]


class StopTicker(TypedDict):
    command: Literal["stop_display_timer"]


class TrackAnalytics(TypedDict):
    command: Literal["track_analytics"]
    event: str


Command: TypeAlias = (
    Persist | Load | Debounce | CancelDebounce | StartTicker | StopTicker | TrackAnalytics
)

# Follow-up actions carry a "type" key, commands a "command" key.
Effect: TypeAlias = Action | Command

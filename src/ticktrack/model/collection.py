# SPDX-License-Identifier: MIT

from typing import Callable, TypedDict

import pendulum

from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import Entry


class CollectionState(TypedDict):
    # Insertion order is the display order
    entries: dict[EntityId, Entry]


class Environment(TypedDict):
    now: Callable[[], pendulum.DateTime]
    generate_id: Callable[[], EntityId]
    description_save_debounce_seconds: float

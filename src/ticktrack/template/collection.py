# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum

from ticktrack.model.collection import CollectionState, Environment
from ticktrack.model.entity_id import EntityId, generate_entity_id
from ticktrack.time import now_utc


def get_collection_template() -> CollectionState:
    return {"entries": {}}


def get_environment(
    now: Optional[Callable[[], pendulum.DateTime]] = None,
    generate_id: Optional[Callable[[], EntityId]] = None,
    description_save_debounce_seconds: float = 1.0,
) -> Environment:
    return {
        "now": now if now is not None else now_utc,
        "generate_id": generate_id if generate_id is not None else generate_entity_id,
        "description_save_debounce_seconds": description_save_debounce_seconds,
    }

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from ticktrack.model.entity_id import EntityId
from ticktrack.model.entry import AccumulatedTime, Entry, EntryStatus


def normalize_description(description: Optional[str]) -> Optional[str]:
    # Empty text is the same as no description
    if description is None or description == "":
        return None
    return description


def get_accumulated_time_template(
    start: Optional[pendulum.DateTime] = None,
) -> AccumulatedTime:
    return {
        "total": 0.0,
        "accumulated_session": 0.0,
        "current_session": 0.0,
        "start": start,
    }


def get_entry_template(
    id: EntityId,
    created: pendulum.DateTime,
    status: EntryStatus = "stopped",
    description: Optional[str] = None,
) -> Entry:
    return {
        "id": id,
        "description": normalize_description(description),
        "status": status,
        "accumulated_time": get_accumulated_time_template(
            created if status == "running" else None
        ),
        "created": created,
        "updated": created,
    }

# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from ticktrack.model.entity_id import EntityId

EntryStatus = Literal["running", "stopped"]


class AccumulatedTime(TypedDict):
    total: float  # seconds shown to the user
    accumulated_session: float  # banked time of all finished sessions
    current_session: float  # 0 while stopped
    start: Optional[pendulum.DateTime]  # set iff running


class Entry(TypedDict):
    id: EntityId
    description: Optional[str]  # None means unnamed
    status: EntryStatus
    accumulated_time: AccumulatedTime
    created: pendulum.DateTime
    updated: pendulum.DateTime

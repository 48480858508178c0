# SPDX-License-Identifier: MIT

import logging

from ticktrack.model.entry import Entry

logger = logging.getLogger(__name__)


def produce_analytics_event(entry: Entry) -> str:
    return "\n".join(
        [
            f"Entity id: {entry['id']}",
            f"description: {entry['description'] or ''}",
            f"status: {entry['status']}",
        ]
    )


async def log_analytics_event(event: str) -> None:
    logger.debug("analytics event:\n%s", event)

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def seconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    return (end - start).total_seconds()


def datetime_to_epoch(datetime: pendulum.DateTime) -> float:
    return datetime.timestamp()


def datetime_from_epoch(epoch: float) -> pendulum.DateTime:
    return pendulum.from_timestamp(epoch, tz="UTC")


def datetime_from_epoch_optional(epoch: Optional[float]) -> Optional[pendulum.DateTime]:
    if epoch is None:
        return None
    return datetime_from_epoch(epoch)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def duration_to_display_str(seconds: float) -> str:
    """
    Abbreviated elapsed time with leading zero units dropped,
    e.g. "1d 2h 0m 5s", "3m 12s", "0s".
    """
    duration = pendulum.duration(seconds=max(0, int(seconds)))
    parts = [
        (duration.days, "d"),
        (duration.hours, "h"),
        (duration.minutes, "m"),
        (duration.remaining_seconds, "s"),
    ]
    while len(parts) > 1 and parts[0][0] == 0:
        parts.pop(0)
    return " ".join(f"{value}{unit}" for value, unit in parts)

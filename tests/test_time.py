"""Tests for time helpers."""

import pendulum
import pytest

from ticktrack.time import (
    datetime_from_epoch,
    datetime_from_epoch_optional,
    datetime_to_epoch,
    duration_to_display_str,
    seconds_between,
)


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0s"),
        (59.9, "59s"),
        (61, "1m 1s"),
        (3600, "1h 0m 0s"),
        (90061, "1d 1h 1m 1s"),
        (8 * 86400 + 5, "8d 0h 0m 5s"),
        (-5, "0s"),
    ],
)
def test_duration_to_display_str(seconds, expected):
    assert duration_to_display_str(seconds) == expected


def test_epoch_round_trip():
    moment = pendulum.datetime(2023, 2, 5, 12, 30, 15, tz="UTC")

    assert datetime_from_epoch(datetime_to_epoch(moment)) == moment


def test_optional_epoch_passes_none_through():
    assert datetime_from_epoch_optional(None) is None


def test_seconds_between_can_be_negative():
    start = pendulum.datetime(2023, 2, 5, tz="UTC")

    assert seconds_between(start, start.add(minutes=2)) == 120
    assert seconds_between(start.add(minutes=2), start) == -120

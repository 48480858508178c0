"""Tests for the periodic display timer."""

import asyncio

import pytest

from ticktrack.service.display_timer import DisplayTimer


class TickCounter:
    def __init__(self):
        self.ticks = 0

    def __call__(self):
        self.ticks += 1


class TestDisplayTimer:
    """Test ticking, replacement and cancellation."""

    @pytest.mark.asyncio
    async def test_ticks_while_active(self):
        counter = TickCounter()
        timer = DisplayTimer(counter, interval=0.01)

        timer.start()
        await asyncio.sleep(0.06)
        timer.stop()

        assert counter.ticks >= 2
        assert timer.is_running is False

    @pytest.mark.asyncio
    async def test_no_tick_before_first_interval(self):
        counter = TickCounter()
        timer = DisplayTimer(counter, interval=10)

        timer.start()
        await asyncio.sleep(0.01)
        timer.stop()

        assert counter.ticks == 0

    @pytest.mark.asyncio
    async def test_no_ticks_after_stop(self):
        counter = TickCounter()
        timer = DisplayTimer(counter, interval=0.01)
        timer.start()
        await asyncio.sleep(0.035)

        timer.stop()
        ticks_at_stop = counter.ticks
        await asyncio.sleep(0.05)

        assert counter.ticks == ticks_at_stop

    @pytest.mark.asyncio
    async def test_restart_replaces_running_task(self):
        counter = TickCounter()
        timer = DisplayTimer(counter, interval=0.01)
        timer.start()
        first_task = timer._task

        timer.start()
        await asyncio.sleep(0.001)

        assert first_task.done()
        assert timer._task is not first_task
        assert timer.is_running is True
        timer.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start_is_safe(self):
        timer = DisplayTimer(TickCounter())

        timer.stop()

        assert timer.is_running is False

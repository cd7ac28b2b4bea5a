"""Tests for AsyncioClock."""

import asyncio

import pytest

from api_conductor.timers import AsyncioClock


class TestAsyncioClock:
    @pytest.mark.asyncio
    async def test_callback_fires(self):
        fired = asyncio.Event()

        AsyncioClock().call_later(0.01, fired.set)

        await asyncio.wait_for(fired.wait(), timeout=1.0)

    @pytest.mark.asyncio
    async def test_cancelled_handle_does_not_fire(self):
        fired = []

        handle = AsyncioClock().call_later(0.01, lambda: fired.append(True))
        handle.cancel()
        await asyncio.sleep(0.05)

        assert fired == []

    @pytest.mark.asyncio
    async def test_negative_delay_fires_immediately(self):
        fired = asyncio.Event()

        AsyncioClock().call_later(-5, fired.set)

        await asyncio.wait_for(fired.wait(), timeout=1.0)

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            AsyncioClock().call_later(1, lambda: None)

"""Tests for AsyncioScheduler."""

import asyncio

import pytest

from parcelbot.scheduler import AsyncioScheduler


class TestAsyncioScheduler:
    """Tests for one-shot timers on the running loop."""

    @pytest.mark.asyncio
    async def test_fires_once(self):
        scheduler = AsyncioScheduler()
        calls = []

        scheduler.schedule_once(10, lambda: calls.append("fired"))
        assert scheduler.pending == 1

        await asyncio.sleep(0.05)

        assert calls == ["fired"]
        assert scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_cancel(self):
        scheduler = AsyncioScheduler()
        calls = []

        handle = scheduler.schedule_once(10, lambda: calls.append("fired"))
        assert scheduler.cancel(handle) is True
        await asyncio.sleep(0.05)

        assert calls == []
        assert scheduler.cancel(handle) is False

    @pytest.mark.asyncio
    async def test_fire_and_forget_cannot_be_cancelled(self):
        scheduler = AsyncioScheduler()
        calls = []

        handle = scheduler.schedule_once(10, lambda: calls.append("fired"), cancelable=False)
        assert scheduler.cancel(handle) is False
        await asyncio.sleep(0.05)

        assert calls == ["fired"]

    @pytest.mark.asyncio
    async def test_shutdown_drops_everything(self):
        scheduler = AsyncioScheduler()
        calls = []

        scheduler.schedule_once(10, lambda: calls.append("a"))
        scheduler.schedule_once(10, lambda: calls.append("b"), cancelable=False)
        scheduler.shutdown()
        await asyncio.sleep(0.05)

        assert calls == []
        assert scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_failing_callback_is_contained(self):
        scheduler = AsyncioScheduler()
        calls = []

        def boom():
            raise RuntimeError("sink broke")

        scheduler.schedule_once(5, boom)
        scheduler.schedule_once(10, lambda: calls.append("after"))
        await asyncio.sleep(0.05)

        assert calls == ["after"]

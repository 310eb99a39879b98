"""Pytest configuration and fixtures."""

import sys
import uuid
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from parcelbot.config import DialogueSettings  # noqa: E402
from parcelbot.scheduler import TimerCallback, TimerHandle  # noqa: E402


class FakeScheduler:
    """IScheduler driven by a virtual millisecond clock."""

    def __init__(self):
        self.now = 0
        self._seq = 0
        self._pending: dict[str, tuple[int, int, TimerHandle, TimerCallback]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def schedule_once(
        self, delay_ms: int, callback: TimerCallback, cancelable: bool = True
    ) -> TimerHandle:
        handle = TimerHandle(id=str(uuid.uuid4()), delay_ms=delay_ms, cancelable=cancelable)
        self._seq += 1
        self._pending[handle.id] = (self.now + delay_ms, self._seq, handle, callback)
        return handle

    def cancel(self, handle: TimerHandle) -> bool:
        if not handle.cancelable:
            return False
        return self._pending.pop(handle.id, None) is not None

    def shutdown(self) -> None:
        self._pending.clear()

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + ms
        while True:
            due = [
                (when, seq, handle_id)
                for handle_id, (when, seq, _, _) in self._pending.items()
                if when <= target
            ]
            if not due:
                break
            when, _, handle_id = min(due)
            _, _, _, callback = self._pending.pop(handle_id)
            self.now = when
            callback()
        self.now = target


@pytest.fixture
def settings():
    """Default timings without the typing delay."""
    return DialogueSettings(typing_delay_ms=0)


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def transcript():
    from parcelbot.transcript import Transcript

    return Transcript()


@pytest.fixture
def tracker():
    from parcelbot.tracker import Tracker

    return Tracker()


@pytest_asyncio.fixture
async def dialogue_agent(transcript, scheduler, tracker, settings):
    """Create a started DialogueAgent for testing."""
    from parcelbot.dialogue.agent import DialogueAgent

    da = DialogueAgent(
        sink=transcript,
        scheduler=scheduler,
        tracker=tracker,
        settings=settings,
    )
    await da.start()
    yield da
    await da.stop()

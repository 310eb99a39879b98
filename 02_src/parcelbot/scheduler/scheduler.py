"""One-shot timers on top of the asyncio event loop."""

import asyncio
import uuid
from dataclasses import dataclass, field
from typing import Callable, Protocol

from ..logging_config import get_logger

logger = get_logger(__name__)

TimerCallback = Callable[[], None]


@dataclass
class TimerHandle:
    """Reference to a scheduled callback."""

    id: str
    delay_ms: int
    cancelable: bool
    _loop_handle: asyncio.TimerHandle | None = field(default=None, repr=False)


class IScheduler(Protocol):
    """Deferred execution of synchronous callbacks."""

    def schedule_once(
        self, delay_ms: int, callback: TimerCallback, cancelable: bool = True
    ) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        ...

    def cancel(self, handle: TimerHandle) -> bool:
        """Cancel a pending cancelable timer. Return True if it was cancelled."""
        ...

    def shutdown(self) -> None:
        """Drop every pending timer, fire-and-forget ones included."""
        ...


class AsyncioScheduler:
    """IScheduler backed by ``loop.call_later``."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        self._loop = loop
        self._pending: dict[str, TimerHandle] = {}

    @property
    def pending(self) -> int:
        """Number of timers that have not fired yet."""
        return len(self._pending)

    def schedule_once(
        self, delay_ms: int, callback: TimerCallback, cancelable: bool = True
    ) -> TimerHandle:
        """Run ``callback`` once after ``delay_ms`` milliseconds."""
        loop = self._loop or asyncio.get_running_loop()
        handle = TimerHandle(id=str(uuid.uuid4()), delay_ms=delay_ms, cancelable=cancelable)
        handle._loop_handle = loop.call_later(
            delay_ms / 1000, self._fire, handle.id, callback
        )
        self._pending[handle.id] = handle
        return handle

    def cancel(self, handle: TimerHandle) -> bool:
        """Cancel a pending cancelable timer. Return True if it was cancelled."""
        if not handle.cancelable:
            logger.debug(f"Refusing to cancel fire-and-forget timer {handle.id}")
            return False

        pending = self._pending.pop(handle.id, None)
        if pending is None:
            return False

        if pending._loop_handle is not None:
            pending._loop_handle.cancel()
        return True

    def shutdown(self) -> None:
        """Drop every pending timer, fire-and-forget ones included."""
        for handle in self._pending.values():
            if handle._loop_handle is not None:
                handle._loop_handle.cancel()
        self._pending.clear()

    def _fire(self, handle_id: str, callback: TimerCallback) -> None:
        if self._pending.pop(handle_id, None) is None:
            return
        try:
            callback()
        except Exception as e:
            logger.error(f"Timer callback {handle_id} failed: {e}", exc_info=True)

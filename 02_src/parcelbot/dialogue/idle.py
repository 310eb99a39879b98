"""Idle reminder timer."""

from ..logging_config import get_logger
from ..scheduler import IScheduler, TimerHandle
from ..tracker import ITracker
from ..transcript import ITranscriptSink
from .replies import IDLE_REMINDER

logger = get_logger(__name__)


class IdleMonitor:
    """Posts a reminder when no turn happened for ``timeout_ms``.

    The reminder fires at most once per reset; only the next reset re-arms it.
    """

    def __init__(
        self,
        scheduler: IScheduler,
        sink: ITranscriptSink,
        timeout_ms: int,
        tracker: ITracker | None = None,
    ):
        self._scheduler = scheduler
        self._sink = sink
        self._timeout_ms = timeout_ms
        self._tracker = tracker
        self._handle: TimerHandle | None = None

    @property
    def armed(self) -> bool:
        return self._handle is not None

    def reset(self) -> None:
        """Cancel any pending reminder and start a fresh window."""
        self.cancel()
        self._handle = self._scheduler.schedule_once(self._timeout_ms, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        logger.info("Idle window elapsed, sending reminder")
        self._sink.append_turn("bot", IDLE_REMINDER)
        if self._tracker:
            self._tracker.track(
                event_type="idle_reminder_sent",
                actor="idle_monitor",
                data={"timeout_ms": self._timeout_ms},
            )

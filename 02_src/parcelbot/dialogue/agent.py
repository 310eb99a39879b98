"""DialogueAgent implementation."""

import asyncio
from functools import partial
from typing import Protocol

from ..config import DialogueSettings
from ..logging_config import bind_session, get_logger, log_context
from ..models import ScheduledMessage, SessionState, Turn
from ..scheduler import IScheduler
from ..tracker import ITracker
from ..transcript import ITranscriptSink
from .engine import transition
from .idle import IdleMonitor

logger = get_logger(__name__)


class IDialogueAgent(Protocol):
    """Owner of the conversation: session state, timers and transcript output."""

    @property
    def state(self) -> SessionState:
        """Current session state."""
        ...

    async def submit_turn(self, raw_text: str) -> list[Turn]:
        """Process one user utterance. Return the bot turns it produced."""
        ...

    async def start(self) -> None:
        """Greet the user and arm the idle timer."""
        ...

    async def stop(self) -> None:
        """Disarm the idle timer, stop accepting turns."""
        ...

    async def reset(self) -> None:
        """Start a brand new conversation."""
        ...


class DialogueAgent:
    """Runs the tracking dialogue for a single session."""

    def __init__(
        self,
        sink: ITranscriptSink,
        scheduler: IScheduler,
        tracker: ITracker,
        settings: DialogueSettings | None = None,
    ):
        self._sink = sink
        self._scheduler = scheduler
        self._tracker = tracker
        self._settings = settings or DialogueSettings()

        self._state = SessionState()
        self._idle = IdleMonitor(
            scheduler=scheduler,
            sink=sink,
            timeout_ms=self._settings.idle_timeout_ms,
            tracker=tracker,
        )
        # One turn at a time, from typing delay to last emitted message
        self._lock = asyncio.Lock()
        self._running = False
        # Bumped by reset(); turns submitted under an older value are dropped
        self._generation = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def idle_monitor(self) -> IdleMonitor:
        return self._idle

    async def start(self) -> None:
        """Greet the user and arm the idle timer."""
        logger.info("Starting DialogueAgent")
        async with self._lock:
            self._begin()

    async def stop(self) -> None:
        """Disarm the idle timer, stop accepting turns."""
        logger.info("Stopping DialogueAgent")
        self._running = False
        self._idle.cancel()

    async def reset(self) -> None:
        """Start a brand new conversation.

        Turns submitted before the reset are dropped, including one that is
        still typing. Fire-and-forget messages scheduled by the previous
        conversation still fire.
        """
        logger.info("Resetting DialogueAgent")
        self._generation += 1
        self._idle.cancel()
        async with self._lock:
            self._state = SessionState()
            self._begin()

    async def submit_turn(self, raw_text: str) -> list[Turn]:
        """Process one user utterance. Return the bot turns it produced."""
        if not self._running:
            raise RuntimeError("DialogueAgent not started")

        text = raw_text.strip()
        generation = self._generation
        async with self._lock:
            if generation != self._generation:
                logger.info("Session reset before turn started, dropping turn")
                return []

            if text:
                self._sink.append_turn("user", text)

            if self._settings.typing_delay_ms > 0:
                await asyncio.sleep(self._settings.typing_delay_ms / 1000)

            if not self._running or generation != self._generation:
                logger.info("Session stopped or reset while typing, dropping turn")
                return []

            return self._process(text)

    def _begin(self) -> None:
        # Caller holds the lock
        self._running = True
        self._process("")

    def _process(self, text: str) -> list[Turn]:
        """Run one turn through the reducer and apply its side effects."""
        previous = self._state
        self._idle.reset()

        result = transition(previous, text, self._settings)
        self._state = result.state
        bind_session(
            session=self._generation,
            session_step=result.state.step.value,
            error_count=result.state.error_count,
        )

        logger.info(
            f"Turn processed in step {previous.step.value}",
            extra=log_context(
                step=previous.step.value,
                next_step=result.state.step.value,
                guard=result.guard.value if result.guard else None,
            ),
        )
        self._tracker.track(
            event_type="turn_received",
            actor="dialogue_agent",
            data={"text": text, "step": previous.step.value},
        )

        if result.guard is not None:
            logger.debug(f"Guard {result.guard.value} short-circuited the turn")
            self._tracker.track(
                event_type="guard_triggered",
                actor="dialogue_agent",
                data={"guard": result.guard.value, "step": previous.step.value},
            )

        if result.state != previous:
            self._tracker.track(
                event_type="step_changed",
                actor="dialogue_agent",
                data={
                    "from": previous.step.value,
                    "to": result.state.step.value,
                    "error_count": result.state.error_count,
                },
            )

        bot_turns = [self._sink.append_turn("bot", message) for message in result.messages]

        for scheduled in result.scheduled:
            self._scheduler.schedule_once(
                scheduled.delay_ms,
                partial(self._emit_scheduled, scheduled),
                cancelable=scheduled.cancelable,
            )

        return bot_turns

    def _emit_scheduled(self, scheduled: ScheduledMessage) -> None:
        logger.info(f"Sending scheduled message after {scheduled.delay_ms} ms")
        self._sink.append_turn("bot", scheduled.text)
        self._tracker.track(
            event_type="scheduled_message_sent",
            actor="dialogue_agent",
            data={"text": scheduled.text, "step": self._state.step.value},
        )

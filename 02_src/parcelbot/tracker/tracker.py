"""Tracker implementation for creating TraceEvents."""

import uuid
from collections import deque
from datetime import datetime, timezone
from typing import Protocol

from ..models import TraceEvent


class ITracker(Protocol):
    """Creating TraceEvents for the observability API."""

    def track(self, event_type: str, actor: str, data: dict) -> TraceEvent:
        """Create a TraceEvent and keep it."""
        ...

    def get_events(
        self,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get the most recent events, oldest first."""
        ...


class Tracker:
    """Keeps the last ``max_events`` TraceEvents in memory."""

    def __init__(self, max_events: int = 1000):
        self._events: deque[TraceEvent] = deque(maxlen=max_events)

    def track(self, event_type: str, actor: str, data: dict) -> TraceEvent:
        """Create a TraceEvent and keep it."""
        trace_event = TraceEvent(
            id=str(uuid.uuid4()),
            event_type=event_type,
            actor=actor,
            data=data,
            timestamp=datetime.now(timezone.utc),
        )
        self._events.append(trace_event)
        return trace_event

    def get_events(
        self,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Get the most recent events, oldest first."""
        events = [
            e
            for e in self._events
            if (not event_types or e.event_type in event_types)
            and (actor is None or e.actor == actor)
        ]
        return events[-limit:] if limit > 0 else []

    def clear(self) -> None:
        self._events.clear()

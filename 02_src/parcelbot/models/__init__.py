"""Core data models for Parcel Assistant."""

from .messages import ScheduledMessage, Speaker, Turn
from .dialogue import Guard, SessionState, StepId, TurnResult
from .tracing import TraceEvent

__all__ = [
    # Messages
    "Speaker",
    "Turn",
    "ScheduledMessage",
    # Dialogue
    "StepId",
    "Guard",
    "SessionState",
    "TurnResult",
    # Tracing
    "TraceEvent",
]

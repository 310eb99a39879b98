"""Parcel Assistant core module."""

from .app import Application, IApplication
from .config import DialogueSettings
from .dialogue import DialogueAgent, IDialogueAgent, IdleMonitor, transition
from .models import (
    Guard,
    ScheduledMessage,
    SessionState,
    StepId,
    TraceEvent,
    Turn,
    TurnResult,
)
from .scheduler import AsyncioScheduler, IScheduler, TimerHandle
from .tracker import ITracker, Tracker
from .transcript import ITranscriptSink, Transcript

__all__ = [
    # Application
    "Application",
    "IApplication",
    "DialogueSettings",
    # Models
    "StepId",
    "Guard",
    "SessionState",
    "Turn",
    "TurnResult",
    "ScheduledMessage",
    "TraceEvent",
    # Components
    "transition",
    "IDialogueAgent",
    "DialogueAgent",
    "IdleMonitor",
    "IScheduler",
    "AsyncioScheduler",
    "TimerHandle",
    "ITracker",
    "Tracker",
    "ITranscriptSink",
    "Transcript",
]

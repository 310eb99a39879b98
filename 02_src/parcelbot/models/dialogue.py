"""Dialogue-related data models."""

from dataclasses import dataclass, field
from enum import Enum

from .messages import ScheduledMessage


class StepId(str, Enum):
    """Nodes of the tracking dialogue."""

    GREETING = "greeting"
    AWAIT_HAS_TRACKING = "await_has_tracking"
    AWAIT_TRACKING_NUMBER = "await_tracking_number"
    AWAIT_ALTERNATE_ID = "await_alternate_id"
    AWAIT_HUMAN_HANDOFF = "await_human_handoff"
    AWAIT_DELIVERY_CONFIRMATION = "await_delivery_confirmation"
    DONE = "done"


class Guard(str, Enum):
    """Pre-dispatch checks that short-circuit a turn."""

    EMPTY = "empty"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    EMOJI_ONLY = "emoji_only"
    MULTI_QUESTION = "multi_question"
    RUDE = "rude"


@dataclass(frozen=True)
class SessionState:
    """State of the single conversation.

    ``error_count`` only means something while ``step`` is
    AWAIT_TRACKING_NUMBER.
    """

    step: StepId = StepId.GREETING
    error_count: int = 0


@dataclass(frozen=True)
class TurnResult:
    """Outcome of applying one utterance to a SessionState."""

    state: SessionState
    messages: list[str] = field(default_factory=list)
    scheduled: list[ScheduledMessage] = field(default_factory=list)
    guard: Guard | None = None

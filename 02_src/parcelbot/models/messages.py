"""Message-related data models."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Speaker = Literal["user", "bot"]


@dataclass(frozen=True)
class Turn:
    """A single entry of the transcript."""

    speaker: Speaker
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ScheduledMessage:
    """A bot message to be emitted after a delay."""

    delay_ms: int
    text: str
    cancelable: bool = True

"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"


def _int_from_env(name: str, default: int, minimum: int = 0) -> int:
    """Read a non-negative integer setting from the environment."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class DialogueSettings:
    """Timing and escalation knobs of the tracking dialogue."""

    idle_timeout_ms: int = 30000
    handoff_followup_ms: int = 2000
    typing_delay_ms: int = 600
    max_tracking_errors: int = 3
    trace_buffer_size: int = 1000

    @classmethod
    def from_env(cls) -> "DialogueSettings":
        """Build settings from environment variables, falling back to defaults."""
        return cls(
            idle_timeout_ms=_int_from_env("IDLE_TIMEOUT_MS", cls.idle_timeout_ms),
            handoff_followup_ms=_int_from_env(
                "HANDOFF_FOLLOWUP_MS", cls.handoff_followup_ms
            ),
            typing_delay_ms=_int_from_env("TYPING_DELAY_MS", cls.typing_delay_ms),
            max_tracking_errors=_int_from_env(
                "MAX_TRACKING_ERRORS", cls.max_tracking_errors, minimum=1
            ),
            trace_buffer_size=_int_from_env(
                "TRACE_BUFFER_SIZE", cls.trace_buffer_size, minimum=1
            ),
        )

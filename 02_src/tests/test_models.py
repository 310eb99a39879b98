"""Tests for data models."""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime

import pytest

from parcelbot.models import (
    Guard,
    ScheduledMessage,
    SessionState,
    StepId,
    TraceEvent,
    Turn,
    TurnResult,
)


class TestTurn:
    """Tests for Turn model."""

    def test_create_turn(self):
        turn = Turn(speaker="user", text="yes")
        assert turn.speaker == "user"
        assert turn.text == "yes"
        assert isinstance(turn.timestamp, datetime)

    def test_turn_is_immutable(self):
        turn = Turn(speaker="bot", text="hi")
        with pytest.raises(FrozenInstanceError):
            turn.text = "changed"


class TestSessionState:
    """Tests for SessionState model."""

    def test_defaults(self):
        state = SessionState()
        assert state.step == StepId.GREETING
        assert state.error_count == 0

    def test_equality_and_replace(self):
        state = SessionState(step=StepId.AWAIT_TRACKING_NUMBER, error_count=1)
        assert replace(state, error_count=2) == SessionState(
            step=StepId.AWAIT_TRACKING_NUMBER, error_count=2
        )


class TestEnums:
    """Tests for StepId and Guard."""

    def test_step_values_are_strings(self):
        assert StepId.DONE == "done"
        assert StepId("await_human_handoff") is StepId.AWAIT_HUMAN_HANDOFF

    def test_guard_values(self):
        assert {g.value for g in Guard} == {
            "empty", "unsupported_language", "emoji_only", "multi_question", "rude",
        }


class TestTurnResult:
    """Tests for TurnResult and ScheduledMessage."""

    def test_defaults(self):
        result = TurnResult(state=SessionState())
        assert result.messages == []
        assert result.scheduled == []
        assert result.guard is None

    def test_scheduled_message_default_cancelable(self):
        assert ScheduledMessage(delay_ms=10, text="later").cancelable is True


class TestTraceEvent:
    """Tests for TraceEvent model."""

    def test_create_trace_event(self):
        ts = datetime(2024, 1, 1)
        event = TraceEvent(id="e1", event_type="turn_received", actor="a", data={}, timestamp=ts)
        assert event.event_type == "turn_received"
        assert event.timestamp == ts

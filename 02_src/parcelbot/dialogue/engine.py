"""Step-indexed state machine of the tracking dialogue.

``transition`` is a pure reducer: it takes the current SessionState and one
raw utterance and returns the next state together with the bot messages to
emit now and the ones to emit later. It never touches timers or the
transcript; DialogueAgent does that with the returned TurnResult.
"""

from dataclasses import replace
from typing import Callable

from ..config import DialogueSettings
from ..logging_config import get_logger
from ..models import ScheduledMessage, SessionState, StepId, TurnResult
from . import replies
from .classifiers import classify, guard_reply
from .normalizer import NO, YES, normalize
from .validators import (
    is_valid_email,
    is_valid_order_number,
    is_valid_tracking_number,
    tracking_number_problem,
    tracking_serial,
)

logger = get_logger(__name__)

StepHandler = Callable[[SessionState, str, str, DialogueSettings], TurnResult]

CANCEL_PHRASES = ("never mind", "cancel")
INACTIVE_SERIAL = "000000000"
NO_RESULTS_SUFFIX = "ZZ"


def _go(step: StepId, *messages: str, error_count: int = 0) -> TurnResult:
    return TurnResult(
        state=SessionState(step=step, error_count=error_count),
        messages=list(messages),
    )


def _stay(state: SessionState, *messages: str) -> TurnResult:
    return TurnResult(state=state, messages=list(messages))


def _handle_greeting(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    return _go(StepId.AWAIT_HAS_TRACKING, replies.GREETING)


def _handle_has_tracking(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    if text == YES:
        return _go(StepId.AWAIT_TRACKING_NUMBER, replies.ASK_TRACKING_NUMBER)
    if text == NO:
        return _go(StepId.AWAIT_ALTERNATE_ID, replies.ASK_ALTERNATE_ID)
    return _stay(state, replies.ASK_YES_NO)


def _handle_tracking_number(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    lowered = raw.lower()
    if any(phrase in lowered for phrase in CANCEL_PHRASES):
        # Reset, then apply the greeting in the same turn.
        restarted = _handle_greeting(SessionState(), "", "", settings)
        return replace(restarted, messages=[replies.RESTART, *restarted.messages])

    if "http" in raw:
        return _stay(state, replies.URL_NOT_TRACKING)

    if is_valid_tracking_number(raw):
        if raw.endswith(NO_RESULTS_SUFFIX):
            return _go(StepId.AWAIT_HUMAN_HANDOFF, replies.NO_RESULTS)
        if tracking_serial(raw) == INACTIVE_SERIAL:
            return _go(StepId.AWAIT_HUMAN_HANDOFF, replies.INACTIVE)
        return _go(StepId.AWAIT_DELIVERY_CONFIRMATION, replies.DELIVERED)

    error_count = state.error_count + 1
    diagnostic = replies.TRACKING_PROBLEMS[tracking_number_problem(raw)]
    if error_count >= settings.max_tracking_errors:
        return _go(StepId.AWAIT_HUMAN_HANDOFF, diagnostic, replies.TOO_MANY_ERRORS)
    return _go(StepId.AWAIT_TRACKING_NUMBER, diagnostic, error_count=error_count)


def _handle_alternate_id(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    if is_valid_email(raw) or is_valid_order_number(raw):
        return _go(StepId.DONE, replies.FOUND_AT_SORTING_CENTER)
    return _go(StepId.AWAIT_HUMAN_HANDOFF, replies.NOT_FOUND)


def _handle_human_handoff(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    if text == YES:
        followup = ScheduledMessage(
            delay_ms=settings.handoff_followup_ms,
            text=replies.EMPLOYEE_WILL_CALL,
            cancelable=False,
        )
        return TurnResult(
            state=SessionState(step=StepId.DONE),
            messages=[replies.CONNECTING],
            scheduled=[followup],
        )
    return _go(StepId.DONE, replies.NO_HANDOFF)


def _handle_delivery_confirmation(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    if text == YES:
        return _go(StepId.DONE, replies.GLAD_DELIVERED)
    if text == NO:
        return _go(StepId.AWAIT_HUMAN_HANDOFF, replies.NOT_RECEIVED)
    return _stay(state, replies.ASK_RECEIVED)


def _handle_done(
    state: SessionState, raw: str, text: str, settings: DialogueSettings
) -> TurnResult:
    return _stay(state, replies.CLOSING)


STEP_HANDLERS: dict[StepId, StepHandler] = {
    StepId.GREETING: _handle_greeting,
    StepId.AWAIT_HAS_TRACKING: _handle_has_tracking,
    StepId.AWAIT_TRACKING_NUMBER: _handle_tracking_number,
    StepId.AWAIT_ALTERNATE_ID: _handle_alternate_id,
    StepId.AWAIT_HUMAN_HANDOFF: _handle_human_handoff,
    StepId.AWAIT_DELIVERY_CONFIRMATION: _handle_delivery_confirmation,
    StepId.DONE: _handle_done,
}


def transition(
    state: SessionState,
    raw: str,
    settings: DialogueSettings | None = None,
) -> TurnResult:
    """Apply one utterance to ``state``.

    Guards run first and never change the state. Otherwise the handler for
    the current step decides the next state and the messages.
    """
    if settings is None:
        settings = DialogueSettings()

    text = normalize(raw)
    hit = guard_reply(classify(raw, text), state.step)
    if hit is not None:
        guard, message = hit
        return TurnResult(state=state, messages=[message], guard=guard)

    handler = STEP_HANDLERS.get(state.step)
    if handler is None:
        logger.warning(f"No handler for step {state.step!r}, closing conversation")
        handler = _handle_done
    return handler(state, raw, text, settings)

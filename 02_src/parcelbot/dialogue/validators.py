"""Format checks for tracking numbers, emails and order numbers."""

import re
from enum import Enum

TRACKING_NUMBER_RE = re.compile(r"[A-Za-z]{2}[0-9]{9}[A-Za-z]{2}")
EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ORDER_NUMBER_RE = re.compile(r"[0-9]{6,12}")

_SERIAL_RE = re.compile(r"[0-9]{9}")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")

MIN_TRACKING_LENGTH = 10
MAX_TRACKING_LENGTH = 25


class TrackingProblem(str, Enum):
    """Why a string was rejected as a tracking number."""

    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    BAD_CHARACTERS = "bad_characters"
    MALFORMED = "malformed"


def is_valid_tracking_number(text: str) -> bool:
    """Two letters, nine digits, two letters."""
    return TRACKING_NUMBER_RE.fullmatch(text) is not None


def is_valid_email(text: str) -> bool:
    return EMAIL_RE.fullmatch(text) is not None


def is_valid_order_number(text: str) -> bool:
    """Six to twelve digits."""
    return ORDER_NUMBER_RE.fullmatch(text) is not None


def tracking_serial(text: str) -> str | None:
    """Return the first nine-digit run of ``text``, if any."""
    match = _SERIAL_RE.search(text)
    return match.group(0) if match else None


def tracking_number_problem(text: str) -> TrackingProblem:
    """Pick the most useful diagnostic for an invalid tracking number.

    Length is checked before the character set, so a short string of symbols
    is reported as too short.
    """
    if len(text) < MIN_TRACKING_LENGTH:
        return TrackingProblem.TOO_SHORT
    if len(text) > MAX_TRACKING_LENGTH:
        return TrackingProblem.TOO_LONG
    if _NON_ALNUM_RE.search(text):
        return TrackingProblem.BAD_CHARACTERS
    return TrackingProblem.MALFORMED

"""Per-turn classification of user input and the guard pipeline built on it."""

import re
from dataclasses import dataclass

from ..models import Guard, StepId
from .replies import GUARD_REPLIES

EMOJI_RE = re.compile("[\U0001F300-\U0001FAFF]")
NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
AND_RE = re.compile(r"\band\b")
IDENTIFIER_RE = re.compile(r"[A-Za-z0-9]*[0-9][A-Za-z0-9]*")

PROFANITY = ("damn", "shit", "fuck", "crap", "bitch", "asshole")

# Counted in code points: one pictograph has length 1, not 2 as in UTF-16
MAX_EMOJI_ONLY_LENGTH = 3
MIN_SHOUT_LENGTH = 4


def is_emoji(text: str) -> bool:
    """True if ``text`` contains a pictograph."""
    return EMOJI_RE.search(text) is not None


def is_unsupported_language(text: str) -> bool:
    """True for non-ASCII text that is not explained by emoji."""
    return NON_ASCII_RE.search(text) is not None and not is_emoji(text)


def is_multi_question(text: str) -> bool:
    """Heuristic for compound requests: several '?' or a standalone "and"."""
    return text.count("?") > 1 or AND_RE.search(text) is not None


def _is_shouting(text: str) -> bool:
    # A tracking or order number typed in capitals is not shouting.
    if IDENTIFIER_RE.fullmatch(text):
        return False
    return len(text) >= MIN_SHOUT_LENGTH and text.isupper()


def is_rude(text: str) -> bool:
    """True for shouted text or text containing profanity.

    Must be given the raw text, since casing matters.
    """
    if _is_shouting(text):
        return True
    lowered = text.lower()
    return any(word in lowered for word in PROFANITY)


@dataclass(frozen=True)
class Classification:
    """Flags derived from one utterance."""

    empty: bool
    unsupported_language: bool
    emoji_only: bool
    multi_question: bool
    rude: bool


def classify(raw: str, normalized: str) -> Classification:
    """Run every classifier over the utterance.

    Language, emoji and multi-question checks see the normalized text; the
    rudeness check sees the raw text.
    """
    return Classification(
        empty=not normalized,
        unsupported_language=is_unsupported_language(normalized),
        emoji_only=is_emoji(normalized) and len(normalized) <= MAX_EMOJI_ONLY_LENGTH,
        multi_question=is_multi_question(normalized),
        rude=is_rude(raw),
    )


def first_guard(classification: Classification, step: StepId) -> Guard | None:
    """Return the first guard that applies, in priority order."""
    if classification.empty and step != StepId.GREETING:
        return Guard.EMPTY
    if classification.unsupported_language:
        return Guard.UNSUPPORTED_LANGUAGE
    if classification.emoji_only:
        return Guard.EMOJI_ONLY
    if classification.multi_question:
        return Guard.MULTI_QUESTION
    if classification.rude:
        return Guard.RUDE
    return None


def guard_reply(classification: Classification, step: StepId) -> tuple[Guard, str] | None:
    """Return the guard that fired together with its corrective message."""
    guard = first_guard(classification, step)
    if guard is None:
        return None
    return guard, GUARD_REPLIES[guard]

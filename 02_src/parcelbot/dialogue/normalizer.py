"""Canonicalization of free-text replies."""

YES = "yes"
NO = "no"

_AFFIRMATIVES = frozenset(
    {"y", "yes", "yeah", "yep", "yess", "yesss", "ye", "yea", "yeh", "yup", "yas", "yse"}
)
_NEGATIVES = frozenset({"n", "no", "nah", "nope"})


def normalize(raw: str) -> str:
    """Lowercase and trim ``raw``, folding informal yes/no spellings."""
    text = raw.lower().strip()
    if text in _AFFIRMATIVES:
        return YES
    if text in _NEGATIVES:
        return NO
    return text

"""In-memory transcript of the conversation."""

from typing import Protocol

from ..models import Speaker, Turn


class ITranscriptSink(Protocol):
    """Ordered, append-only record of turns."""

    def append_turn(self, speaker: Speaker, text: str) -> Turn:
        """Append a turn and return it."""
        ...


class Transcript:
    """Keeps every turn in the order it was appended."""

    def __init__(self):
        self._turns: list[Turn] = []

    def append_turn(self, speaker: Speaker, text: str) -> Turn:
        """Append a turn and return it."""
        turn = Turn(speaker=speaker, text=text)
        self._turns.append(turn)
        return turn

    def get_turns(self, after: int = 0) -> list[Turn]:
        """Get turns starting at index ``after``."""
        return self._turns[after:]

    def clear(self) -> None:
        self._turns.clear()

    def __len__(self) -> int:
        return len(self._turns)

"""Dialogue module."""

from .agent import DialogueAgent, IDialogueAgent
from .classifiers import Classification, classify, guard_reply
from .engine import transition
from .idle import IdleMonitor
from .normalizer import normalize

__all__ = [
    "DialogueAgent",
    "IDialogueAgent",
    "IdleMonitor",
    "Classification",
    "classify",
    "guard_reply",
    "normalize",
    "transition",
]

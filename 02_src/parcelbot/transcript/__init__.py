"""Transcript module."""

from .transcript import ITranscriptSink, Transcript

__all__ = ["ITranscriptSink", "Transcript"]

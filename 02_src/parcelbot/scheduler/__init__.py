"""Scheduler module."""

from .scheduler import AsyncioScheduler, IScheduler, TimerCallback, TimerHandle

__all__ = ["AsyncioScheduler", "IScheduler", "TimerCallback", "TimerHandle"]

"""Scenario simulator."""

from .sim import SCENARIOS, ISim, Sim

__all__ = ["SCENARIOS", "ISim", "Sim"]

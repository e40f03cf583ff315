"""Scenario simulation."""

from .sim import SCENARIO, ISim, Sim, counter_reducer

__all__ = ["ISim", "SCENARIO", "Sim", "counter_reducer"]

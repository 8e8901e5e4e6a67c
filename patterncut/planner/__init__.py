"""planner — Planner public API."""

from patterncut.planner.planner import DeterministicPlanner, Planner, PlannerInput

__all__ = ["DeterministicPlanner", "Planner", "PlannerInput"]

"""
Travel game state and rules.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .data import REQUIRED_CITIES, START_CITY


@dataclass(frozen=True)
class TravelRules:
    start_city: str = START_CITY
    start_budget: int = 2000
    max_steps: int = 8
    required_cities: tuple[str, ...] = REQUIRED_CITIES
    budget_bonus_unit: int = 100  # Every full $100 left...
    budget_bonus_points: int = 5  # ...is worth this many points
    completion_bonus: int = 500


@dataclass
class TravelState:
    current_city: str
    budget: int
    visited: list[str] = field(default_factory=list)
    total_spent: int = 0
    score: int = 0
    step_count: int = 0

    def snapshot(self) -> dict[str, Any]:
        return {
            "current_city": self.current_city,
            "budget": self.budget,
            "visited": list(self.visited),
            "total_spent": self.total_spent,
            "score": self.score,
            "step_count": self.step_count,
        }

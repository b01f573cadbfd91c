"""
Travel Planning

A route optimization game: visit every required city within a fixed budget
and step allowance, choosing between expensive fast routes and cheap slow
ones.
"""

from __future__ import annotations

from .data import CITIES, ROUTES, City, Route
from .state import TravelRules, TravelState


class TravelGame:
    """One travel game instance."""

    def __init__(self, rules: TravelRules | None = None):
        self.rules = rules or TravelRules()
        self.cities: dict[str, City] = CITIES
        self.routes: dict[str, Route] = ROUTES
        self.state: TravelState
        self.init()

    def init(self) -> None:
        self.state = TravelState(
            current_city=self.rules.start_city,
            budget=self.rules.start_budget,
            visited=[self.rules.start_city],
        )

    def remaining_cities(self) -> list[str]:
        return [city for city in self.rules.required_cities if city not in self.state.visited]

    def is_completed(self) -> bool:
        return not self.remaining_cities()

    @property
    def steps_remaining(self) -> int:
        return self.rules.max_steps - self.state.step_count

    def routes_from(self, city_id: str) -> list[Route]:
        return [route for route in self.routes.values() if route.origin == city_id]

    def score_breakdown(self) -> dict[str, int]:
        rules = self.rules
        return {
            "city_score": sum(self.cities[city].value for city in self.state.visited),
            "budget_bonus": (self.state.budget // rules.budget_bonus_unit) * rules.budget_bonus_points,
            "completion_bonus": rules.completion_bonus if self.is_completed() else 0,
        }

    def get_final_score(self) -> int:
        return sum(self.score_breakdown().values())

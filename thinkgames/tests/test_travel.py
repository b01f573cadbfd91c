"""
Tests for the travel game.

Tests:
- Route parsing
- Budget and step accounting
- Visit bonuses
- Completion and final score
"""

from ..engine_core.tool import ErrorCode
from ..games.travel.data import ROUTES, Route


class TestRoutes:
    """Tests for route data."""

    def test_parse_plain_route(self):
        route = Route.parse("newyork-paris", 800, 1, "Transatlantic flight")
        assert route.origin == "newyork"
        assert route.destination == "paris"
        assert route.mode is None

    def test_parse_alternative_mode(self):
        route = ROUTES["paris-capetown_train"]
        assert route.destination == "capetown"
        assert route.mode == "train"
        assert route.cost == 400
        assert route.time == 3

    def test_routes_from_start(self, travel_game):
        keys = {route.key for route in travel_game.routes_from("newyork")}
        assert keys == {"newyork-paris", "newyork-tokyo", "newyork-rio", "newyork-rio_bus"}


class TestTravel:
    """Tests for the travel tool."""

    def test_initial_final_score(self, travel_game):
        # newyork (50) + 2000 budget -> 100
        assert travel_game.get_final_score() == 150
        assert not travel_game.is_completed()

    def test_travel_to_new_city(self, travel_game, travel_tools):
        result = travel_tools.invoke("travel", {"route_key": "newyork-paris"})

        assert result.success
        assert result.data["visit_bonus"] == 150
        state = travel_game.state
        assert state.current_city == "paris"
        assert state.budget == 1200
        assert state.total_spent == 800
        assert state.step_count == 1
        assert state.score == 150
        assert travel_game.get_final_score() == 50 + 150 + 60

    def test_slow_route_consumes_more_steps(self, travel_game, travel_tools):
        travel_tools.invoke("travel", {"route_key": "newyork-paris"})
        result = travel_tools.invoke("travel", {"route_key": "paris-capetown_train"})

        assert result.success
        assert travel_game.state.step_count == 4
        assert travel_game.state.budget == 800
        assert result.data["steps_remaining"] == 4

    def test_revisit_earns_nothing(self, travel_game, travel_tools):
        travel_game.state.visited.append("paris")
        result = travel_tools.invoke("travel", {"route_key": "newyork-paris"})
        assert result.data["visit_bonus"] == 0
        assert travel_game.state.score == 0

    def test_unknown_route(self, travel_tools):
        result = travel_tools.invoke("travel", {"route_key": "newyork-moon"})
        assert result.error_code == ErrorCode.INVALID_REFERENCE

    def test_route_from_wrong_city(self, travel_game, travel_tools):
        result = travel_tools.invoke("travel", {"route_key": "paris-tokyo"})
        assert result.error_code == ErrorCode.PRECONDITION_FAILED
        assert travel_game.state.current_city == "newyork"

    def test_insufficient_budget(self, travel_game, travel_tools):
        travel_game.state.budget = 100
        before = travel_game.state.snapshot()

        result = travel_tools.invoke("travel", {"route_key": "newyork-paris"})

        assert result.error_code == ErrorCode.INSUFFICIENT_RESOURCES
        assert travel_game.state.snapshot() == before

    def test_insufficient_steps(self, travel_game, travel_tools):
        travel_game.state.step_count = 7
        result = travel_tools.invoke("travel", {"route_key": "newyork-tokyo"})
        assert result.error_code == ErrorCode.INSUFFICIENT_RESOURCES
        assert "steps" in result.error


class TestReadOnlyTools:

    def test_check_routes_is_free(self, travel_game, travel_tools):
        result = travel_tools.invoke("check_routes")
        assert result.success
        assert len(result.data["routes"]) == 4
        assert result.data["budget_remaining"] == 2000
        assert travel_game.state.step_count == 0

    def test_plan_route_lists_remaining(self, travel_tools):
        result = travel_tools.invoke("plan_route")
        assert result.data["remaining_cities"] == ["Paris", "Tokyo", "Sydney", "Rio de Janeiro", "Cape Town"]
        assert result.data["progress"] == "1/6 cities visited"


class TestCompletion:

    def test_all_cities_earns_completion_bonus(self, travel_game):
        travel_game.state.visited.extend(travel_game.rules.required_cities)
        travel_game.state.budget = 250

        breakdown = travel_game.score_breakdown()
        assert travel_game.is_completed()
        assert breakdown == {"city_score": 760, "budget_bonus": 10, "completion_bonus": 500}
        assert travel_game.get_final_score() == 1270

"""
Travel tools.
"""

from __future__ import annotations

from pydantic import Field

from ...engine_core.tool import BaseTool, ErrorCode, NoParams, ToolParams, ToolResult
from ...engine_core.toolbox import Toolbox
from .game import TravelGame


class TravelTool(BaseTool):
    game: TravelGame

    def _city_name(self, city_id: str) -> str:
        city = self.game.cities.get(city_id)
        return city.name if city else city_id


class CheckRoutesTool(TravelTool):
    name = "check_routes"
    description = "Check all available transportation routes from your current city. Free action - no cost."
    read_only = True

    def execute(self, params: NoParams) -> ToolResult:
        game = self.game
        state = game.state
        routes = [
            f"{route.key} -> {self._city_name(route.destination)} "
            f"(${route.cost}, {route.time} steps, {route.description})"
            for route in game.routes_from(state.current_city)
        ]
        return ToolResult.ok({
            "message": f"Available routes from {self._city_name(state.current_city)}:",
            "routes": routes,
            "current_city": self._city_name(state.current_city),
            "budget_remaining": state.budget,
            "visited_cities": [self._city_name(city) for city in state.visited],
            "steps_remaining": game.steps_remaining,
        })


class TravelParams(ToolParams):
    route_key: str = Field(
        description='Route key from check_routes (e.g. "newyork-paris", "paris-capetown_train")'
    )


class TravelToCityTool(TravelTool):
    name = "travel"
    description = "Travel to a destination city using the given route. Costs money and steps based on the route."
    params_model = TravelParams

    def execute(self, params: TravelParams) -> ToolResult:
        game = self.game
        state = game.state
        route = game.routes.get(params.route_key)

        if route is None:
            return ToolResult.failure(f'Route "{params.route_key}" not available', ErrorCode.INVALID_REFERENCE)
        if route.origin != state.current_city:
            return ToolResult.failure(f'Route "{route.key}" doesn\'t start from {state.current_city}')
        if state.budget < route.cost:
            return ToolResult.failure(
                f"Insufficient budget. Required: ${route.cost}, Available: ${state.budget}",
                ErrorCode.INSUFFICIENT_RESOURCES,
            )
        if route.time > game.steps_remaining:
            return ToolResult.failure(
                f"Not enough steps remaining. Required: {route.time}, Available: {game.steps_remaining}",
                ErrorCode.INSUFFICIENT_RESOURCES,
            )

        state.budget -= route.cost
        state.total_spent += route.cost
        state.step_count += route.time
        state.current_city = route.destination

        visit_bonus = 0
        if route.destination not in state.visited:
            state.visited.append(route.destination)
            visit_bonus = game.cities[route.destination].value
            state.score += visit_bonus

        return ToolResult.ok({
            "new_city": self._city_name(route.destination),
            "cost": route.cost,
            "time_spent": route.time,
            "visit_bonus": visit_bonus,
            "budget_remaining": state.budget,
            "steps_remaining": game.steps_remaining,
            "total_visited": len(state.visited),
        })


class PlanRouteTool(TravelTool):
    name = "plan_route"
    description = "Analyze current progress and suggest next moves. Free action - no cost."
    read_only = True

    def execute(self, params: NoParams) -> ToolResult:
        game = self.game
        state = game.state
        remaining = [self._city_name(city) for city in game.remaining_cities()]

        if remaining:
            suggestions = [
                f"Visit remaining cities: {', '.join(remaining)}",
                f"Budget remaining: ${state.budget}, Steps remaining: {game.steps_remaining}",
                "Consider cheaper transportation options for budget efficiency",
            ]
        else:
            suggestions = ["All cities visited! Focus on efficient budget use."]

        return ToolResult.ok({
            "current_city": self._city_name(state.current_city),
            "remaining_cities": remaining,
            "suggestions": suggestions,
            "progress": f"{len(state.visited)}/{len(game.cities)} cities visited",
        })


def create_toolbox(game: TravelGame) -> Toolbox:
    return Toolbox([CheckRoutesTool(game), TravelToCityTool(game), PlanRouteTool(game)])

"""
Prompts handed to the orchestrator for the travel game.
"""

from __future__ import annotations

from .data import CITIES
from .state import TravelRules


def system_prompt(rules: TravelRules) -> str:
    required = ", ".join(CITIES[city].name for city in rules.required_cities)
    return f"""You are a travel planner optimizing routes with budget constraints.

GAME RULES:
- Start in {CITIES[rules.start_city].name} with ${rules.start_budget} budget
- Visit all {len(rules.required_cities)} destinations: {required}
- Choose transportation: flight ($600-1200), train ($400), bus ($150-200)

SCORING (all bonuses stack):
- Base: visiting cities (100-200 pts each based on value)
- Budget bonus: {rules.budget_bonus_points} pts per ${rules.budget_bonus_unit} remaining
- Completion bonus: {rules.completion_bonus} pts for visiting all {len(rules.required_cities)} required cities
- Goal: visit all cities with maximum budget remaining

STRATEGY TIPS:
1. Prioritize visiting every required city to unlock the completion bonus
2. Use the cheapest viable transport to maximize the budget bonus
3. Plan the route to minimize backtracking and total cost
4. Check routes before traveling to compare options"""


def user_prompt(rules: TravelRules) -> str:
    return (
        f"You need to visit {len(rules.required_cities)} major cities worldwide with a ${rules.start_budget} "
        f"budget. Plan your route efficiently - you have only {rules.max_steps} steps. Start by checking "
        "available routes, then travel strategically to visit all destinations."
    )

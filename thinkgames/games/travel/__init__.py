"""
Travel Planning - budget and route optimization.

Same engine shape as the decoder game with a different world, a money
budget instead of energy and no per-step efficiency term in the score.
"""

from __future__ import annotations

from ...engine_core.game import GameDefinition
from .game import TravelGame
from .prompts import system_prompt, user_prompt
from .state import TravelRules, TravelState
from .tools import create_toolbox


def create_travel_game(rules: TravelRules | None = None) -> GameDefinition:
    game = TravelGame(rules)
    return GameDefinition(
        key="travel",
        name="Travel Planning",
        game=game,
        tools=create_toolbox(game),
        system_prompt=system_prompt(game.rules),
        user_prompt=user_prompt(game.rules),
        max_steps=game.rules.max_steps,
    )


__all__ = ["TravelGame", "TravelRules", "TravelState", "create_toolbox", "create_travel_game"]

"""
Alien Signal Decoder - exploration and combination puzzle.

This module contains:
- World model (locations, artifacts, signals, recipes)
- Decoder state and rules
- The game instance and its cost modifiers
- The tool set exposed to the orchestrator
"""

from __future__ import annotations

from ...engine_core.game import GameDefinition
from .game import DecoderGame
from .prompts import system_prompt, user_prompt
from .state import DecoderRules, DecoderState
from .tools import create_toolbox
from .world import RiskTier, Signal, SignalPair


def create_decoder_game(rules: DecoderRules | None = None) -> GameDefinition:
    """Fresh decoder game bound to its tools."""
    game = DecoderGame(rules)
    return GameDefinition(
        key="decoder",
        name="Alien Signal Decoder - Adaptive Reasoning Test",
        game=game,
        tools=create_toolbox(game),
        system_prompt=system_prompt(game.rules),
        user_prompt=user_prompt(game.rules),
        max_steps=game.rules.max_steps,
    )


__all__ = [
    "DecoderGame",
    "DecoderRules",
    "DecoderState",
    "RiskTier",
    "Signal",
    "SignalPair",
    "create_decoder_game",
    "create_toolbox",
]

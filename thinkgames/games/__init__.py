"""
Games module - Game-specific implementations.

Each game has its own subpackage with:
- World data
- Game state and rules
- The game instance (lifecycle and scoring)
- Its tools
"""

from __future__ import annotations
from typing import Callable

from ..engine_core.game import GameDefinition
from .decoder import create_decoder_game
from .travel import create_travel_game

GAMES: dict[str, Callable[[], GameDefinition]] = {
    "decoder": create_decoder_game,
    "travel": create_travel_game,
}


def create_game(key: str) -> GameDefinition:
    """Build a fresh game definition by registry key."""
    factory = GAMES.get(key)
    if factory is None:
        raise ValueError(f"Unknown game: {key}. Available: {', '.join(GAMES)}")
    return factory()


__all__ = ["GAMES", "create_game"]

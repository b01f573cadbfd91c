"""
Engine Core - Tool contract, dispatch and scoring shared by all games.

The engine is the runtime that:
1. Binds a game instance to its tools
2. Validates tool parameters
3. Applies tool calls one at a time
4. Converts every rejection or fault into a structured result
"""

from .tool import BaseTool, ErrorCode, NoParams, ToolParams, ToolResult
from .toolbox import Toolbox, ToolCall
from .game import Game, GameDefinition
from .scoring import (
    ScoringRules,
    DEFAULT_SCORING,
    efficiency,
    efficiency_bonus,
    ranking_tier,
    resource_bonus,
)

__all__ = [
    "BaseTool",
    "ErrorCode",
    "NoParams",
    "ToolParams",
    "ToolResult",
    "Toolbox",
    "ToolCall",
    "Game",
    "GameDefinition",
    "ScoringRules",
    "DEFAULT_SCORING",
    "efficiency",
    "efficiency_bonus",
    "ranking_tier",
    "resource_bonus",
]

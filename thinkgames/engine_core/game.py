"""
Game contract shared by every variant.

The orchestrator and reporting code only ever see this small surface.
Each variant is its own type holding its own state and world database.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

from .toolbox import Toolbox


@runtime_checkable
class Game(Protocol):
    """Lifecycle and scoring surface of a game instance."""

    @property
    def state(self) -> Any: ...

    def init(self) -> None:
        """Reset all mutable state to its starting values."""

    def is_completed(self) -> bool: ...

    def get_final_score(self) -> int:
        """Final score including bonuses. Valid at any time, not only after completion."""


Prompt = str | Callable[[Any], str]


@dataclass
class GameDefinition:
    """
    Everything an orchestrator needs to play one game.

    max_steps is the turn budget the orchestrator enforces; the engine
    itself only counts steps for scoring.
    """
    key: str
    name: str
    game: Game
    tools: Toolbox
    user_prompt: Prompt
    system_prompt: Prompt | None = None
    max_steps: int = 20

    def render_system_prompt(self) -> str | None:
        if self.system_prompt is None:
            return None
        if callable(self.system_prompt):
            return self.system_prompt(self.game.state)
        return self.system_prompt

    def render_user_prompt(self) -> str:
        if callable(self.user_prompt):
            return self.user_prompt(self.game.state)
        return self.user_prompt

    def build_messages(self) -> list[dict[str, str]]:
        """Opening chat messages for a playthrough."""
        messages = []
        system = self.render_system_prompt()
        if system:
            messages.append({"role": "system", "content": system})
        user = self.render_user_prompt()
        if user:
            messages.append({"role": "user", "content": user})
        return messages

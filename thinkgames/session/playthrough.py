"""
Playthrough - Drives one game from a sequence of turns and records the outcome.

A turn is the list of tool calls an agent issued in one step. The runner
does not choose actions; it applies what it is given, in order, and
enforces the game's turn budget. Who the agent is comes in explicitly
as agent_name.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable
import logging
import time

from ..engine_core.game import GameDefinition
from ..engine_core.tool import ToolResult
from ..engine_core.toolbox import ToolCall
from .results import PlaythroughRecord, ResultStore

logger = logging.getLogger(__name__)

TurnInput = Iterable[ToolCall | dict[str, Any]]


@dataclass
class PlaythroughReport:
    game_key: str
    agent_name: str
    turns: int
    tool_calls: int
    final_score: int
    duration: float
    completed: bool
    results: list[list[ToolResult]] = field(default_factory=list)

    @property
    def tool_calls_per_turn(self) -> float:
        return self.tool_calls / self.turns if self.turns else 0.0

    def to_record(self) -> PlaythroughRecord:
        return PlaythroughRecord(
            steps=self.turns,
            score=self.final_score,
            time=round(self.duration, 1),
            completed=self.completed,
            tool_calls=self.tool_calls,
        )


class Playthrough:
    """
    Runs turns against a game definition.

    Usage:
        definition = create_game("decoder")
        runner = Playthrough(definition, agent_name="scripted", store=ResultStore("results"))
        report = runner.run([[{"name": "explore_connections"}], ...])
    """

    def __init__(
        self,
        definition: GameDefinition,
        agent_name: str,
        store: ResultStore | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.definition = definition
        self.agent_name = agent_name
        self.store = store
        self.clock = clock

    def run(self, turns: Iterable[TurnInput]) -> PlaythroughReport:
        definition = self.definition
        toolbox = definition.tools
        start = self.clock()
        start_calls = toolbox.call_count

        results: list[list[ToolResult]] = []
        for turn in turns:
            if len(results) >= definition.max_steps:
                logger.info("Turn budget of %d exhausted", definition.max_steps)
                break
            calls = _turn_calls(turn)
            results.append(toolbox.invoke_batch(calls))
            if definition.game.is_completed():
                break

        completed = definition.game.is_completed()
        report = PlaythroughReport(
            game_key=definition.key,
            agent_name=self.agent_name,
            turns=len(results),
            tool_calls=toolbox.call_count - start_calls,
            final_score=definition.game.get_final_score(),
            duration=self.clock() - start,
            completed=completed,
            results=results,
        )
        logger.info(
            "%s %s: %d turns, %d tool calls, score %d",
            "MISSION ACCOMPLISHED" if completed else "MISSION INCOMPLETE",
            self.agent_name,
            report.turns,
            report.tool_calls,
            report.final_score,
        )

        if self.store is not None:
            self.store.append(definition.key, self.agent_name, report.to_record())
        return report


def _turn_calls(turn: Any) -> list[ToolCall]:
    """Normalize one turn. A turn that is not a list is treated as a single call."""
    if not isinstance(turn, (list, tuple)):
        turn = [turn]
    return [c if isinstance(c, ToolCall) else ToolCall.from_dict(c) for c in turn]

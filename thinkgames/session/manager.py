"""
Session Manager - Creates and manages game sessions.

A session is one game instance, its tools and the bookkeeping an outer
surface needs (agent, turn count, timing). Sessions live in memory only;
mid-game state is never persisted. The only persistence is the result
record written when a session ends.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable
import logging
import time
import uuid

from ..engine_core.game import GameDefinition
from ..engine_core.tool import ToolResult
from ..engine_core.toolbox import ToolCall
from ..games import create_game
from .results import PlaythroughRecord, ResultStore

logger = logging.getLogger(__name__)


class SessionState(Enum):
    ACTIVE = "active"
    COMPLETED = "completed"  # Game reached its win condition
    ENDED = "ended"  # Closed by the caller


@dataclass
class Session:
    """An in-memory game session."""
    session_id: str
    definition: GameDefinition
    agent_name: str
    created_at: float
    turns: int = 0
    state: SessionState = SessionState.ACTIVE
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def game_key(self) -> str:
        return self.definition.key

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def play_turn(self, calls: list[ToolCall]) -> list[ToolResult]:
        """Apply one turn of tool calls in order."""
        self.turns += 1
        results = self.definition.tools.invoke_batch(calls)
        if self.definition.game.is_completed():
            self.state = SessionState.COMPLETED
        return results

    def to_record(self, now: float) -> PlaythroughRecord:
        return PlaythroughRecord(
            steps=self.turns,
            score=self.definition.game.get_final_score(),
            time=round(now - self.created_at, 1),
            completed=self.definition.game.is_completed(),
            tool_calls=self.definition.tools.call_count,
        )


class SessionManager:
    """
    Tracks active sessions.

    Responsibilities:
    - Create sessions from the game registry
    - Look sessions up by id
    - End sessions, optionally recording a result
    """

    def __init__(
        self,
        store: ResultStore | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self._sessions: dict[str, Session] = {}
        self.store = store
        self.clock = clock

    def create_session(self, game_key: str, agent_name: str) -> Session:
        """Raises ValueError for an unknown game."""
        definition = create_game(game_key)
        session = Session(
            session_id=str(uuid.uuid4()),
            definition=definition,
            agent_name=agent_name,
            created_at=self.clock(),
        )
        self._sessions[session.session_id] = session
        logger.info("Created %s session %s for %s", game_key, session.session_id, agent_name)
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    def end_session(self, session_id: str, record: bool = True) -> PlaythroughRecord | None:
        """
        Remove a session. When record is set and a store is configured,
        the outcome is appended to the results file.

        Returns the record, or None if the session does not exist.
        """
        session = self._sessions.pop(session_id, None)
        if session is None:
            return None

        session.state = SessionState.ENDED
        result = session.to_record(self.clock())
        if record and self.store is not None:
            self.store.append(session.game_key, session.agent_name, result)
        logger.info("Ended session %s (score %d)", session_id, result.score)
        return result

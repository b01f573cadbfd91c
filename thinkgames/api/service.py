"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions
3. Formats tool results for the wire

This layer is framework-agnostic (usable with FastAPI, Flask, or directly).
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any
import logging

from ..engine_core.toolbox import ToolCall
from ..games import GAMES
from ..session import Session, SessionManager
from .schemas import (
    CreateSessionRequest,
    EndSessionResponse,
    ErrorCode,
    ErrorResponse,
    GameInfo,
    GameListResponse,
    GameStateResponse,
    RecordInfo,
    SessionResponse,
    SessionStatus,
    ToolCallResult,
    ToolSchema,
    TurnRequest,
    TurnResponse,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()
        session = service.create_session(CreateSessionRequest(game="decoder", agent_name="m2"))
        turn = service.play_turn(session.session_id, TurnRequest(calls=[...]))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def list_games(self) -> GameListResponse:
        games = []
        for key, factory in GAMES.items():
            definition = factory()
            games.append(GameInfo(
                key=key,
                name=definition.name,
                max_steps=definition.max_steps,
                tools=definition.tools.names,
            ))
        return GameListResponse(games=games)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        try:
            session = self.session_manager.create_session(request.game, request.agent_name)
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.UNKNOWN_GAME)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        return self._session_response(session)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_sessions()

    def play_turn(self, session_id: str, request: TurnRequest) -> TurnResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)

        definition = session.definition
        if session.turns >= definition.max_steps:
            return ErrorResponse(
                error=f"Turn budget of {definition.max_steps} exhausted",
                error_code=ErrorCode.VALIDATION_ERROR,
                details={"turns": session.turns},
            )

        calls = [ToolCall(name=c.name, params=c.params) for c in request.calls]
        results = session.play_turn(calls)

        return TurnResponse(
            session_id=session_id,
            turn=session.turns,
            results=[
                ToolCallResult(name=call.name, **result.to_dict())
                for call, result in zip(calls, results)
            ],
            completed=definition.game.is_completed(),
            final_score=definition.game.get_final_score(),
            turns_remaining=definition.max_steps - session.turns,
        )

    def get_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if session is None:
            return _not_found(session_id)
        game = session.definition.game
        return GameStateResponse(
            session_id=session_id,
            state=_state_snapshot(game.state),
            completed=game.is_completed(),
            final_score=game.get_final_score(),
        )

    def end_session(self, session_id: str, record: bool = True) -> EndSessionResponse:
        result = self.session_manager.end_session(session_id, record=record)
        return EndSessionResponse(
            success=result is not None,
            session_id=session_id,
            record=RecordInfo.model_validate(result) if result else None,
        )

    def _session_response(self, session: Session) -> SessionResponse:
        definition = session.definition
        return SessionResponse(
            session_id=session.session_id,
            game=definition.key,
            game_name=definition.name,
            agent_name=session.agent_name,
            status=SessionStatus(session.state.value),
            turns=session.turns,
            max_steps=definition.max_steps,
            final_score=definition.game.get_final_score(),
            system_prompt=definition.render_system_prompt(),
            user_prompt=definition.render_user_prompt(),
            tools=[ToolSchema(**d) for d in definition.tools.describe()],
        )


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(error=f"Session {session_id} not found", error_code=ErrorCode.SESSION_NOT_FOUND)


def _state_snapshot(state: Any) -> dict[str, Any]:
    if hasattr(state, "snapshot"):
        return state.snapshot()
    if is_dataclass(state):
        return asdict(state)
    return dict(state)

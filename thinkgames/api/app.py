"""
FastAPI Application - HTTP surface for orchestrators.

Endpoints:
    GET    /api/v1/health                   Liveness
    GET    /api/v1/games                    List available games
    POST   /api/v1/sessions                 Create a game session
    GET    /api/v1/sessions                 List active sessions
    GET    /api/v1/sessions/{id}            Session status, prompts and tool schemas
    POST   /api/v1/sessions/{id}/turns      Apply one turn of tool calls, in order
    GET    /api/v1/sessions/{id}/state      Current game state and final score
    DELETE /api/v1/sessions/{id}            End session, optionally recording the result

Tool rejections are returned with HTTP 200 inside the turn results; only
session-level problems are HTTP errors.
"""

from typing import Union

from ..config import ALLOWED_ORIGINS, THINKGAMES_RESULTS_DIR


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates one recording to
            THINKGAMES_RESULTS_DIR if not provided)

    Returns:
        FastAPI application instance
    """
    try:
        from fastapi import FastAPI, Query
        from fastapi.middleware.cors import CORSMiddleware
        from fastapi.responses import JSONResponse
    except ImportError:
        raise ImportError("FastAPI not installed. Install with: pip install fastapi uvicorn")

    from .. import __version__
    from ..session import ResultStore, SessionManager
    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        EndSessionResponse,
        ErrorCode,
        ErrorResponse,
        GameListResponse,
        GameStateResponse,
        HealthResponse,
        SessionListResponse,
        SessionResponse,
        TurnRequest,
        TurnResponse,
    )

    app = FastAPI(
        title="Thinkgames Engine API",
        description="Tool-driven puzzle games for reasoning agents.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        session_manager=SessionManager(store=ResultStore(THINKGAMES_RESULTS_DIR))
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def error_response(error: ErrorResponse) -> JSONResponse:
        status_code = {
            ErrorCode.SESSION_NOT_FOUND: 404,
            ErrorCode.INTERNAL_ERROR: 500,
        }.get(error.error_code, 400)
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    # =========================================================================
    # Endpoints
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    @app.get("/api/v1/games", response_model=GameListResponse, tags=["Games"])
    async def list_games() -> GameListResponse:
        return api_service.list_games()

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(request: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        response = api_service.create_session(request)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.get("/api/v1/sessions", response_model=SessionListResponse, tags=["Sessions"])
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/turns",
        response_model=TurnResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        tags=["Game Loop"],
        summary="Apply one turn of tool calls",
    )
    async def play_turn(session_id: str, request: TurnRequest) -> Union[TurnResponse, JSONResponse]:
        response = api_service.play_turn(session_id, request)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game Loop"],
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        response = api_service.get_state(session_id)
        if isinstance(response, ErrorResponse):
            return error_response(response)
        return response

    @app.delete("/api/v1/sessions/{session_id}", response_model=EndSessionResponse, tags=["Sessions"])
    async def end_session(
        session_id: str,
        record: bool = Query(default=True, description="Append the outcome to the results file"),
    ) -> Union[EndSessionResponse, JSONResponse]:
        response = api_service.end_session(session_id, record=record)
        if not response.success:
            return error_response(ErrorResponse(
                error=f"Session {session_id} not found",
                error_code=ErrorCode.SESSION_NOT_FOUND,
            ))
        return response

    return app


# For running directly: uvicorn thinkgames.api.app:app
app = None
try:
    app = create_app()
except ImportError:
    # FastAPI not installed
    pass

"""
Pydantic Schemas for API - request/response models for OpenAPI.

These models define the contract between an orchestrator talking HTTP and
the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- UNKNOWN_GAME: Game key not in the registry
- VALIDATION_ERROR: Request body is malformed
- INTERNAL_ERROR: Unexpected server fault

Tool rejections are not HTTP errors: they come back inside a TurnResponse
with success=false, like any other tool result.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    ENDED = "ended"


class ErrorCode(str, Enum):
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    UNKNOWN_GAME = "UNKNOWN_GAME"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class GameInfo(BaseModel):
    key: str
    name: str
    max_steps: int
    tools: list[str] = Field(default_factory=list)


class ToolSchema(BaseModel):
    """Tool description handed to a model provider."""
    name: str
    description: str
    parameters: dict[str, Any] = Field(default_factory=dict, description="JSON schema of the parameters")


class ToolCallResult(BaseModel):
    name: str
    success: bool
    data: Optional[dict[str, Any]] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class RecordInfo(BaseModel):
    steps: int
    score: int
    time: float
    completed: bool
    tool_calls: int
    timestamp: str

    model_config = {"from_attributes": True}


# =============================================================================
# Requests
# =============================================================================

class CreateSessionRequest(BaseModel):
    game: str = Field(default="decoder", description="Game key, e.g. decoder or travel")
    agent_name: str = Field(min_length=1, description="Name of the acting agent, used as the results key")


class ToolCallRequest(BaseModel):
    name: str = Field(min_length=1)
    params: dict[str, Any] = Field(default_factory=dict)


class TurnRequest(BaseModel):
    """Tool calls issued in one turn. Applied strictly in order."""
    calls: list[ToolCallRequest] = Field(min_length=1)


# =============================================================================
# Responses
# =============================================================================

class GameListResponse(BaseModel):
    games: list[GameInfo]


class SessionResponse(BaseModel):
    session_id: str
    game: str
    game_name: str
    agent_name: str
    status: SessionStatus
    turns: int = 0
    max_steps: int
    final_score: int = 0
    system_prompt: Optional[str] = None
    user_prompt: str = ""
    tools: list[ToolSchema] = Field(default_factory=list)


class TurnResponse(BaseModel):
    session_id: str
    turn: int
    results: list[ToolCallResult]
    completed: bool
    final_score: int
    turns_remaining: int


class GameStateResponse(BaseModel):
    session_id: str
    state: dict[str, Any]
    completed: bool
    final_score: int


class EndSessionResponse(BaseModel):
    success: bool
    session_id: str
    record: Optional[RecordInfo] = None


class SessionListResponse(BaseModel):
    sessions: list[str]
    count: int


class ErrorResponse(BaseModel):
    error: str
    error_code: ErrorCode
    details: Optional[dict[str, Any]] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str

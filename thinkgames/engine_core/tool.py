"""
Tool System - Validated actions exposed to the orchestrator.

A tool is:
1. A name and a human-readable description
2. A declarative parameter model (pydantic)
3. An execute() that either mutates the game and returns data,
   or rejects with a structured error and leaves the game untouched

Tools are the only path to mutating game state. run() is the dispatch
boundary: parameters are validated before execute(), and nothing raised
inside execute() escapes to the caller.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar
import logging

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)


class ErrorCode(str, Enum):
    """Structured error codes returned by tools."""
    INVALID_PARAMS = "INVALID_PARAMS"
    INVALID_REFERENCE = "INVALID_REFERENCE"  # Unknown location, artifact, signal, route
    PRECONDITION_FAILED = "PRECONDITION_FAILED"  # Not adjacent, already done, wrong place
    INSUFFICIENT_RESOURCES = "INSUFFICIENT_RESOURCES"
    GAME_OVER = "GAME_OVER"
    UNKNOWN_TOOL = "UNKNOWN_TOOL"
    TOOL_ERROR = "TOOL_ERROR"  # Unexpected exception inside a tool


class ToolParams(BaseModel):
    """Base for tool parameter models. Unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")


class NoParams(ToolParams):
    """Parameter model for tools that take no arguments."""


@dataclass
class ToolResult:
    """
    Result of running a tool.

    success=True carries a data payload (including a resource/score
    snapshot); success=False carries an error message and code.
    """
    success: bool
    data: dict[str, Any] | None = None
    error: str | None = None
    error_code: ErrorCode | None = None

    @classmethod
    def ok(cls, data: dict[str, Any]) -> ToolResult:
        """Create a success result."""
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode = ErrorCode.PRECONDITION_FAILED) -> ToolResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    def to_payload(self) -> dict[str, Any]:
        """What the model sees: the data on success, an error object otherwise."""
        if self.success:
            return self.data or {}
        return {"error": self.error or "Tool execution failed"}

    def to_dict(self) -> dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data or {}}
        return {
            "success": False,
            "error": self.error,
            "error_code": self.error_code.value if self.error_code else None,
        }


class BaseTool(ABC):
    """
    Base class for game tools.

    Subclasses set name, description and params_model, and implement
    execute(). Tools with read_only=True stay callable after the game
    has completed; every other tool is rejected with GAME_OVER.
    """
    name: ClassVar[str] = ""
    description: ClassVar[str] = ""
    params_model: ClassVar[type[ToolParams]] = NoParams
    read_only: ClassVar[bool] = False

    def __init__(self, game: Any):
        self.game = game

    @abstractmethod
    def execute(self, params: ToolParams) -> ToolResult:
        """Apply the tool to the game. Must not mutate state on failure."""

    def json_schema(self) -> dict[str, Any]:
        """JSON schema of the parameters, for model providers."""
        return self.params_model.model_json_schema()

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.json_schema(),
        }

    def run(self, raw_params: dict[str, Any] | None = None) -> ToolResult:
        """
        Validate parameters and execute.

        Returns a ToolResult in every case.
        """
        try:
            params = self.params_model.model_validate(raw_params or {})
        except ValidationError as e:
            logger.info("Rejected %s: invalid parameters", self.name)
            return ToolResult.failure(
                f"Invalid parameters for {self.name}: {_summarize_errors(e)}",
                ErrorCode.INVALID_PARAMS,
            )

        if not self.read_only and self.game.is_completed():
            return ToolResult.failure("Game is over - no further actions allowed", ErrorCode.GAME_OVER)

        logger.debug("TOOL: %s(%s)", self.name, params.model_dump())
        try:
            result = self.execute(params)
        except Exception as e:
            logger.exception("Tool %s raised", self.name)
            return ToolResult.failure(f"Tool error: {e}", ErrorCode.TOOL_ERROR)

        if not result.success:
            logger.info("Rejected %s: %s", self.name, result.error)
        return result


def _summarize_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "params"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)

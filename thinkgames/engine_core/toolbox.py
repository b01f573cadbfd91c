"""
Toolbox - The set of tools bound to one game instance.

The orchestrator may request several tool calls in one turn. They are a
batching convenience only: calls are applied one at a time, in the order
given, and each call's validation sees the effects of the calls before it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable

from .tool import BaseTool, ErrorCode, ToolResult


@dataclass
class ToolCall:
    """A single requested tool invocation."""
    name: str
    params: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> ToolCall:
        """
        Build a call from a {"name", "params"} mapping.

        Malformed entries become calls with an empty name, which the
        toolbox rejects as INVALID_PARAMS instead of raising.
        """
        if not isinstance(data, dict):
            return cls(name="")
        name = data.get("name")
        return cls(name=name if isinstance(name, str) else "", params=data.get("params") or {})


class Toolbox:
    """
    Named registry of tools for a game.

    Usage:
        toolbox = Toolbox([MoveToAreaTool(game), CollectArtifactTool(game)])
        result = toolbox.invoke("move_to_area", {"area": "crystal_forest"})
    """

    def __init__(self, tools: Iterable[BaseTool]):
        self._tools: dict[str, BaseTool] = {}
        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool
        self.call_count = 0

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> BaseTool | None:
        return self._tools.get(name)

    def describe(self) -> list[dict[str, Any]]:
        """Name, description and parameter schema of every tool."""
        return [tool.describe() for tool in self._tools.values()]

    def invoke(self, name: str, params: dict[str, Any] | None = None) -> ToolResult:
        """Run a single tool by name."""
        self.call_count += 1
        if not name:
            return ToolResult.failure("Tool call is missing a name", ErrorCode.INVALID_PARAMS)
        tool = self._tools.get(name)
        if tool is None:
            return ToolResult.failure(
                f"Unknown tool: {name}. Available: {', '.join(self._tools)}",
                ErrorCode.UNKNOWN_TOOL,
            )
        return tool.run(params)

    def invoke_batch(self, calls: Iterable[ToolCall]) -> list[ToolResult]:
        """Run calls strictly in order. A rejected call does not stop the batch."""
        return [self.invoke(call.name, call.params) for call in calls]

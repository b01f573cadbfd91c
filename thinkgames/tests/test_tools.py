"""
Tests for the tool dispatch layer.

Tests:
- Parameter validation
- Unknown tools
- Unexpected exceptions inside tools
- Ordered batch application
- Game-over guard
"""

import pytest

from ..engine_core.tool import BaseTool, ErrorCode, NoParams, ToolResult
from ..engine_core.toolbox import ToolCall, Toolbox


class ExplodingTool(BaseTool):
    name = "explode"
    description = "Always raises."

    def execute(self, params: NoParams) -> ToolResult:
        raise RuntimeError("boom")


class TestToolResult:
    """Tests for ToolResult serialization."""

    def test_success_payload_is_data(self):
        result = ToolResult.ok({"energy_remaining": 3})
        assert result.to_payload() == {"energy_remaining": 3}
        assert result.to_dict() == {"success": True, "data": {"energy_remaining": 3}}

    def test_failure_payload_is_error_object(self):
        result = ToolResult.failure("nope", ErrorCode.INVALID_REFERENCE)
        assert result.to_payload() == {"error": "nope"}
        assert result.to_dict()["error_code"] == "INVALID_REFERENCE"

    def test_failure_defaults_to_precondition(self):
        assert ToolResult.failure("x").error_code == ErrorCode.PRECONDITION_FAILED


class TestToolbox:
    """Tests for Toolbox dispatch."""

    def test_duplicate_names_rejected(self, decoder_game):
        with pytest.raises(ValueError):
            Toolbox([ExplodingTool(decoder_game), ExplodingTool(decoder_game)])

    def test_unknown_tool(self, decoder_tools):
        result = decoder_tools.invoke("teleport", {})
        assert not result.success
        assert result.error_code == ErrorCode.UNKNOWN_TOOL
        assert "move_to_area" in result.error

    def test_calls_are_counted(self, decoder_tools):
        decoder_tools.invoke("explore_connections")
        decoder_tools.invoke("teleport")
        assert decoder_tools.call_count == 2

    def test_describe_includes_schemas(self, decoder_tools):
        described = {d["name"]: d for d in decoder_tools.describe()}
        assert "finalize_discovery" in described
        schema = described["move_to_area"]["parameters"]
        assert schema["required"] == ["area"]

    def test_tool_call_from_dict(self):
        call = ToolCall.from_dict({"name": "explore_connections"})
        assert call.name == "explore_connections"
        assert call.params == {}

    @pytest.mark.parametrize("entry", [{"params": {}}, {"name": None}, "explore_connections", None])
    def test_malformed_call_rejected(self, decoder_game, decoder_tools, entry):
        call = ToolCall.from_dict(entry)
        result = decoder_tools.invoke(call.name, call.params)

        assert not result.success
        assert result.error_code == ErrorCode.INVALID_PARAMS
        assert decoder_game.state.step_count == 0


class TestParameterValidation:
    """Tests for pydantic parameter validation at the boundary."""

    def test_missing_parameter(self, decoder_game, decoder_tools):
        result = decoder_tools.invoke("move_to_area", {})
        assert result.error_code == ErrorCode.INVALID_PARAMS
        assert "area" in result.error
        assert decoder_game.state.step_count == 0

    def test_unexpected_parameter(self, decoder_tools):
        result = decoder_tools.invoke("explore_connections", {"verbose": True})
        assert result.error_code == ErrorCode.INVALID_PARAMS

    def test_wrong_type(self, decoder_tools):
        result = decoder_tools.invoke("plan_optimal_route", {"moves": "north"})
        assert result.error_code == ErrorCode.INVALID_PARAMS


class TestFaultIsolation:
    """Exceptions inside a tool become error results."""

    def test_exception_becomes_tool_error(self, decoder_game):
        toolbox = Toolbox([ExplodingTool(decoder_game)])
        result = toolbox.invoke("explode")
        assert not result.success
        assert result.error_code == ErrorCode.TOOL_ERROR
        assert "boom" in result.error


class TestBatchOrdering:
    """Calls in one batch are applied strictly in order."""

    def test_later_call_sees_earlier_effects(self, decoder_game, decoder_tools):
        results = decoder_tools.invoke_batch([
            ToolCall("move_to_area", {"area": "crystal_forest"}),
            ToolCall("analyze_clue", {"signal": "harmonic_sequence"}),
        ])
        assert [r.success for r in results] == [True, True]
        assert decoder_game.state.gathered_names == ["harmonic_sequence"]

    def test_order_matters(self, decoder_game, decoder_tools):
        results = decoder_tools.invoke_batch([
            ToolCall("analyze_clue", {"signal": "harmonic_sequence"}),
            ToolCall("move_to_area", {"area": "crystal_forest"}),
        ])
        assert [r.success for r in results] == [False, True]
        assert decoder_game.state.gathered == []

    def test_rejection_does_not_stop_batch(self, decoder_game, decoder_tools):
        results = decoder_tools.invoke_batch([
            ToolCall("teleport"),
            ToolCall("collect_artifact", {"artifact": "signal_scanner"}),
        ])
        assert not results[0].success
        assert results[1].success
        assert decoder_game.state.inventory == ["signal_scanner"]


class TestGameOverGuard:
    """Mutating tools are rejected once the game is complete."""

    def test_read_only_tool_still_callable(self, travel_game, travel_tools):
        travel_game.state.visited.extend(travel_game.rules.required_cities)
        assert travel_game.is_completed()

        assert travel_tools.invoke("check_routes").success
        result = travel_tools.invoke("travel", {"route_key": "newyork-paris"})
        assert result.error_code == ErrorCode.GAME_OVER

"""
Decoder tools.

Every tool validates all of its preconditions, including energy, before
touching state. A rejected call leaves the game exactly as it was, with
one exception: finalize_discovery always consumes a step.
"""

from __future__ import annotations

from pydantic import Field

from ...engine_core.tool import BaseTool, ErrorCode, NoParams, ToolParams, ToolResult
from ...engine_core.toolbox import Toolbox
from .game import DecoderGame


class DecoderTool(BaseTool):
    game: DecoderGame

    def _insufficient(self, required: int) -> ToolResult:
        return ToolResult.failure(
            f"Insufficient energy. Required: {required}, Available: {self.game.state.energy}",
            ErrorCode.INSUFFICIENT_RESOURCES,
        )

    def _snapshot(self) -> dict:
        state = self.game.state
        return {
            "current_score": state.score,
            "energy_remaining": state.energy,
            "steps_used": state.step_count,
        }


class ExploreConnectionsTool(DecoderTool):
    name = "explore_connections"
    description = (
        "List all connected areas from your current position, including risk levels "
        "and exploration status. Costs 0 energy."
    )

    def execute(self, params: NoParams) -> ToolResult:
        game = self.game
        game.state.step_count += 1

        connections = []
        for area_id in game.current_location.connections:
            area = game.world.location(area_id)
            if area is None:
                continue
            connections.append({
                "name": area_id,
                "explored": area.explored,
                "risk": area.risk.value,
                "energy_cost": area.entry_cost,
                "description": area.description,
            })

        return ToolResult.ok({
            "current_position": game.state.position,
            "connected_areas": connections,
            **self._snapshot(),
        })


class MoveParams(ToolParams):
    area: str = Field(description="Area to move to (must be connected to current position)")


class MoveToAreaTool(DecoderTool):
    name = "move_to_area"
    description = (
        "Move to a connected area. Costs energy based on risk level "
        "(low:1, medium:2, high:3, very_high:4). Updates position and explores."
    )
    params_model = MoveParams

    def execute(self, params: MoveParams) -> ToolResult:
        game = self.game
        state = game.state
        target = game.world.location(params.area)

        if target is None:
            return ToolResult.failure(f"Unknown area: {params.area}", ErrorCode.INVALID_REFERENCE)
        if params.area not in game.current_location.connections:
            return ToolResult.failure(f"{params.area} is not connected to {state.position}")

        cost = target.entry_cost
        if state.energy < cost:
            return self._insufficient(cost)

        state.energy -= cost
        state.step_count += 1
        state.position = params.area

        if target.explored:
            return ToolResult.ok({
                "new_position": params.area,
                "message": "Returned to previously explored area",
                **self._snapshot(),
            })

        target.explored = True
        state.explored.append(params.area)
        explore_bonus = cost * game.rules.explore_bonus_per_cost
        state.score += explore_bonus
        return ToolResult.ok({
            "new_position": params.area,
            "description": target.description,
            "signals_available": [signal.raw for signal in target.signals],
            "artifacts_available": list(target.artifacts),
            "explore_bonus": explore_bonus,
            **self._snapshot(),
        })


class CollectParams(ToolParams):
    artifact: str = Field(description="Artifact to collect")


class CollectArtifactTool(DecoderTool):
    name = "collect_artifact"
    description = (
        "Collect an available artifact in the current area. Costs 1 energy. "
        "Adds to inventory and scores its base value."
    )
    params_model = CollectParams

    def execute(self, params: CollectParams) -> ToolResult:
        game = self.game
        state = game.state
        location = game.current_location
        artifact = game.world.artifact(params.artifact)

        if state.holds(params.artifact):
            return ToolResult.failure(f"Already collected {params.artifact}")
        if artifact is None:
            return ToolResult.failure(f"Unknown artifact: {params.artifact}", ErrorCode.INVALID_REFERENCE)
        if params.artifact not in location.artifacts:
            return ToolResult.failure(
                f"{params.artifact} is not available here. Available: {', '.join(location.artifacts) or 'none'}"
            )

        cost = game.rules.collect_cost
        if state.energy < cost:
            return self._insufficient(cost)

        state.energy -= cost
        state.step_count += 1
        location.artifacts.remove(params.artifact)
        state.inventory.append(params.artifact)
        state.score += artifact.value

        return ToolResult.ok({
            "artifact": artifact.artifact_id,
            "value": artifact.value,
            "hint": artifact.hint,
            **self._snapshot(),
        })


class AnalyzeParams(ToolParams):
    signal: str = Field(description='Signal name to analyze (e.g. "harmonic_sequence")')


class AnalyzeClueTool(DecoderTool):
    name = "analyze_clue"
    description = (
        "Analyze a signal in the current area. Costs 1 energy (0 with vibration_analyzer "
        'in harmonic areas). Pass the signal name (e.g. "harmonic_sequence") or the full signal string.'
    )
    params_model = AnalyzeParams

    def execute(self, params: AnalyzeParams) -> ToolResult:
        game = self.game
        state = game.state
        location = game.current_location

        signal = location.find_signal(params.signal)
        if signal is None:
            available = ", ".join(s.name for s in location.signals)
            return ToolResult.failure(
                f"Signal not available here. Available signals: {available}",
                ErrorCode.INVALID_REFERENCE,
            )
        if signal in state.gathered:
            return ToolResult.failure(f"Already analyzed {signal.name}")

        discounted = game.analyze_discounted()
        cost = game.analyze_cost()
        if state.energy < cost:
            return self._insufficient(cost)

        state.energy -= cost
        state.step_count += 1
        state.gathered.append(signal)
        state.score += game.rules.analysis_bonus

        return ToolResult.ok({
            "signal": signal.raw,
            "signal_name": signal.name,
            "details": signal.detail,
            "energy_cost": cost,
            "reduced_cost": discounted,
            "analysis_bonus": game.rules.analysis_bonus,
            "hint": "Use this signal name with another in decode_signal()",
            **self._snapshot(),
        })


class DecodeParams(ToolParams):
    signal1: str = Field(description='First signal name (e.g. "harmonic_sequence")')
    signal2: str = Field(description='Second signal name (e.g. "basic_frequency")')


class DecodeSignalTool(DecoderTool):
    name = "decode_signal"
    description = (
        "Decode a pair of analyzed signals. Costs 2 energy (1 with signal_scanner). "
        'Pass signal names like "harmonic_sequence" and "basic_frequency".'
    )
    params_model = DecodeParams

    def execute(self, params: DecodeParams) -> ToolResult:
        game = self.game
        state = game.state

        first = state.find_gathered(params.signal1)
        second = state.find_gathered(params.signal2)
        if first is None or second is None:
            gathered = ", ".join(state.gathered_names) or "none"
            return ToolResult.failure(
                f"Missing required clues. Gathered: {gathered}",
                ErrorCode.INVALID_REFERENCE,
            )

        recipe = game.world.recipe_for(first.name, second.name)
        if recipe is None:
            return ToolResult.failure(
                f"Incompatible signals. Try different combinations from: {', '.join(state.gathered_names)}"
            )
        if recipe.pair in state.decoded:
            return ToolResult.failure(f"Already decoded {recipe.pair.key}")

        discounted = game.has_scanner()
        cost = game.decode_cost()
        if state.energy < cost:
            return self._insufficient(cost)

        state.energy -= cost
        state.step_count += 1
        state.decoded.append(recipe.pair)
        state.score += recipe.value
        state.bonuses_earned.append(recipe.bonus)

        return ToolResult.ok({
            "decoded": recipe.decoded,
            "value": recipe.value,
            "bonus": recipe.bonus,
            "energy_cost": cost,
            "reduced_cost": discounted,
            "signals_decoded": len(state.decoded),
            **self._snapshot(),
        })


class UseEnergyCrystalTool(DecoderTool):
    name = "use_energy_crystal"
    description = (
        "Use an energy crystal to restore 5 energy. Costs 0 energy but consumes the crystal. "
        "Must have energy_crystal in inventory."
    )

    def execute(self, params: NoParams) -> ToolResult:
        game = self.game
        state = game.state
        crystal = game.rules.consumable_artifact

        if not state.holds(crystal):
            return ToolResult.failure(f"No {crystal} in inventory - collect it first")

        restored = game.rules.crystal_restore
        state.step_count += 1
        state.inventory.remove(crystal)
        state.energy += restored

        return ToolResult.ok({
            "energy_restored": restored,
            "message": f"Energy crystal consumed, {restored} energy restored",
            **self._snapshot(),
        })


class PlanParams(ToolParams):
    moves: list[str] = Field(description="Planned moves describing your strategy")


class PlanOptimalRouteTool(DecoderTool):
    name = "plan_optimal_route"
    description = "Plan and think through an optimal route without executing moves. Costs 0 energy."
    params_model = PlanParams

    def execute(self, params: PlanParams) -> ToolResult:
        self.game.state.step_count += 1
        return ToolResult.ok({"moves": list(params.moves), **self._snapshot()})


class HypothesisParams(ToolParams):
    hypothesis: str = Field(min_length=1, description="Your current theory about the signal source")


class RecordHypothesisTool(DecoderTool):
    name = "record_hypothesis"
    description = (
        "Record a hypothesis about the central signal. Costs 0 energy. "
        "Each recorded hypothesis earns a reflection bonus in the final score."
    )
    params_model = HypothesisParams

    def execute(self, params: HypothesisParams) -> ToolResult:
        state = self.game.state
        state.step_count += 1
        state.hypotheses.append(params.hypothesis)
        return ToolResult.ok({
            "hypotheses_recorded": len(state.hypotheses),
            **self._snapshot(),
        })


class FinalizeParams(ToolParams):
    final_hypothesis: str = Field(description="Your final theory on the signal source")


class FinalizeDiscoveryTool(DecoderTool):
    name = "finalize_discovery"
    description = (
        "Finalize your exploration by decoding the core signal. "
        "Ends the game if you are at signal_source with 3+ decoded signals."
    )
    params_model = FinalizeParams

    def execute(self, params: FinalizeParams) -> ToolResult:
        game = self.game
        state = game.state
        rules = game.rules

        # The attempt consumes a turn whether or not it succeeds
        state.step_count += 1

        if state.position != game.goal:
            return ToolResult.failure(f"Must be at {game.goal} to finalize discovery")
        if len(state.decoded) < rules.min_decodes:
            return ToolResult.failure(
                f"Need at least {rules.min_decodes} decoded signals. Currently have: {len(state.decoded)}"
            )

        state.completed = True
        state.final_hypothesis = params.final_hypothesis
        omega_bonus = rules.scoring.completion_bonus
        state.score += omega_bonus
        state.bonuses_earned.append(rules.completion_tag)

        breakdown = game.score_breakdown()
        final_score = sum(breakdown.values())
        ranking = game.ranking()
        return ToolResult.ok({
            "game_ended": True,
            "omega_bonus": omega_bonus,
            **breakdown,
            "final_score": final_score,
            "steps_used": state.step_count,
            "areas_explored": len(state.explored),
            "clues_gathered": len(state.gathered),
            "signals_decoded": len(state.decoded),
            "final_hypothesis": params.final_hypothesis,
            "ranking": ranking,
            "message": f"OMEGA REVELATION UNLOCKED! Final Score: {final_score} points! Rank: {ranking}",
        })


TOOL_CLASSES = [
    ExploreConnectionsTool,
    MoveToAreaTool,
    CollectArtifactTool,
    AnalyzeClueTool,
    DecodeSignalTool,
    UseEnergyCrystalTool,
    PlanOptimalRouteTool,
    RecordHypothesisTool,
    FinalizeDiscoveryTool,
]


def create_toolbox(game: DecoderGame) -> Toolbox:
    return Toolbox(tool_cls(game) for tool_cls in TOOL_CLASSES)

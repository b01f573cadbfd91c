"""
Prompts handed to the orchestrator for the decoder game.

The map reference is rendered from the world database so it cannot drift
from the data the tools use.
"""

from __future__ import annotations

from .data import ARTIFACTS, LOCATIONS, RECIPES
from .state import DecoderRules


def _map_reference() -> str:
    lines = []
    for location_id, _, risk, connections, signals, artifacts in LOCATIONS:
        lines.append(f"{location_id} ({risk.value} risk, connections: {', '.join(connections)})")
        lines.append(f"  Signals: {', '.join(raw.split(':', 1)[0] for raw in signals)}")
        lines.append(f"  Artifacts: {', '.join(artifacts)}")
        lines.append("")
    return "\n".join(lines).rstrip()


def _recipe_reference() -> str:
    return "\n".join(
        f"{idx}. {a} + {b} -> {decoded} ({value} pts)"
        for idx, (a, b, decoded, value, _) in enumerate(RECIPES, start=1)
    )


def _artifact_abilities(rules: DecoderRules) -> str:
    special = {rules.scanner_artifact, rules.consumable_artifact, rules.vibration_artifact, "symbol_decoder"}
    return "\n".join(f"- {a.artifact_id}: {a.hint}" for a in ARTIFACTS if a.artifact_id in special)


def system_prompt(rules: DecoderRules) -> str:
    scoring = rules.scoring
    return f"""You are an expert alien signal decoder exploring a mysterious planet to uncover its central secret signal.

GOAL:
Reach 'signal_source' with {rules.min_decodes}+ decoded signals and call finalize_discovery() to complete the mission and unlock Omega ({scoring.completion_bonus} pts)!

GAME RULES:
- Start at landing_zone with {rules.start_energy} energy
- Actions cost energy (move: 1-4 based on risk, collect: {rules.collect_cost}, analyze: {rules.analyze_cost}, decode: {rules.decode_cost})
- Some artifacts provide special abilities when collected
- Max {rules.max_steps} steps total - plan carefully!

SIGNAL NAMES:
- Signals look like "harmonic_sequence: Gamma harmonics...". Use just the NAME part
- Example: analyze_clue("harmonic_sequence"), decode_signal("basic_frequency", "harmonic_sequence")

SCORING (all bonuses stack):
- Base: exploring areas (+10-40), collecting artifacts (+15-100), analyzing clues (+{rules.analysis_bonus}), decoding signals (+90-150)
- Energy bonus: {scoring.resource_unit_bonus} pts per remaining energy
- Efficiency bonus: {scoring.low_efficiency_bonus} pts if avg score/step >{scoring.low_efficiency_threshold:g}, {scoring.high_efficiency_bonus} pts if >{scoring.high_efficiency_threshold:g}
- Reflection bonus: {scoring.reflection_bonus} pts per hypothesis recorded with record_hypothesis()

STRATEGY TIPS:
1. Use plan_optimal_route() at the start to think through your strategy (0 energy, 1 step)
2. Use explore_connections() to see where you can go (0 energy, 1 step)
3. Collect artifacts early - some reduce energy costs significantly
4. Prioritize low risk areas to conserve energy
5. Call several tools in one turn to save steps - they run in the order you give them

ARTIFACT ABILITIES:
{_artifact_abilities(rules)}

COMPLETE MAP REFERENCE:
{_map_reference()}

VALID SIGNAL COMBINATIONS ({len(RECIPES)} total - decode {rules.min_decodes}+ to win):
{_recipe_reference()}
"""


def user_prompt(rules: DecoderRules) -> str:
    return (
        f"You are exploring an alien planet to decode its mystery signal. You have {rules.max_steps} steps "
        f"and {rules.start_energy} energy. Explore areas, collect artifacts, analyze signals, and decode "
        f"patterns to reach signal_source with {rules.min_decodes}+ decoded signals. Use explore_connections() "
        "to see available paths and plan_optimal_route() to plan strategy."
    )

"""
Decoder world database.

build_world() returns a fresh World each call, so resetting a game never
shares mutable locations with a previous run.
"""

from __future__ import annotations

from .world import Artifact, DecodeRecipe, Location, RiskTier, Signal, SignalPair, World

START_LOCATION = "landing_zone"
GOAL_LOCATION = "signal_source"

# (id, description, risk, connections, signals, artifacts)
LOCATIONS = [
    (
        "landing_zone",
        "Your starting point with basic equipment and faint signal readings.",
        RiskTier.LOW,
        ["volcanic_plains", "crystal_forest"],
        ["basic_frequency: Alpha waves detected - pattern repeats every 3 units"],
        ["signal_scanner", "energy_crystal"],
    ),
    (
        "volcanic_plains",
        "Hot, rocky terrain with geothermal activity and strong interference.",
        RiskTier.MEDIUM,
        ["landing_zone", "underground_caverns", "ancient_ruins"],
        ["interference_pattern: Beta spikes - correlates with heat sources, offset by 2"],
        ["heat_resistant_probe", "lava_sample"],
    ),
    (
        "crystal_forest",
        "Dense forest of glowing crystals emitting harmonic vibrations.",
        RiskTier.LOW,
        ["landing_zone", "hidden_lake", "ancient_ruins"],
        ["harmonic_sequence: Gamma harmonics - builds on alpha, multiplies by 1.5"],
        ["vibration_analyzer", "crystal_shard"],
    ),
    (
        "underground_caverns",
        "Dark caves with echoing sounds and hidden chambers.",
        RiskTier.HIGH,
        ["volcanic_plains", "signal_source"],
        ["echo_code: Delta echoes - reflects beta, inverts every 4th unit"],
        ["echo_locator", "fossil_remnant"],
    ),
    (
        "hidden_lake",
        "Serene lake with bioluminescent waters and submerged relics.",
        RiskTier.MEDIUM,
        ["crystal_forest", "signal_source"],
        ["wave_ripple: Epsilon ripples - combines gamma and alpha, averages values"],
        ["water_sampler", "aquatic_artifact"],
    ),
    (
        "ancient_ruins",
        "Ruined structures with engraved symbols and faded tech.",
        RiskTier.MEDIUM,
        ["volcanic_plains", "crystal_forest"],
        ["symbol_cipher: Zeta symbols - synthesizes beta and delta, shifts by 3"],
        ["symbol_decoder", "engraved_tablet"],
    ),
    (
        "signal_source",
        "The core mystery site with overwhelming signal strength.",
        RiskTier.VERY_HIGH,
        ["underground_caverns", "hidden_lake"],
        ["core_transmission: Omega core - integrates all patterns, solve with combined clues"],
        ["master_artifact"],
    ),
]

ARTIFACTS = [
    Artifact("signal_scanner", 20, "tool", ("decode_signal",), "Reduces decode energy cost from 2 to 1"),
    Artifact("energy_crystal", 15, "resource", ("restore_energy",), "Use to restore 5 energy (one-time consumable)"),
    Artifact("heat_resistant_probe", 30, "tool", ("explore_high_risk",), "Provides data about thermal patterns"),
    Artifact("lava_sample", 25, "sample", ("analyze_clue",), "Contains thermal data useful for pattern analysis"),
    Artifact("vibration_analyzer", 35, "tool", ("decode_signal",), "Reduces analyze cost to 0 in harmonic/crystal areas"),
    Artifact("crystal_shard", 20, "sample", ("combine_artifacts",), "Crystalline sample with harmonic properties"),
    Artifact("echo_locator", 40, "tool", ("navigate",), "Helps map underground connections"),
    Artifact("fossil_remnant", 30, "sample", ("analyze_clue",), "Ancient biological data for pattern recognition"),
    Artifact("water_sampler", 25, "tool", ("explore_medium_risk",), "Useful for analyzing aquatic signals"),
    Artifact("aquatic_artifact", 35, "relic", ("combine_artifacts",), "Ancient tech from submerged ruins"),
    Artifact("symbol_decoder", 45, "tool", ("decode_signal",), "Translates ancient cipher symbols"),
    Artifact("engraved_tablet", 40, "relic", ("analyze_clue",), "Contains key cipher patterns"),
    Artifact("master_artifact", 100, "core", ("final_decode",), "Central mystery artifact at signal source"),
]

# (signal a, signal b, decoded label, value, bonus tag)
RECIPES = [
    ("basic_frequency", "harmonic_sequence", "Alpha-Gamma Harmonic Link", 100, "pattern_chain"),
    ("interference_pattern", "echo_code", "Beta-Delta Thermal Echo", 120, "risk_reward"),
    ("wave_ripple", "symbol_cipher", "Epsilon-Zeta Ancient Code", 150, "synthesis"),
    ("basic_frequency", "interference_pattern", "Alpha-Beta Baseline", 90, "foundation"),
    ("harmonic_sequence", "wave_ripple", "Gamma-Epsilon Resonance", 110, "resonance"),
    ("echo_code", "symbol_cipher", "Delta-Zeta Underground Cipher", 130, "ancient_link"),
]


def build_world() -> World:
    locations = {}
    for location_id, description, risk, connections, signals, artifacts in LOCATIONS:
        locations[location_id] = Location(
            location_id=location_id,
            description=description,
            risk=risk,
            connections=list(connections),
            signals=[Signal.parse(raw) for raw in signals],
            artifacts=list(artifacts),
            explored=location_id == START_LOCATION,
        )

    recipes = {}
    for a, b, decoded, value, bonus in RECIPES:
        pair = SignalPair.of(a, b)
        recipes[pair] = DecodeRecipe(pair=pair, decoded=decoded, value=value, bonus=bonus)

    return World(
        locations=locations,
        artifacts={artifact.artifact_id: artifact for artifact in ARTIFACTS},
        recipes=recipes,
    )

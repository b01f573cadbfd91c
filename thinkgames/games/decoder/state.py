"""
Decoder game state and rules.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from ...engine_core.scoring import ScoringRules
from .world import Signal, SignalPair


@dataclass(frozen=True)
class DecoderRules:
    """Costs, bonuses and thresholds for the decoder game."""
    start_energy: int = 30
    max_steps: int = 20

    collect_cost: int = 1
    analyze_cost: int = 1
    decode_cost: int = 2
    scanner_decode_cost: int = 1
    crystal_restore: int = 5

    explore_bonus_per_cost: int = 10
    analysis_bonus: int = 30
    min_decodes: int = 3

    # Modifier artifacts
    scanner_artifact: str = "signal_scanner"
    vibration_artifact: str = "vibration_analyzer"
    consumable_artifact: str = "energy_crystal"
    harmonic_markers: tuple[str, ...] = ("harmonic", "Gamma")

    completion_tag: str = "omega_revelation"
    scoring: ScoringRules = field(default_factory=ScoringRules)


@dataclass
class DecoderState:
    """
    Mutable player state.

    Mutated only by the decoder tools. completed is set once, by
    finalize_discovery, and never cleared.
    """
    position: str
    energy: int
    inventory: list[str] = field(default_factory=list)
    explored: list[str] = field(default_factory=list)
    gathered: list[Signal] = field(default_factory=list)
    decoded: list[SignalPair] = field(default_factory=list)
    hypotheses: list[str] = field(default_factory=list)
    bonuses_earned: list[str] = field(default_factory=list)
    score: int = 0
    step_count: int = 0
    completed: bool = False
    final_hypothesis: str | None = None

    def holds(self, artifact_id: str) -> bool:
        return artifact_id in self.inventory

    def find_gathered(self, reference: str) -> Signal | None:
        for signal in self.gathered:
            if signal.matches(reference):
                return signal
        return None

    @property
    def gathered_names(self) -> list[str]:
        return [signal.name for signal in self.gathered]

    def snapshot(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "energy": self.energy,
            "inventory": list(self.inventory),
            "explored": list(self.explored),
            "gathered_clues": [signal.raw for signal in self.gathered],
            "decoded_signals": [pair.key for pair in self.decoded],
            "hypotheses": list(self.hypotheses),
            "bonuses_earned": list(self.bonuses_earned),
            "score": self.score,
            "step_count": self.step_count,
            "completed": self.completed,
        }

"""
Alien Signal Decoder

A strategic exploration and puzzle game: navigate an alien planet, gather
signals and artifacts, decode signal pairs and reach the signal source.

Tests reasoning, information gathering, resource management and
adaptive planning.
"""

from __future__ import annotations

from ...engine_core.scoring import efficiency, efficiency_bonus, ranking_tier, resource_bonus
from .data import GOAL_LOCATION, START_LOCATION, build_world
from .state import DecoderRules, DecoderState
from .world import Location, World


class DecoderGame:
    """
    One decoder game instance: world database plus player state.

    Cost modifiers are resolved on every call from the current inventory
    and position; nothing is cached.
    """

    def __init__(self, rules: DecoderRules | None = None):
        self.rules = rules or DecoderRules()
        self.world: World
        self.state: DecoderState
        self.init()

    def init(self) -> None:
        self.world = build_world()
        self.state = DecoderState(
            position=START_LOCATION,
            energy=self.rules.start_energy,
            explored=[START_LOCATION],
        )

    def is_completed(self) -> bool:
        return self.state.completed

    @property
    def goal(self) -> str:
        return GOAL_LOCATION

    @property
    def current_location(self) -> Location:
        return self.world.locations[self.state.position]

    # =========================================================================
    # Modifier resolution
    # =========================================================================

    def has_scanner(self) -> bool:
        return self.state.holds(self.rules.scanner_artifact)

    def analyze_discounted(self) -> bool:
        """Vibration analyzer zeroes analysis in locations with a harmonic signal."""
        return (
            self.state.holds(self.rules.vibration_artifact)
            and self.current_location.has_signal_marker(self.rules.harmonic_markers)
        )

    def analyze_cost(self) -> int:
        return 0 if self.analyze_discounted() else self.rules.analyze_cost

    def decode_cost(self) -> int:
        return self.rules.scanner_decode_cost if self.has_scanner() else self.rules.decode_cost

    # =========================================================================
    # Scoring
    # =========================================================================

    def score_breakdown(self) -> dict[str, int]:
        scoring = self.rules.scoring
        return {
            "base_score": self.state.score,
            "energy_bonus": resource_bonus(self.state.energy, scoring),
            "efficiency_bonus": efficiency_bonus(self.state.score, self.state.step_count, scoring),
            "reflection_bonus": len(self.state.hypotheses) * scoring.reflection_bonus,
        }

    def get_final_score(self) -> int:
        return sum(self.score_breakdown().values())

    def efficiency(self) -> float:
        return efficiency(self.state.score, self.state.step_count)

    def ranking(self) -> str:
        return ranking_tier(self.get_final_score(), self.rules.scoring)

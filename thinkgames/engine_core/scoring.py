"""
Scoring - Bonus rules shared by the games.

Thresholds and amounts are fixed tuning constants.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringRules:
    """Final-score bonus constants."""
    resource_unit_bonus: int = 10  # Points per unit of remaining energy
    high_efficiency_threshold: float = 100.0  # Score per step
    high_efficiency_bonus: int = 200
    low_efficiency_threshold: float = 50.0
    low_efficiency_bonus: int = 100
    reflection_bonus: int = 50  # Points per recorded hypothesis
    completion_bonus: int = 500

    # (exclusive lower bound, tier), highest first
    ranking_tiers: tuple[tuple[int, str], ...] = (
        (1500, "MASTER DECODER"),
        (1000, "EXPERT DECODER"),
        (600, "SKILLED DECODER"),
    )
    lowest_tier: str = "NOVICE DECODER"


DEFAULT_SCORING = ScoringRules()


def efficiency(score: int, step_count: int) -> float:
    """Score per step; 0 before any step was taken."""
    if step_count <= 0:
        return 0.0
    return score / step_count


def efficiency_bonus(score: int, step_count: int, rules: ScoringRules = DEFAULT_SCORING) -> int:
    ratio = efficiency(score, step_count)
    if ratio > rules.high_efficiency_threshold:
        return rules.high_efficiency_bonus
    if ratio > rules.low_efficiency_threshold:
        return rules.low_efficiency_bonus
    return 0


def resource_bonus(remaining: int, rules: ScoringRules = DEFAULT_SCORING) -> int:
    return remaining * rules.resource_unit_bonus


def ranking_tier(final_score: int, rules: ScoringRules = DEFAULT_SCORING) -> str:
    """Map a final score onto the ordered ranking tiers."""
    for threshold, tier in rules.ranking_tiers:
        if final_score > threshold:
            return tier
    return rules.lowest_tier

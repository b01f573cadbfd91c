"""
Session Module - Playthroughs, sessions and their recorded outcomes.

Game state is ephemeral (in memory, per session). The only persistence is
the per-game results file written when a playthrough finishes.
"""

from .manager import Session, SessionManager, SessionState
from .playthrough import Playthrough, PlaythroughReport
from .results import PlaythroughRecord, ResultStore, load_results
from .stats import AgentStats, RankingEntry, StatsReport, UseCase, calculate_stats

__all__ = [
    "Session",
    "SessionManager",
    "SessionState",
    "Playthrough",
    "PlaythroughReport",
    "PlaythroughRecord",
    "ResultStore",
    "load_results",
    "AgentStats",
    "RankingEntry",
    "StatsReport",
    "UseCase",
    "calculate_stats",
]

"""
Statistics - Aggregates persisted playthroughs into per-agent stats and rankings.

Pure read-and-reduce over finished records; nothing here touches a game.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any
import math

from .results import PlaythroughRecord, ResultCollection


@dataclass
class AgentStats:
    agent: str
    runs: int
    completed: int
    failed: int
    success_rate: float  # Percent

    average_score: float
    median_score: float
    min_score: float
    max_score: float
    score_sum: float
    score_variance: float
    score_std_dev: float
    coefficient_of_variation: float
    percentiles: dict[str, float]

    average_time: float  # Completed runs only
    time_std_dev: float
    average_tool_calls: float
    score_per_tool_call: float
    score_per_second: float
    consistency: float  # 100 - coefficient of variation

    best_run: dict[str, float] = field(default_factory=dict)
    worst_run: dict[str, float] = field(default_factory=dict)


@dataclass
class RankingEntry:
    rank: int
    agent: str
    value: float
    unit: str


@dataclass
class UseCase:
    """An agent suggested for a kind of workload, with the ranking value behind it."""
    agent: str
    reason: str
    value: float


@dataclass
class StatsReport:
    total_agents: int
    total_runs: int
    agents: dict[str, AgentStats]
    rankings: dict[str, list[RankingEntry]]
    recommendations: dict[str, str]
    use_cases: dict[str, UseCase] = field(default_factory=dict)
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _pvariance(values: list[float]) -> float:
    if not values:
        return 0.0
    avg = _mean(values)
    return sum((v - avg) ** 2 for v in values) / len(values)


def _percentile(sorted_values: list[float], fraction: float) -> float:
    index = min(int(len(sorted_values) * fraction), len(sorted_values) - 1)
    return sorted_values[index]


def _run_summary(run: PlaythroughRecord) -> dict[str, float]:
    return {"score": run.score, "time": run.time, "tool_calls": run.tool_calls}


def agent_stats(agent: str, runs: list[PlaythroughRecord]) -> AgentStats:
    """Stats for one agent. runs must be non-empty."""
    count = len(runs)
    scores = [float(r.score) for r in runs]
    completed_runs = [r for r in runs if r.completed]

    average = _mean(scores)
    variance = _pvariance(scores)
    std_dev = math.sqrt(variance)
    cv = (std_dev / average) * 100 if average else 0.0
    sorted_scores = sorted(scores)

    completed_times = [r.time for r in completed_runs]
    avg_time = _mean(completed_times)
    avg_tool_calls = _mean([float(r.tool_calls) for r in runs])

    best = max(runs, key=lambda r: r.score)
    worst = min(runs, key=lambda r: r.score)

    return AgentStats(
        agent=agent,
        runs=count,
        completed=len(completed_runs),
        failed=count - len(completed_runs),
        success_rate=len(completed_runs) / count * 100,
        average_score=average,
        median_score=_percentile(sorted_scores, 0.5),
        min_score=sorted_scores[0],
        max_score=sorted_scores[-1],
        score_sum=sum(scores),
        score_variance=variance,
        score_std_dev=std_dev,
        coefficient_of_variation=cv,
        percentiles={
            "p25": _percentile(sorted_scores, 0.25),
            "p50": _percentile(sorted_scores, 0.5),
            "p75": _percentile(sorted_scores, 0.75),
            "p90": _percentile(sorted_scores, 0.90),
            "p95": _percentile(sorted_scores, 0.95),
        },
        average_time=avg_time,
        time_std_dev=math.sqrt(_pvariance(completed_times)),
        average_tool_calls=avg_tool_calls,
        score_per_tool_call=average / avg_tool_calls if avg_tool_calls > 0 else 0.0,
        score_per_second=average / avg_time if avg_time > 0 else 0.0,
        consistency=100 - cv,
        best_run=_run_summary(best),
        worst_run=_run_summary(worst),
    )


def _rank(stats: list[AgentStats], attr: str, unit: str, positive_only: bool = False) -> list[RankingEntry]:
    candidates = [s for s in stats if not positive_only or getattr(s, attr) > 0]
    ordered = sorted(candidates, key=lambda s: getattr(s, attr), reverse=True)
    return [
        RankingEntry(rank=idx, agent=s.agent, value=getattr(s, attr), unit=unit)
        for idx, s in enumerate(ordered, start=1)
    ]


def calculate_stats(results: ResultCollection) -> StatsReport:
    """Per-agent statistics plus rankings across agents."""
    stats = [agent_stats(agent, runs) for agent, runs in results.items() if runs]

    rankings = {
        "by_average_score": _rank(stats, "average_score", "points"),
        "by_success_rate": _rank(stats, "success_rate", "percentage"),
        "by_speed": _rank(stats, "score_per_second", "points/second", positive_only=True),
        "by_efficiency": _rank(stats, "score_per_tool_call", "points/tool call"),
        "by_consistency": _rank(stats, "consistency", "consistency score"),
    }

    def top(key: str) -> str:
        entries = rankings[key]
        return entries[0].agent if entries else "N/A"

    recommendations = {
        "best_overall": top("by_average_score"),
        "fastest": top("by_speed"),
        "most_efficient": top("by_efficiency"),
        "most_reliable": top("by_success_rate"),
        "most_consistent": top("by_consistency"),
    }

    use_cases = _use_cases(rankings) if stats else {}

    return StatsReport(
        total_agents=len(stats),
        total_runs=sum(s.runs for s in stats),
        agents={s.agent: s for s in stats},
        rankings=rankings,
        recommendations=recommendations,
        use_cases=use_cases,
    )


def _use_cases(rankings: dict[str, list[RankingEntry]]) -> dict[str, UseCase]:
    """Workload suggestions. Rapid prototyping falls back to average score when no agent has a speed."""
    def pick(entries: list[RankingEntry], reason: str) -> UseCase:
        return UseCase(agent=entries[0].agent, reason=reason, value=entries[0].value)

    return {
        "critical_production": pick(
            rankings["by_success_rate"], "Highest success rate ensures reliable completions"
        ),
        "rapid_prototyping": pick(
            rankings["by_speed"] or rankings["by_average_score"], "Fastest execution for quick iterations"
        ),
        "tool_efficiency": pick(rankings["by_efficiency"], "Maximizes output per tool call"),
        "consistent_performance": pick(rankings["by_consistency"], "Most predictable and stable results"),
    }

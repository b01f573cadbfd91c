"""
Tests for result statistics and rankings.
"""

import pytest

from ..session.stats import agent_stats, calculate_stats


class TestAgentStats:

    def test_completed_agent(self, sample_records):
        stats = agent_stats("fast-model", sample_records["fast-model"])

        assert stats.runs == 2
        assert stats.completed == 2
        assert stats.success_rate == 100.0
        assert stats.average_score == 1200.0
        assert stats.score_std_dev == pytest.approx(100.0)
        assert stats.coefficient_of_variation == pytest.approx(100 / 12)
        assert stats.consistency == pytest.approx(100 - 100 / 12)
        assert stats.average_time == 25.0
        assert stats.score_per_second == pytest.approx(48.0)
        assert stats.score_per_tool_call == pytest.approx(1200 / 21)
        assert stats.best_run["score"] == 1300
        assert stats.worst_run["score"] == 1100

    def test_spread_fields(self, sample_records):
        fast = agent_stats("fast-model", sample_records["fast-model"])
        assert fast.score_sum == 2400
        assert fast.score_variance == pytest.approx(10000.0)
        # completed run times 20s and 30s
        assert fast.time_std_dev == pytest.approx(5.0)

        slow = agent_stats("slow-model", sample_records["slow-model"])
        assert slow.time_std_dev == 0.0

    def test_percentiles_index_into_sorted_scores(self, sample_records):
        stats = agent_stats("fast-model", sample_records["fast-model"])
        assert stats.min_score == 1100
        assert stats.max_score == 1300
        assert stats.percentiles["p25"] == 1100
        assert stats.percentiles["p50"] == 1300
        assert stats.median_score == 1300

    def test_time_averaged_over_completed_runs_only(self, sample_records):
        stats = agent_stats("slow-model", sample_records["slow-model"])
        assert stats.success_rate == 0.0
        assert stats.failed == 2
        assert stats.average_time == 0.0
        assert stats.score_per_second == 0.0


class TestCalculateStats:

    def test_rankings(self, sample_records):
        report = calculate_stats(sample_records)

        assert report.total_agents == 2
        assert report.total_runs == 4
        by_score = report.rankings["by_average_score"]
        assert [(e.rank, e.agent) for e in by_score] == [(1, "fast-model"), (2, "slow-model")]
        assert [e.agent for e in report.rankings["by_consistency"]] == ["fast-model", "slow-model"]

    def test_speed_ranking_skips_agents_without_completions(self, sample_records):
        report = calculate_stats(sample_records)
        assert [e.agent for e in report.rankings["by_speed"]] == ["fast-model"]

    def test_recommendations(self, sample_records):
        report = calculate_stats(sample_records)
        assert report.recommendations == {
            "best_overall": "fast-model",
            "fastest": "fast-model",
            "most_efficient": "fast-model",
            "most_reliable": "fast-model",
            "most_consistent": "fast-model",
        }

    def test_use_cases(self, sample_records):
        use_cases = calculate_stats(sample_records).use_cases

        assert use_cases["critical_production"].agent == "fast-model"
        assert use_cases["critical_production"].value == 100.0
        assert use_cases["rapid_prototyping"].value == pytest.approx(48.0)
        assert set(use_cases) == {
            "critical_production", "rapid_prototyping", "tool_efficiency", "consistent_performance",
        }

    def test_rapid_prototyping_falls_back_to_average_score(self, sample_records):
        report = calculate_stats({"slow-model": sample_records["slow-model"]})

        assert report.rankings["by_speed"] == []
        assert report.recommendations["fastest"] == "N/A"
        assert report.use_cases["rapid_prototyping"].agent == "slow-model"
        assert report.use_cases["rapid_prototyping"].value == 500.0

    def test_empty_results(self):
        report = calculate_stats({})
        assert report.total_agents == 0
        assert report.recommendations["best_overall"] == "N/A"
        assert report.use_cases == {}

    def test_report_serializes(self, sample_records):
        data = calculate_stats(sample_records).to_dict()
        assert data["agents"]["fast-model"]["runs"] == 2
        assert data["rankings"]["by_speed"][0]["unit"] == "points/second"

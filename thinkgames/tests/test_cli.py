"""
Tests for the command-line interface.
"""

import json

import pytest

from ..cli import main


class TestCLI:

    def test_games(self, capsys):
        main(["games"])
        out = capsys.readouterr().out
        assert "decoder" in out
        assert "travel" in out

    def test_tools_prints_schemas(self, capsys):
        main(["tools", "travel"])
        tools = json.loads(capsys.readouterr().out)
        assert [t["name"] for t in tools] == ["check_routes", "travel", "plan_route"]

    def test_unknown_game_exits(self, capsys):
        with pytest.raises(SystemExit):
            main(["tools", "chess"])
        assert "Unknown game" in capsys.readouterr().out

    def test_play_and_stats(self, tmp_path, capsys, winning_turns):
        turns_file = tmp_path / "turns.json"
        turns_file.write_text(json.dumps(winning_turns))
        results_dir = tmp_path / "results"

        main(["play", "decoder", str(turns_file), "--agent", "scripted", "--results-dir", str(results_dir)])
        out = capsys.readouterr().out
        assert "MISSION ACCOMPLISHED" in out
        assert "Final score: 1320" in out

        report_file = tmp_path / "report.json"
        main(["stats", str(results_dir / "decoder.json"), "-o", str(report_file)])
        out = capsys.readouterr().out
        assert "1. scripted: 1320 points" in out
        assert json.loads(report_file.read_text())["total_runs"] == 1

    def test_play_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main(["play", "decoder", str(tmp_path / "nope.json"), "--agent", "x", "--no-record"])
        assert "File not found" in capsys.readouterr().out

    def test_play_malformed_turns(self, tmp_path, capsys):
        turns_file = tmp_path / "turns.json"
        turns_file.write_text(json.dumps([[{"params": {}}], [{"name": "explore_connections"}]]))

        main(["play", "decoder", str(turns_file), "--agent", "x", "--no-record"])

        out = capsys.readouterr().out
        assert "missing a name" in out
        assert "2 turns, 2 tool calls" in out

    def test_play_rejects_non_list_file(self, tmp_path, capsys):
        turns_file = tmp_path / "turns.json"
        turns_file.write_text("42")
        with pytest.raises(SystemExit):
            main(["play", "decoder", str(turns_file), "--agent", "x", "--no-record"])
        assert "expected a JSON list" in capsys.readouterr().out

    def test_stats_on_empty_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["stats", str(tmp_path / "missing.json")])

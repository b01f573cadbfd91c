"""
Thinkgames CLI - Command-line interface for the engine.

Usage:
    thinkgames games                                  List available games
    thinkgames tools <game>                           Print tool schemas as JSON
    thinkgames play <game> <turns_file> --agent NAME  Replay scripted turns and record the result
    thinkgames stats <results_file>                   Rank agents from a results file
    thinkgames serve [--host H] [--port P]            Run the HTTP API

A turns file is a JSON list of turns; each turn is a list of
{"name": ..., "params": {...}} tool calls.
"""

import argparse
import json
import logging
import sys

from .config import THINKGAMES_LOG_LEVEL, THINKGAMES_RESULTS_DIR


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Thinkgames - Tool-driven puzzle games for reasoning agents",
        prog="thinkgames",
    )
    parser.add_argument("--log-level", default=THINKGAMES_LOG_LEVEL, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("games", help="List available games")

    tools_parser = subparsers.add_parser("tools", help="Print a game's tool schemas")
    tools_parser.add_argument("game", help="Game key")

    play_parser = subparsers.add_parser("play", help="Replay scripted turns against a game")
    play_parser.add_argument("game", help="Game key")
    play_parser.add_argument("turns_file", help="JSON file of turns")
    play_parser.add_argument("--agent", required=True, help="Agent name to record results under")
    play_parser.add_argument("--results-dir", default=THINKGAMES_RESULTS_DIR, help="Directory for results files")
    play_parser.add_argument("--no-record", action="store_true", help="Do not write a results record")

    stats_parser = subparsers.add_parser("stats", help="Aggregate a results file")
    stats_parser.add_argument("results_file", help="Path to <game>.json results")
    stats_parser.add_argument("--output", "-o", help="Write the full report as JSON")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "games":
        cmd_games(args)
    elif args.command == "tools":
        cmd_tools(args)
    elif args.command == "play":
        cmd_play(args)
    elif args.command == "stats":
        cmd_stats(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def _create_game_or_exit(key):
    from .games import create_game

    try:
        return create_game(key)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_games(args):
    """List available games."""
    from .games import GAMES

    for key, factory in GAMES.items():
        definition = factory()
        print(f"{key:10} {definition.name} ({definition.max_steps} steps, {len(definition.tools)} tools)")


def cmd_tools(args):
    """Print tool schemas for a game."""
    definition = _create_game_or_exit(args.game)
    print(json.dumps(definition.tools.describe(), indent=2))


def cmd_play(args):
    """Replay a turns file and record the outcome."""
    from .session import Playthrough, ResultStore

    definition = _create_game_or_exit(args.game)
    try:
        with open(args.turns_file, "r", encoding="utf-8") as f:
            turns = json.load(f)
    except FileNotFoundError:
        print(f"Error: File not found: {args.turns_file}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid turns file: {e}")
        sys.exit(1)
    if not isinstance(turns, list):
        print("Error: Invalid turns file: expected a JSON list of turns")
        sys.exit(1)

    store = None if args.no_record else ResultStore(args.results_dir)
    report = Playthrough(definition, agent_name=args.agent, store=store).run(turns)

    for turn_idx, results in enumerate(report.results, start=1):
        for result in results:
            status = "ok " if result.success else "err"
            print(f"[{turn_idx:2}] {status} {json.dumps(result.to_payload())}")

    print()
    print("MISSION ACCOMPLISHED" if report.completed else "MISSION INCOMPLETE")
    print(
        f"{report.turns} turns, {report.tool_calls} tool calls, "
        f"{report.tool_calls_per_turn:.1f} tool calls/turn, {report.duration:.1f}s"
    )
    print(f"Final score: {report.final_score}")


def cmd_stats(args):
    """Aggregate a results file into rankings."""
    from .session import calculate_stats, load_results

    report = calculate_stats(load_results(args.results_file))
    if not report.agents:
        print(f"No results in {args.results_file}")
        sys.exit(1)

    print(f"Agents: {report.total_agents}  Runs: {report.total_runs}")
    for title, key, fmt in [
        ("AVERAGE SCORE", "by_average_score", "{:.0f} points"),
        ("SUCCESS RATE", "by_success_rate", "{:.1f}%"),
        ("SPEED (score/second)", "by_speed", "{:.2f} points/sec"),
        ("EFFICIENCY (score/tool call)", "by_efficiency", "{:.2f} points/call"),
    ]:
        print(f"\n=== RANKING BY {title} ===")
        for entry in report.rankings[key]:
            print(f"{entry.rank}. {entry.agent}: {fmt.format(entry.value)}")

    print("\n=== RECOMMENDATIONS ===")
    for label, agent in report.recommendations.items():
        print(f"{label.replace('_', ' ').title()}: {agent}")
    for label, use_case in report.use_cases.items():
        print(f"  {label.replace('_', ' ').title()}: {use_case.agent} ({use_case.reason})")

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2)
        print(f"\nReport written to {args.output}")


def cmd_serve(args):
    """Run the HTTP API under uvicorn."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install thinkgames[server]")
        sys.exit(1)

    from .api.app import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()

"""
Thinkgames - Tool-driven puzzle engines for reasoning agents.

Each game is a small deterministic engine whose only mutation surface is a
set of validated tools. An external orchestrator (usually a language model
loop) calls the tools turn by turn. The package provides:
- The tool contract and dispatch boundary
- Two game variants (signal decoder, travel planner)
- Scoring and finalization
- Result persistence and aggregate statistics
"""

__version__ = "0.1.0"

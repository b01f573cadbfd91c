"""
Result Store - Persists completed playthroughs.

One JSON file per game (<results_dir>/<game>.json) mapping agent name to
the ordered list of that agent's playthrough records. The file is read
and rewritten in full on every append. A missing file is an empty
collection.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
import json
import logging

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class PlaythroughRecord:
    """Outcome of one playthrough."""
    steps: int
    score: int
    time: float  # Wall-clock seconds
    completed: bool
    tool_calls: int
    timestamp: str = field(default_factory=_utc_now)

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": self.steps,
            "score": self.score,
            "time": self.time,
            "completed": self.completed,
            "tool_calls": self.tool_calls,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlaythroughRecord:
        # "toolCalls" is accepted for files written by older tooling
        return cls(
            steps=int(data["steps"]),
            score=data["score"],
            time=float(data["time"]),
            completed=bool(data["completed"]),
            tool_calls=int(data.get("tool_calls", data.get("toolCalls", 0))),
            timestamp=data.get("timestamp", ""),
        )


ResultCollection = dict[str, list[PlaythroughRecord]]


class ResultStore:
    """
    File-based store of playthrough records.

    Usage:
        store = ResultStore("results")
        store.append("decoder", "grok-code-fast-1", record)
        runs = store.load("decoder")["grok-code-fast-1"]
    """

    def __init__(self, results_dir: str | Path = "."):
        self.results_dir = Path(results_dir)

    def path_for(self, game_key: str) -> Path:
        return self.results_dir / f"{game_key}.json"

    def load(self, game_key: str) -> ResultCollection:
        return load_results(self.path_for(game_key))

    def append(self, game_key: str, agent_name: str, record: PlaythroughRecord) -> Path:
        """Add a record under agent_name and rewrite the game's file."""
        if not agent_name:
            raise ValueError("agent_name is required to record a playthrough")

        path = self.path_for(game_key)
        results = self.load(game_key)
        results.setdefault(agent_name, []).append(record)

        self.results_dir.mkdir(parents=True, exist_ok=True)
        payload = {name: [r.to_dict() for r in records] for name, records in results.items()}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)

        logger.info("Saved %s result for %s to %s", game_key, agent_name, path)
        return path


def load_results(path: str | Path) -> ResultCollection:
    """Read a results file. Missing or unreadable files yield an empty collection."""
    path = Path(path)
    if not path.exists():
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
        return {
            name: [PlaythroughRecord.from_dict(entry) for entry in records]
            for name, records in raw.items()
        }
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Ignoring unreadable results file %s: %s", path, e)
        return {}

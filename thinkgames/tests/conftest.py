"""
Pytest fixtures for Thinkgames tests.
"""

import pytest

from ..engine_core.toolbox import Toolbox
from ..games.decoder import DecoderGame, create_toolbox as create_decoder_toolbox
from ..games.decoder.world import SignalPair
from ..games.travel import TravelGame, create_toolbox as create_travel_toolbox
from ..session.results import PlaythroughRecord, ResultStore


@pytest.fixture
def decoder_game() -> DecoderGame:
    """Fresh decoder game at landing_zone with 30 energy."""
    return DecoderGame()


@pytest.fixture
def decoder_tools(decoder_game: DecoderGame) -> Toolbox:
    return create_decoder_toolbox(decoder_game)


@pytest.fixture
def ready_to_finalize(decoder_game: DecoderGame) -> DecoderGame:
    """Decoder game standing at signal_source with three decoded pairs."""
    state = decoder_game.state
    state.position = "signal_source"
    state.explored.append("signal_source")
    state.decoded = [
        SignalPair.of("basic_frequency", "harmonic_sequence"),
        SignalPair.of("harmonic_sequence", "wave_ripple"),
        SignalPair.of("wave_ripple", "symbol_cipher"),
    ]
    state.score = 600
    state.step_count = 9
    state.energy = 10
    return decoder_game


@pytest.fixture
def travel_game() -> TravelGame:
    return TravelGame()


@pytest.fixture
def travel_tools(travel_game: TravelGame) -> Toolbox:
    return create_travel_toolbox(travel_game)


@pytest.fixture
def result_store(tmp_path) -> ResultStore:
    return ResultStore(tmp_path / "results")


@pytest.fixture
def sample_records() -> dict[str, list[PlaythroughRecord]]:
    """Two agents: one reliable and fast, one that never finishes."""
    return {
        "fast-model": [
            PlaythroughRecord(steps=12, score=1300, time=20.0, completed=True, tool_calls=20),
            PlaythroughRecord(steps=14, score=1100, time=30.0, completed=True, tool_calls=22),
        ],
        "slow-model": [
            PlaythroughRecord(steps=20, score=400, time=90.0, completed=False, tool_calls=40),
            PlaythroughRecord(steps=20, score=600, time=80.0, completed=False, tool_calls=35),
        ],
    }


# Winning decoder script: one tool call per entry, 18 engine steps in total.
WINNING_DECODER_CALLS = [
    ("collect_artifact", {"artifact": "signal_scanner"}),
    ("collect_artifact", {"artifact": "energy_crystal"}),
    ("analyze_clue", {"signal": "basic_frequency"}),
    ("move_to_area", {"area": "crystal_forest"}),
    ("collect_artifact", {"artifact": "vibration_analyzer"}),
    ("analyze_clue", {"signal": "harmonic_sequence"}),
    ("decode_signal", {"signal1": "basic_frequency", "signal2": "harmonic_sequence"}),
    ("move_to_area", {"area": "hidden_lake"}),
    ("analyze_clue", {"signal": "wave_ripple"}),
    ("decode_signal", {"signal1": "harmonic_sequence", "signal2": "wave_ripple"}),
    ("move_to_area", {"area": "crystal_forest"}),
    ("move_to_area", {"area": "ancient_ruins"}),
    ("analyze_clue", {"signal": "symbol_cipher"}),
    ("decode_signal", {"signal1": "wave_ripple", "signal2": "symbol_cipher"}),
    ("move_to_area", {"area": "crystal_forest"}),
    ("move_to_area", {"area": "hidden_lake"}),
    ("move_to_area", {"area": "signal_source"}),
    ("finalize_discovery", {"final_hypothesis": "The core integrates every pattern"}),
]


@pytest.fixture
def winning_turns() -> list[list[dict]]:
    """The winning script grouped into turns of three calls."""
    calls = [{"name": name, "params": params} for name, params in WINNING_DECODER_CALLS]
    return [calls[i:i + 3] for i in range(0, len(calls), 3)]


@pytest.fixture
def winning_calls() -> list[tuple[str, dict]]:
    return list(WINNING_DECODER_CALLS)

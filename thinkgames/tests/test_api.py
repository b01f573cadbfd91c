"""
Tests for API layer.

Tests:
- API service methods
- Turn application and budget
- Session lifecycle via API
- Error handling
"""

import pytest
from pydantic import ValidationError

from ..api.schemas import (
    CreateSessionRequest,
    ErrorCode,
    ErrorResponse,
    SessionStatus,
    TurnRequest,
)
from ..api.service import APIService
from ..session import ResultStore, SessionManager


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self, tmp_path):
        """Create a fresh API service recording to a temporary directory."""
        return APIService(session_manager=SessionManager(store=ResultStore(tmp_path)))

    @pytest.fixture
    def decoder_session(self, service):
        return service.create_session(CreateSessionRequest(game="decoder", agent_name="model-a"))

    def test_list_games(self, service):
        response = service.list_games()
        games = {g.key: g for g in response.games}
        assert set(games) == {"decoder", "travel"}
        assert games["decoder"].max_steps == 20
        assert "finalize_discovery" in games["decoder"].tools

    def test_create_session(self, decoder_session):
        assert decoder_session.session_id
        assert decoder_session.status == SessionStatus.ACTIVE
        assert decoder_session.game == "decoder"
        assert decoder_session.final_score == 300
        assert "signal_source" in decoder_session.system_prompt
        assert len(decoder_session.tools) == 9

    def test_create_unknown_game(self, service):
        response = service.create_session(CreateSessionRequest(game="chess", agent_name="model-a"))
        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.UNKNOWN_GAME

    def test_agent_name_required(self):
        with pytest.raises(ValidationError):
            CreateSessionRequest(game="decoder", agent_name="")

    def test_play_turn(self, service, decoder_session):
        request = TurnRequest(calls=[
            {"name": "move_to_area", "params": {"area": "volcanic_plains"}},
            {"name": "move_to_area", "params": {"area": "signal_source"}},
        ])

        response = service.play_turn(decoder_session.session_id, request)

        assert response.turn == 1
        assert response.turns_remaining == 19
        assert [r.success for r in response.results] == [True, False]
        assert response.results[1].error_code == "PRECONDITION_FAILED"
        assert response.results[0].data["energy_remaining"] == 28
        assert not response.completed

    def test_turn_budget(self, service):
        session = service.create_session(CreateSessionRequest(game="travel", agent_name="model-a"))
        request = TurnRequest(calls=[{"name": "check_routes"}])
        for _ in range(8):
            service.play_turn(session.session_id, request)

        response = service.play_turn(session.session_id, request)

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.VALIDATION_ERROR

    def test_get_state(self, service, decoder_session):
        response = service.get_state(decoder_session.session_id)
        assert response.state["position"] == "landing_zone"
        assert response.state["energy"] == 30
        assert response.final_score == 300

    def test_end_session(self, service, decoder_session):
        response = service.end_session(decoder_session.session_id)

        assert response.success
        assert response.record.score == 300
        assert response.record.completed is False
        assert service.list_sessions() == []

    def test_missing_session(self, service):
        assert service.get_session("missing").error_code == ErrorCode.SESSION_NOT_FOUND
        assert service.get_state("missing").error_code == ErrorCode.SESSION_NOT_FOUND
        assert not service.end_session("missing").success


class TestApp:
    """Smoke tests through the FastAPI app."""

    @pytest.fixture
    def client(self, tmp_path):
        pytest.importorskip("httpx")
        from fastapi.testclient import TestClient

        from ..api.app import create_app

        service = APIService(session_manager=SessionManager(store=ResultStore(tmp_path)))
        return TestClient(create_app(service))

    def test_session_round_trip(self, client):
        created = client.post("/api/v1/sessions", json={"game": "travel", "agent_name": "model-a"})
        assert created.status_code == 200
        session_id = created.json()["session_id"]

        turn = client.post(
            f"/api/v1/sessions/{session_id}/turns",
            json={"calls": [{"name": "travel", "params": {"route_key": "newyork-paris"}}]},
        )
        assert turn.status_code == 200
        assert turn.json()["results"][0]["success"] is True

        ended = client.delete(f"/api/v1/sessions/{session_id}")
        assert ended.status_code == 200
        assert ended.json()["record"]["score"] == 260

    def test_unknown_session_is_404(self, client):
        assert client.get("/api/v1/sessions/missing/state").status_code == 404

    def test_unknown_game_is_400(self, client):
        response = client.post("/api/v1/sessions", json={"game": "chess", "agent_name": "model-a"})
        assert response.status_code == 400
        assert response.json()["error_code"] == "UNKNOWN_GAME"

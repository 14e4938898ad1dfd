"""
Tests for the FastAPI application.

Tests:
- HTTP status codes and error bodies
- Game flow over HTTP
- OpenAPI schema generation
"""

import pytest
from fastapi.testclient import TestClient

from ..api.app import create_app
from ..api.service import APIService
from ..config import Settings


@pytest.fixture
def client():
    settings = Settings(env="test")
    app = create_app(service=APIService(settings=settings), settings=settings)
    return TestClient(app)


def _create(client, **body):
    response = client.post("/api/v1/sessions", json=body)
    assert response.status_code == 200, response.text
    return response.json()["session_id"]


class TestSessionsEndpoints:

    def test_create_without_body(self, client):
        response = client.post("/api/v1/sessions")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "in_progress"
        assert data["target"] is None

    def test_create_bad_seed(self, client):
        response = client.post("/api/v1/sessions", json={"seed": 0})

        assert response.status_code == 400
        assert response.json()["error_code"] == "OUT_OF_RANGE"

    def test_create_huge_seed(self, client):
        response = client.post("/api/v1/sessions", json={"seed": "1" * 5000})

        assert response.status_code == 400
        assert response.json()["error_code"] == "OUT_OF_RANGE"

    @pytest.mark.parametrize("seed", [True, 42.5])
    def test_create_seed_must_be_integer_or_text(self, client, seed):
        response = client.post("/api/v1/sessions", json={"seed": seed})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert client.get("/api/v1/sessions").json()["count"] == 0

    def test_get_unknown_session(self, client):
        response = client.get("/api/v1/sessions/missing")

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_list_and_delete(self, client):
        sid = _create(client)

        listed = client.get("/api/v1/sessions").json()
        assert listed["count"] == 1
        assert listed["sessions"] == [sid]

        deleted = client.delete(f"/api/v1/sessions/{sid}").json()
        assert deleted == {"success": True, "session_id": sid}
        assert client.get(f"/api/v1/sessions/{sid}").status_code == 404

    def test_health(self, client):
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["env"] == "test"


class TestGameEndpoints:

    def test_full_game(self, client):
        sid = _create(client, seed=42)
        url = f"/api/v1/sessions/{sid}/guesses"

        assert client.post(url, json={"value": "10"}).json()["outcome"] == "too_low"
        assert client.post(url, json={"value": "50"}).json()["outcome"] == "too_high"
        win = client.post(url, json={"value": "42"}).json()

        assert win["outcome"] == "correct"
        assert win["guess_count"] == 3
        assert win["status"] == "won"

        state = client.get(f"/api/v1/sessions/{sid}").json()
        assert state["guesses"] == [42, 50, 10]
        assert state["target"] == 42

    def test_invalid_guess_status_codes(self, client):
        sid = _create(client, seed=42)
        url = f"/api/v1/sessions/{sid}/guesses"

        not_number = client.post(url, json={"value": "abc"})
        out_of_range = client.post(url, json={"value": 100})

        assert not_number.status_code == 400
        assert not_number.json()["error_code"] == "NOT_A_NUMBER"
        assert out_of_range.status_code == 400
        assert out_of_range.json()["error_code"] == "OUT_OF_RANGE"
        assert client.get(f"/api/v1/sessions/{sid}").json()["guess_count"] == 0

    def test_guess_after_win_conflicts(self, client):
        sid = _create(client, seed=3)
        url = f"/api/v1/sessions/{sid}/guesses"
        client.post(url, json={"value": "3"})

        response = client.post(url, json={"value": "3"})

        assert response.status_code == 409
        assert response.json()["error_code"] == "INVALID_STATE"

    def test_missing_guess_value(self, client):
        sid = _create(client, seed=3)

        response = client.post(f"/api/v1/sessions/{sid}/guesses", json={})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("value", [True, False, 4.5, 42.0])
    def test_guess_must_be_integer_or_text(self, client, value):
        sid = _create(client, seed=1)

        response = client.post(f"/api/v1/sessions/{sid}/guesses", json={"value": value})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        state = client.get(f"/api/v1/sessions/{sid}").json()
        assert state["guess_count"] == 0
        assert state["status"] == "in_progress"

    def test_huge_guess_is_out_of_range(self, client):
        sid = _create(client, seed=42)

        response = client.post(f"/api/v1/sessions/{sid}/guesses", json={"value": "9" * 5000})

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "OUT_OF_RANGE"
        assert len(body["details"]["value"]) <= 40
        assert client.get(f"/api/v1/sessions/{sid}").json()["guess_count"] == 0

    def test_reset_then_start(self, client):
        sid = _create(client, seed=3)
        client.post(f"/api/v1/sessions/{sid}/guesses", json={"value": "3"})

        reset = client.post(f"/api/v1/sessions/{sid}/reset").json()
        assert reset["status"] == "not_started"
        assert reset["guess_count"] == 0

        guess = client.post(f"/api/v1/sessions/{sid}/guesses", json={"value": "3"})
        assert guess.status_code == 409

        started = client.post(f"/api/v1/sessions/{sid}/start")
        assert started.status_code == 200
        assert started.json()["status"] == "in_progress"

    def test_start_twice_conflicts(self, client):
        sid = _create(client)

        response = client.post(f"/api/v1/sessions/{sid}/start", json={"seed": 5})

        assert response.status_code == 409


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_response_models_in_schema(self, client):
        schema = client.get("/openapi.json").json()
        schemas = schema["components"]["schemas"]

        for name in ("SessionResponse", "GuessResponse", "ErrorResponse", "HealthResponse"):
            assert name in schemas, f"Missing schema: {name}"

    def test_game_paths_present(self, client):
        paths = client.get("/openapi.json").json()["paths"]

        assert "post" in paths["/api/v1/sessions/{session_id}/guesses"]
        assert "post" in paths["/api/v1/sessions/{session_id}/reset"]
        assert "post" in paths["/api/v1/sessions/{session_id}/start"]

"""
Tests for API layer.

Tests:
- Endpoints via the FastAPI test client
- camelCase request/response bodies
- Engine-style rejection over HTTP
- Error responses
"""

import pytest
from fastapi.testclient import TestClient

from ..api import create_app, GameService, CreateGameRequest, MoveRequest
from ..engine_core import GameConfig
from ..session import SessionManager, GameNotFoundError
from .helpers import ScriptedDie


@pytest.fixture
def service():
    return GameService(session_manager=SessionManager(max_games=10, dice_seed=None))


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def scripted_game(service, values, **config):
    """Register a red/green game whose die is scripted."""
    config.setdefault("player_count", 2)
    state = service.session_manager.create_game(GameConfig(**config), die=ScriptedDie(values))
    return state.id


class TestGameService:
    """Tests for GameService without HTTP."""

    def test_create_game(self, service):
        model = service.create_game(CreateGameRequest(player_count=4))
        assert len(model.players) == 4

    def test_roll_reports_forfeited_face(self, service):
        game_id = scripted_game(service, [2])

        response = service.roll(game_id)

        assert response.dice_value == 2
        assert response.valid_moves == []
        assert response.game_state.current_player_index == 1

    def test_move_unknown_game(self, service):
        with pytest.raises(GameNotFoundError):
            service.move("missing", MoveRequest(token_id="red_0"))


class TestGameEndpoints:

    def test_health(self, client):
        response = client.get("/api/")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_create_game(self, client):
        response = client.post("/api/games", json={
            "playerCount": 3,
            "playerNames": ["Ann"],
            "playerColors": ["blue"],
        })

        assert response.status_code == 200
        data = response.json()
        assert [p["name"] for p in data["players"]] == ["Ann", "Player 2", "Player 3"]
        assert data["players"][0]["color"] == "blue"
        assert data["players"][0]["startPos"] == 39
        assert data["currentPlayerIndex"] == 0
        assert data["turnPhase"] == "roll"
        assert data["players"][1]["tokens"][0]["stepsFromStart"] == 0

    def test_create_defaults(self, client):
        response = client.post("/api/games", json={})
        assert response.status_code == 200
        assert len(response.json()["players"]) == 2

    @pytest.mark.parametrize("body", [
        {"playerCount": 5},
        {"playerCount": 1},
        {"playerCount": 2, "playerColors": ["red", "red"]},
        {"playerCount": 2, "playerColors": ["purple"]},
    ])
    def test_create_invalid(self, client, body):
        response = client.post("/api/games", json=body)

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_get_and_list(self, client):
        game_id = client.post("/api/games", json={}).json()["id"]

        assert client.get(f"/api/games/{game_id}").json()["id"] == game_id
        listing = client.get("/api/games").json()
        assert game_id in listing["games"]
        assert listing["count"] == len(listing["games"])

    def test_unknown_game_404(self, client):
        response = client.get("/api/games/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "GAME_NOT_FOUND"
        assert body["details"] == {"game_id": "missing"}

    def test_roll_then_move(self, client, service):
        game_id = scripted_game(service, [6])

        rolled = client.post(f"/api/games/{game_id}/roll").json()
        assert rolled["diceValue"] == 6
        assert [m["tokenId"] for m in rolled["validMoves"]] == ["red_0", "red_1", "red_2", "red_3"]
        assert rolled["gameState"]["turnPhase"] == "move"

        moves = client.get(f"/api/games/{game_id}/valid-moves").json()
        assert moves["validMoves"] == rolled["validMoves"]

        moved = client.post(f"/api/games/{game_id}/move", json={"tokenId": "red_1", "playerIndex": 0})
        data = moved.json()
        assert moved.status_code == 200
        token = data["players"][0]["tokens"][1]
        assert token["state"] == "active"
        assert token["position"] == 0
        assert data["diceValue"] is None
        assert data["moveHistory"] == [{"playerIndex": 0, "tokenId": "red_1", "diceValue": 6}]

    def test_roll_rejected_while_move_pending(self, client, service):
        game_id = scripted_game(service, [6])
        client.post(f"/api/games/{game_id}/roll")

        again = client.post(f"/api/games/{game_id}/roll")

        assert again.status_code == 200
        assert again.json()["diceValue"] is None
        assert again.json()["gameState"]["turnPhase"] == "move"
        assert again.json()["gameState"]["diceValue"] == 6

    def test_stale_player_index_rejected(self, client, service):
        game_id = scripted_game(service, [6])
        client.post(f"/api/games/{game_id}/roll")

        response = client.post(f"/api/games/{game_id}/move", json={"tokenId": "red_0", "playerIndex": 1})

        data = response.json()
        assert response.status_code == 200
        assert data["turnPhase"] == "move"
        assert data["players"][0]["tokens"][0]["state"] == "base"

    def test_invalid_token_rejected(self, client, service):
        game_id = scripted_game(service, [6])
        client.post(f"/api/games/{game_id}/roll")

        data = client.post(f"/api/games/{game_id}/move", json={"tokenId": "green_0"}).json()

        assert data["turnPhase"] == "move"
        assert data["moveHistory"] == []

    def test_broken_die_is_internal_error(self, client, service):
        game_id = scripted_game(service, [7])

        response = client.post(f"/api/games/{game_id}/roll")

        assert response.status_code == 500
        assert response.json()["error_code"] == "INTERNAL_ERROR"

    def test_end_game(self, client):
        game_id = client.post("/api/games", json={}).json()["id"]

        response = client.delete(f"/api/games/{game_id}")
        assert response.json() == {"success": True, "gameId": game_id}
        assert client.get(f"/api/games/{game_id}").status_code == 404

"""
API Module - HTTP interface for the browser client.

Exposes the engine via a REST API. The client:
1. Creates a game from the setup form
2. Rolls the dice
3. Moves a token when given a choice
4. Re-renders from the returned state

All games live in memory for the lifetime of the process.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    MoveRequest,
    # Responses
    GameStateModel,
    RollResponse,
    ValidMovesResponse,
    GameListResponse,
    EndGameResponse,
    ErrorResponse,
    HealthResponse,
    # Shared
    PlayerModel,
    TokenModel,
    MoveRecordModel,
    ValidMoveModel,
    ErrorCode,
)
from .service import GameService
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "MoveRequest",
    # Responses
    "GameStateModel",
    "RollResponse",
    "ValidMovesResponse",
    "GameListResponse",
    "EndGameResponse",
    "ErrorResponse",
    "HealthResponse",
    # Shared
    "PlayerModel",
    "TokenModel",
    "MoveRecordModel",
    "ValidMoveModel",
    "ErrorCode",
    # Service
    "GameService",
    "create_app",
]

"""
Pydantic Schemas for API - Request/response models for OpenAPI.

JSON field names are camelCase, matching what the browser client sends
and reads (currentPlayerIndex, stepsFromStart, ...). Python code uses the
snake_case attribute names; both are accepted on input.

Error Codes:
- GAME_NOT_FOUND: Game does not exist or was evicted
- VALIDATION_ERROR: Request body is invalid
- INTERNAL_ERROR: Unexpected server failure
"""

from __future__ import annotations
from enum import Enum
from typing import Optional, Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from ..engine_core.state import GameState, Color, TokenState, TurnPhase
from ..engine_core.action import Move


class CamelModel(BaseModel):
    """Base model serialising to camelCase."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Game State Models
# =============================================================================

class TokenModel(CamelModel):
    id: str
    state: TokenState
    position: int = -1
    home_stretch_pos: int = -1
    steps_from_start: int = Field(0, ge=0, le=58)


class PlayerModel(CamelModel):
    index: int
    name: str
    color: Color
    start_pos: int
    home_entry_pos: int
    tokens: list[TokenModel] = Field(default_factory=list)
    has_finished: bool = False
    finish_order: int = -1


class MoveRecordModel(CamelModel):
    player_index: int
    token_id: str
    dice_value: int = Field(..., ge=1, le=6)


class GameStateModel(CamelModel):
    """Complete game state as sent to clients."""
    id: str
    players: list[PlayerModel]
    current_player_index: int = 0
    dice_value: Optional[int] = Field(None, ge=1, le=6)
    dice_rolled: bool = False
    turn_phase: TurnPhase = TurnPhase.ROLL
    consecutive_sixes: int = 0
    has_extra_turn: bool = False
    game_over: bool = False
    winner: Optional[int] = None
    finish_order: list[int] = Field(default_factory=list)
    message: str = ""
    last_roll: Optional[int] = None
    move_history: list[MoveRecordModel] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: GameState) -> GameStateModel:
        return cls.model_validate(state.to_dict())

    def to_state(self) -> GameState:
        return GameState.from_dict(self.model_dump(by_alias=True, mode="json"))


class ValidMoveModel(CamelModel):
    token_id: str
    token_index: int

    @classmethod
    def from_move(cls, move: Move) -> ValidMoveModel:
        return cls(token_id=move.token_id, token_index=move.token_index)


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(CamelModel):
    """Player configuration from the setup form."""
    player_count: int = Field(2, ge=2, le=4, description="Number of players")
    player_names: list[str] = Field(default_factory=list, max_length=4)
    player_colors: list[Color] = Field(default_factory=list, max_length=4)

    @field_validator("player_colors")
    @classmethod
    def colors_unique(cls, colors: list[Color]) -> list[Color]:
        if len(set(colors)) != len(colors):
            raise ValueError("player colors must be unique")
        return colors


class MoveRequest(CamelModel):
    """Move a token. playerIndex, when sent, must be the current player."""
    token_id: str
    player_index: Optional[int] = None


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class RollResponse(CamelModel):
    """Result of a roll; diceValue is the face drawn even if it was auto-played."""
    dice_value: Optional[int] = None
    valid_moves: list[ValidMoveModel] = Field(default_factory=list)
    game_state: GameStateModel


class ValidMovesResponse(CamelModel):
    valid_moves: list[ValidMoveModel] = Field(default_factory=list)


class GameListResponse(BaseModel):
    games: list[str]
    count: int


class EndGameResponse(CamelModel):
    success: bool
    game_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str

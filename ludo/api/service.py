"""
API Service - Business logic layer between HTTP and the engine.

The service:
1. Translates API requests to engine calls
2. Owns the session manager
3. Formats engine values as response models

This layer is framework-agnostic (usable from FastAPI, a test, or a CLI).
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    CreateGameRequest,
    MoveRequest,
    GameStateModel,
    RollResponse,
    ValidMoveModel,
    ValidMovesResponse,
)
from ..engine_core import GameConfig, TurnPhase
from ..session import SessionManager

logger = logging.getLogger(__name__)


@dataclass
class GameService:
    """
    Main API service.

    Usage:
        service = GameService()
        game = service.create_game(CreateGameRequest(player_count=2))
        rolled = service.roll(game.id)
        if rolled.valid_moves:
            service.move(game.id, MoveRequest(token_id=rolled.valid_moves[0].token_id))

    Unknown game ids raise GameNotFoundError.
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: CreateGameRequest) -> GameStateModel:
        config = GameConfig(
            player_count=request.player_count,
            player_names=list(request.player_names),
            player_colors=list(request.player_colors),
        )
        state = self.session_manager.create_game(config)
        return GameStateModel.from_state(state)

    def get_game_state(self, game_id: str) -> GameStateModel:
        return GameStateModel.from_state(self.session_manager.get_state(game_id))

    def roll(self, game_id: str) -> RollResponse:
        """
        Roll for the current player.

        diceValue reports a freshly drawn face even when the engine already
        applied or forfeited it; a rejected roll reports None.
        """
        before = self.session_manager.get_state(game_id)
        state = self.session_manager.roll(game_id)

        drew = before.turn_phase == TurnPhase.ROLL and not before.game_over
        moves = self.session_manager.valid_moves(game_id) if state.turn_phase == TurnPhase.MOVE else []

        return RollResponse(
            dice_value=state.last_roll if drew else None,
            valid_moves=[ValidMoveModel.from_move(m) for m in moves],
            game_state=GameStateModel.from_state(state),
        )

    def move(self, game_id: str, request: MoveRequest) -> GameStateModel:
        state = self.session_manager.get_state(game_id)
        if request.player_index is not None and request.player_index != state.current_player_index:
            logger.debug(
                "Stale move for %s: player %d is not current", game_id, request.player_index,
            )
            state = self.session_manager.reject(game_id, "It is not your turn!")
        else:
            state = self.session_manager.move(game_id, request.token_id)
        return GameStateModel.from_state(state)

    def valid_moves(self, game_id: str) -> ValidMovesResponse:
        moves = self.session_manager.valid_moves(game_id)
        return ValidMovesResponse(valid_moves=[ValidMoveModel.from_move(m) for m in moves])

    def end_game(self, game_id: str) -> bool:
        return self.session_manager.end_game(game_id)

    def list_games(self) -> list[str]:
        return self.session_manager.list_games()

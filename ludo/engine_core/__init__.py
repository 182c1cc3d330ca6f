"""
Engine Core - Deterministic Ludo rules.

The engine is a set of pure functions over an immutable GameState:
1. create_game builds the initial state
2. roll_dice draws from a die and resolves what it can
3. valid_moves lists the tokens the player may move
4. apply_move moves a token, captures, finishes and hands over the turn
"""

from .state import GameState, Player, Token, Color, TokenState, TurnPhase
from .action import Move, MoveRecord
from .board import (
    Coordinate,
    SAFE_SQUARES,
    START_POSITIONS,
    board_coordinate,
    home_stretch_coordinate,
    base_coordinate,
)
from .dice import Die, SeededDie, system_die
from .setup import GameConfig, create_game
from .action_generator import valid_moves
from .reducer import roll_dice, apply_move

__all__ = [
    "GameState",
    "Player",
    "Token",
    "Color",
    "TokenState",
    "TurnPhase",
    "Move",
    "MoveRecord",
    "Coordinate",
    "SAFE_SQUARES",
    "START_POSITIONS",
    "board_coordinate",
    "home_stretch_coordinate",
    "base_coordinate",
    "Die",
    "SeededDie",
    "system_die",
    "GameConfig",
    "create_game",
    "valid_moves",
    "roll_dice",
    "apply_move",
]

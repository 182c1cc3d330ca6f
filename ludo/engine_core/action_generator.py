"""
Action Generator - Legal moves for the pending dice.

Used by:
1. roll_dice() to decide between pass, auto-move and asking the player
2. apply_move() to re-check a requested move
3. UIs to highlight movable tokens
"""

from __future__ import annotations

from .state import GameState, Token, TokenState
from .action import Move
from .board import ENTRY_ROLL, HOME_STEPS


def can_move(token: Token, dice_value: int) -> bool:
    """Whether a token may move with this roll."""
    if token.state == TokenState.HOME:
        return False
    if token.state == TokenState.BASE:
        return dice_value == ENTRY_ROLL
    # No overshooting home
    return token.steps_from_start + dice_value <= HOME_STEPS


def valid_moves(state: GameState) -> list[Move]:
    """
    Movable tokens of the current player, in token order.

    Empty when no dice value is pending.
    """
    if not state.dice_value:
        return []

    player = state.current_player
    return [
        Move(token_id=token.id, token_index=i)
        for i, token in enumerate(player.tokens)
        if can_move(token, state.dice_value)
    ]

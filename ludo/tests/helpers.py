"""
Test helpers - Scripted dice and direct token placement.
"""

from __future__ import annotations

from ..engine_core.state import GameState, Token, TokenState, TurnPhase
from ..engine_core.board import BOARD_SIZE, HOME_STEPS


class ScriptedDie:
    """A die that returns a fixed sequence of faces."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> int:
        if not self.values:
            raise AssertionError("ScriptedDie exhausted")
        self.calls += 1
        return self.values.pop(0)


def place(state: GameState, token_id: str, steps: int | None) -> GameState:
    """
    Put a token where `steps` from its start would take it.

    None sends it to base, 58 puts it home.
    """
    player_index, token_index = state.get_token(token_id)
    player = state.players[player_index]

    if steps is None:
        token = Token(id=token_id)
    elif steps >= HOME_STEPS:
        token = Token(id=token_id, state=TokenState.HOME, steps_from_start=HOME_STEPS)
    elif steps > BOARD_SIZE:
        token = Token(
            id=token_id,
            state=TokenState.ACTIVE,
            home_stretch_pos=steps - BOARD_SIZE - 1,
            steps_from_start=steps,
        )
    else:
        token = Token(
            id=token_id,
            state=TokenState.ACTIVE,
            position=(player.start_pos + steps) % BOARD_SIZE,
            steps_from_start=steps,
        )
    return state.with_player(player.with_token(token_index, token))


def with_pending_roll(state: GameState, dice_value: int, player_index: int | None = None) -> GameState:
    """State as if `player_index` just rolled `dice_value` and must pick a token."""
    if player_index is None:
        player_index = state.current_player_index
    return state._copy_with(
        current_player_index=player_index,
        dice_value=dice_value,
        dice_rolled=True,
        last_roll=dice_value,
        turn_phase=TurnPhase.MOVE,
        has_extra_turn=dice_value == 6,
    )


def structural(state: GameState) -> dict:
    """Everything but the status line."""
    data = state.to_dict()
    data.pop("message")
    return data

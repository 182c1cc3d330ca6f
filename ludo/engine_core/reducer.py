"""
Reducer - Applies rolls and moves to game state.

The reducer is the single point of state transition.

Design principles:
- Pure functions: (state, input) -> new state, nothing is mutated
- Silent rejection: an out-of-phase or stale request returns the same
  state with only the message changed, it never raises
- The die is the only nondeterminism and is passed in by the caller
"""

from __future__ import annotations
from dataclasses import replace
import logging

from .state import GameState, Player, Token, TokenState, TurnPhase
from .action import MoveRecord
from .action_generator import can_move, valid_moves
from .board import (
    BOARD_SIZE,
    DIE_FACES,
    ENTRY_ROLL,
    HOME_STEPS,
    MAX_CONSECUTIVE_SIXES,
    is_safe_square,
)
from .dice import Die, system_die

logger = logging.getLogger(__name__)


def _draw(die: Die) -> int:
    value = die()
    if not 1 <= value <= DIE_FACES:
        raise ValueError(f"Die returned {value!r}, expected 1-{DIE_FACES}")
    return value


def next_player_index(players: tuple[Player, ...] | list[Player], current: int) -> int:
    """
    Next seat after current that has not finished, wrapping around.

    Stays on current if every other player has finished.
    """
    total = len(players)
    candidate = (current + 1) % total
    for _ in range(total):
        if not players[candidate].has_finished:
            return candidate
        candidate = (candidate + 1) % total
    return current


def roll_dice(state: GameState, die: Die | None = None) -> GameState:
    """
    Roll for the current player.

    Resolves the roll as far as it can without a player decision:
    forfeits on a third six, passes when nothing can move, auto-applies a
    single legal move. Leaves turn_phase at MOVE only when the player has
    a real choice.
    """
    if state.game_over:
        return state.with_message("Game is over!")
    if state.turn_phase != TurnPhase.ROLL:
        return state.with_message("You must move a token first!")

    value = _draw(die or system_die)
    player = state.current_player
    is_six = value == ENTRY_ROLL
    logger.debug("%s: %s rolled %d", state.id, player.name, value)

    rolled = state._copy_with(
        dice_value=value,
        dice_rolled=True,
        last_roll=value,
        consecutive_sixes=state.consecutive_sixes + 1 if is_six else 0,
        has_extra_turn=is_six,
    )

    # Three sixes in a row lose the turn before any move is considered
    if rolled.consecutive_sixes >= MAX_CONSECUTIVE_SIXES:
        nxt = next_player_index(state.players, state.current_player_index)
        logger.debug("%s: %s forfeits after three sixes", state.id, player.name)
        return rolled._copy_with(
            turn_phase=TurnPhase.ROLL,
            dice_value=None,
            dice_rolled=False,
            consecutive_sixes=0,
            has_extra_turn=False,
            current_player_index=nxt,
            message=(
                f"{player.name} rolled three 6s! Turn lost. "
                f"{state.players[nxt].name}'s turn."
            ),
        )

    moves = valid_moves(rolled)

    if not moves:
        if is_six:
            return rolled._copy_with(
                turn_phase=TurnPhase.ROLL,
                dice_value=None,
                dice_rolled=False,
                message=f"{player.name} rolled {value} but has no valid moves. Roll again!",
            )
        nxt = next_player_index(state.players, state.current_player_index)
        return rolled._copy_with(
            turn_phase=TurnPhase.ROLL,
            dice_value=None,
            dice_rolled=False,
            current_player_index=nxt,
            message=(
                f"{player.name} rolled {value} but has no valid moves. "
                f"{state.players[nxt].name}'s turn."
            ),
        )

    if len(moves) == 1:
        return apply_move(rolled, moves[0].token_id)

    return rolled._copy_with(
        turn_phase=TurnPhase.MOVE,
        message=f"{player.name} rolled {value}. Choose a token to move.",
    )


def _advance(token: Token, player: Player, dice_value: int) -> tuple[Token, int | None, str]:
    """
    Move one token by the roll.

    Returns (moved token, main-track cell to check for capture or None,
    description).
    """
    if token.state == TokenState.BASE:
        moved = Token(
            id=token.id,
            state=TokenState.ACTIVE,
            position=player.start_pos,
            steps_from_start=0,
        )
        return moved, player.start_pos, f"{player.name} moves a token to the starting position."

    steps = token.steps_from_start + dice_value

    if steps == HOME_STEPS:
        moved = replace(
            token, state=TokenState.HOME, position=-1, home_stretch_pos=-1, steps_from_start=steps,
        )
        return moved, None, f"{player.name}'s token reached HOME!"

    if steps > BOARD_SIZE:
        moved = replace(
            token, position=-1, home_stretch_pos=steps - BOARD_SIZE - 1, steps_from_start=steps,
        )
        return moved, None, f"{player.name} moves a token into the home stretch."

    position = (player.start_pos + steps) % BOARD_SIZE
    moved = replace(token, position=position, steps_from_start=steps)
    return moved, position, f"{player.name} moves a token {dice_value} spaces."


def find_capture(state: GameState, mover_index: int, position: int) -> tuple[int, int] | None:
    """
    (player_index, token_index) of the opposing token captured by landing
    on position, or None.

    Safe squares never capture. Only the first opposing token found is
    taken, scanning players in seat order and tokens in order.
    """
    if is_safe_square(position):
        return None

    for player in state.players:
        if player.index == mover_index:
            continue
        for i, token in enumerate(player.tokens):
            if token.on_main_track and not token.in_home_stretch and token.position == position:
                return player.index, i
    return None


def apply_move(state: GameState, token_id: str) -> GameState:
    """
    Move one of the current player's tokens by the pending dice value.

    Handles capture, finishing, game over and turn handover, appends the
    move to move_history and clears the dice.
    """
    if state.game_over:
        return state.with_message("Game is over!")

    dice_value = state.dice_value
    if dice_value is None:
        return state.with_message("Roll the dice first!")

    mover_index = state.current_player_index
    player = state.current_player
    token_index = player.token_index(token_id)
    if token_index < 0:
        return state.with_message("Invalid token!")

    token = player.tokens[token_index]
    if not can_move(token, dice_value):
        return state.with_message("Cannot move this token!")

    moved, landing, message = _advance(token, player, dice_value)
    players = list(state.players)
    players[mover_index] = player.with_token(token_index, moved)

    captured = find_capture(state, mover_index, landing) if landing is not None else None
    if captured is not None:
        victim_index, victim_token = captured
        victim = players[victim_index]
        players[victim_index] = victim.with_token(
            victim_token, Token(id=victim.tokens[victim_token].id),
        )
        message += f" Captured {victim.name}'s token!"
        logger.debug(
            "%s: %s captured %s at %d",
            state.id, player.name, victim.tokens[victim_token].id, landing,
        )

    # Finishing
    finish_order = state.finish_order
    game_over = False
    winner = None
    mover = players[mover_index]
    if mover.all_home and not mover.has_finished:
        mover = replace(mover, has_finished=True, finish_order=len(finish_order))
        players[mover_index] = mover
        finish_order = finish_order + (mover_index,)
        message += f" {mover.name} has finished!"
        logger.info("%s: %s finished in place %d", state.id, mover.name, len(finish_order))

        active_players = sum(1 for p in players if not p.has_finished)
        if len(finish_order) == 1 or active_players <= 1:
            game_over = True
            winner = mover_index
            message = f"{mover.name} WINS! Congratulations!"
            logger.info("%s: game over, winner %s", state.id, mover.name)

    # Turn handover
    keep_turn = (dice_value == ENTRY_ROLL or captured is not None) and not mover.has_finished
    if game_over:
        next_index = mover_index
        extra_turn = False
    elif keep_turn:
        next_index = mover_index
        extra_turn = True
        message += f" {mover.name} gets another turn!"
    else:
        next_index = next_player_index(players, mover_index)
        extra_turn = False
        message += f" {players[next_index].name}'s turn."

    logger.debug("%s: %s moved %s with %d", state.id, player.name, token_id, dice_value)

    return state._copy_with(
        players=tuple(players),
        current_player_index=next_index,
        dice_value=None,
        dice_rolled=False,
        turn_phase=TurnPhase.ROLL,
        has_extra_turn=extra_turn,
        consecutive_sixes=state.consecutive_sixes if extra_turn else 0,
        game_over=game_over,
        winner=winner,
        finish_order=finish_order,
        message=message,
        move_history=state.move_history + (
            MoveRecord(player_index=mover_index, token_id=token_id, dice_value=dice_value),
        ),
    )

"""
Board - Track constants and grid geometry.

The main track is a closed loop of 52 cells on a 15x15 grid. Each colour
enters at its start cell, goes once around, then turns into a private
5-cell home stretch that ends in the shared centre cell.

The lookup tables below are what a renderer uses to place tokens. They
share START_POSITIONS and SAFE_SQUARES with the rules engine so that the
cells the engine treats as safe are the cells drawn as safe.
"""

from __future__ import annotations
from typing import NamedTuple

from .state import Color


BOARD_SIZE = 52  # cells on the main track
TOKENS_PER_PLAYER = 4
HOME_STRETCH_LENGTH = 5
HOME_STEPS = BOARD_SIZE + HOME_STRETCH_LENGTH + 1  # 58: steps_from_start of a token at home
DIE_FACES = 6
ENTRY_ROLL = 6  # roll needed to leave base; also grants another roll
MAX_CONSECUTIVE_SIXES = 3

START_POSITIONS: dict[Color, int] = {
    Color.RED: 0,
    Color.GREEN: 13,
    Color.YELLOW: 26,
    Color.BLUE: 39,
}

# Last main-track cell before the home stretch
HOME_ENTRY_POSITIONS: dict[Color, int] = {
    color: (start - 2) % BOARD_SIZE for color, start in START_POSITIONS.items()
}

# Every start cell plus the cell eight steps past it
SAFE_SQUARES: frozenset[int] = frozenset(
    cell
    for start in START_POSITIONS.values()
    for cell in (start, (start + 8) % BOARD_SIZE)
)


class Coordinate(NamedTuple):
    """A cell on the 15x15 grid."""
    row: int
    col: int


CENTER = Coordinate(7, 7)

# Clockwise from the red start cell
_TRACK: tuple[Coordinate, ...] = (
    Coordinate(13, 6),  # 0 red start
    Coordinate(12, 6),
    Coordinate(11, 6),
    Coordinate(10, 6),
    Coordinate(9, 6),
    Coordinate(8, 5),
    Coordinate(8, 4),
    Coordinate(8, 3),
    Coordinate(8, 2),  # 8 safe
    Coordinate(8, 1),
    Coordinate(8, 0),
    Coordinate(7, 0),
    Coordinate(6, 0),
    Coordinate(6, 1),  # 13 green start
    Coordinate(6, 2),
    Coordinate(6, 3),
    Coordinate(6, 4),
    Coordinate(6, 5),
    Coordinate(5, 6),
    Coordinate(4, 6),
    Coordinate(3, 6),
    Coordinate(2, 6),  # 21 safe
    Coordinate(1, 6),
    Coordinate(0, 6),
    Coordinate(0, 7),
    Coordinate(0, 8),
    Coordinate(1, 8),  # 26 yellow start
    Coordinate(2, 8),
    Coordinate(3, 8),
    Coordinate(4, 8),
    Coordinate(5, 8),
    Coordinate(6, 9),
    Coordinate(6, 10),
    Coordinate(6, 11),
    Coordinate(6, 12),  # 34 safe
    Coordinate(6, 13),
    Coordinate(6, 14),
    Coordinate(7, 14),
    Coordinate(8, 14),
    Coordinate(8, 13),  # 39 blue start
    Coordinate(8, 12),
    Coordinate(8, 11),
    Coordinate(8, 10),
    Coordinate(8, 9),
    Coordinate(9, 8),
    Coordinate(10, 8),
    Coordinate(11, 8),
    Coordinate(12, 8),  # 47 safe
    Coordinate(13, 8),
    Coordinate(14, 8),
    Coordinate(14, 7),
    Coordinate(14, 6),  # 51 wraps to 0
)

_HOME_STRETCHES: dict[Color, tuple[Coordinate, ...]] = {
    Color.RED: tuple(Coordinate(row, 7) for row in (13, 12, 11, 10, 9)),
    Color.GREEN: tuple(Coordinate(7, col) for col in (1, 2, 3, 4, 5)),
    Color.YELLOW: tuple(Coordinate(row, 7) for row in (1, 2, 3, 4, 5)),
    Color.BLUE: tuple(Coordinate(7, col) for col in (13, 12, 11, 10, 9)),
}

_BASES: dict[Color, tuple[Coordinate, ...]] = {
    Color.RED: (Coordinate(10, 1), Coordinate(10, 4), Coordinate(13, 1), Coordinate(13, 4)),
    Color.GREEN: (Coordinate(1, 1), Coordinate(1, 4), Coordinate(4, 1), Coordinate(4, 4)),
    Color.YELLOW: (Coordinate(1, 10), Coordinate(1, 13), Coordinate(4, 10), Coordinate(4, 13)),
    Color.BLUE: (Coordinate(10, 10), Coordinate(10, 13), Coordinate(13, 10), Coordinate(13, 13)),
}


def _lookup(table: dict[Color, tuple[Coordinate, ...]], color: Color | str):
    try:
        return table.get(Color(color))
    except ValueError:
        return None


def is_safe_square(position: int) -> bool:
    return position in SAFE_SQUARES


def board_coordinate(position: int) -> Coordinate:
    """Grid cell of a main-track position (0-51); centre if out of range."""
    if 0 <= position < len(_TRACK):
        return _TRACK[position]
    return CENTER


def home_stretch_coordinate(color: Color | str, home_stretch_pos: int) -> Coordinate:
    """Grid cell of a home-stretch position (0-4) for a colour; centre past the end."""
    path = _lookup(_HOME_STRETCHES, color)
    if path and 0 <= home_stretch_pos < len(path):
        return path[home_stretch_pos]
    return CENTER


def base_coordinate(color: Color | str, token_index: int) -> Coordinate:
    """Grid cell of a token's slot in its colour's yard."""
    slots = _lookup(_BASES, color)
    if slots and 0 <= token_index < len(slots):
        return slots[token_index]
    return CENTER

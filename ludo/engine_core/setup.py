"""
Game setup - Builds the initial state from a player configuration.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import uuid

from .state import GameState, Player, Token, Color
from .board import START_POSITIONS, HOME_ENTRY_POSITIONS, TOKENS_PER_PLAYER

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 4
DEFAULT_COLORS: tuple[Color, ...] = (Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE)


@dataclass
class GameConfig:
    """
    Player configuration from the setup form.

    Names and colours may be shorter than player_count; missing entries
    get defaults. An out-of-range player_count is clamped to 2-4.
    """
    player_count: int = 2
    player_names: list[str] = field(default_factory=list)
    player_colors: list[Color | str] = field(default_factory=list)


def _clamp_player_count(count: int) -> int:
    clamped = max(MIN_PLAYERS, min(MAX_PLAYERS, count))
    if clamped != count:
        logger.debug("player_count %d clamped to %d", count, clamped)
    return clamped


def _resolve_colors(requested: list[Color | str], count: int) -> list[Color]:
    """
    Pick one distinct colour per seat.

    A missing, unknown or already-taken colour is replaced by the first
    unused colour of the default cycle.
    """
    chosen: list[Color] = []
    for i in range(count):
        color = None
        if i < len(requested) and requested[i]:
            try:
                color = Color(requested[i])
            except ValueError:
                logger.debug("Unknown colour %r for seat %d", requested[i], i)
        if color is None or color in chosen:
            color = next(c for c in DEFAULT_COLORS if c not in chosen)
        chosen.append(color)
    return chosen


def _new_player(index: int, name: str, color: Color) -> Player:
    return Player(
        index=index,
        name=name,
        color=color,
        start_pos=START_POSITIONS[color],
        home_entry_pos=HOME_ENTRY_POSITIONS[color],
        tokens=tuple(Token(id=f"{color.value}_{t}") for t in range(TOKENS_PER_PLAYER)),
    )


def generate_game_id() -> str:
    return f"game_{uuid.uuid4().hex[:12]}"


def create_game(config: GameConfig | None = None) -> GameState:
    """
    Create a new game: every token in base, first player to roll.
    """
    config = config or GameConfig()
    count = _clamp_player_count(config.player_count)
    colors = _resolve_colors(config.player_colors, count)

    players = []
    for i, color in enumerate(colors):
        name = config.player_names[i] if i < len(config.player_names) else ""
        players.append(_new_player(i, name or f"Player {i + 1}", color))

    state = GameState(
        id=generate_game_id(),
        players=tuple(players),
        message=f"{players[0].name}'s turn - Roll the dice!",
    )
    logger.debug(
        "Created game %s with %s",
        state.id, ", ".join(f"{p.name} ({p.color.value})" for p in players),
    )
    return state

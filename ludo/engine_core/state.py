"""
Game State - Immutable values the rules engine operates on.

Design principles:
- Immutable: every dataclass is frozen, sequences are tuples
- Replaced wholesale: transitions return a new GameState, untouched
  players and tokens are shared between snapshots
- Serializable: to_dict()/from_dict() round-trip through plain JSON types
  using the camelCase field names a UI client expects
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .action import MoveRecord


class Color(str, Enum):
    """Player colours, in default seating order."""
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"


class TokenState(str, Enum):
    """Where a token is in its lifecycle."""
    BASE = "base"  # In the yard, needs a six to enter
    ACTIVE = "active"  # On the main track or in the home stretch
    HOME = "home"  # Finished


class TurnPhase(str, Enum):
    """What the current player must do next."""
    ROLL = "roll"
    MOVE = "move"


@dataclass(frozen=True)
class Token:
    """
    A single token.

    steps_from_start is the source of truth for progress; position and
    home_stretch_pos are views of it kept alongside for renderers.
    """
    id: str
    state: TokenState = TokenState.BASE
    position: int = -1  # Main-track cell, -1 when not on the main track
    home_stretch_pos: int = -1  # 0-4 inside the home column, else -1
    steps_from_start: int = 0

    @property
    def in_home_stretch(self) -> bool:
        return self.home_stretch_pos >= 0

    @property
    def on_main_track(self) -> bool:
        return self.state == TokenState.ACTIVE and self.position >= 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "state": self.state.value,
            "position": self.position,
            "homeStretchPos": self.home_stretch_pos,
            "stepsFromStart": self.steps_from_start,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Token:
        return cls(
            id=data["id"],
            state=TokenState(data["state"]),
            position=data["position"],
            home_stretch_pos=data["homeStretchPos"],
            steps_from_start=data["stepsFromStart"],
        )


@dataclass(frozen=True)
class Player:
    """A seat at the table. Index and colour never change."""
    index: int
    name: str
    color: Color
    start_pos: int
    home_entry_pos: int
    tokens: tuple[Token, ...] = ()
    has_finished: bool = False
    finish_order: int = -1  # Finishing rank, -1 until finished

    def token_index(self, token_id: str) -> int:
        """Index of a token by id, -1 if this player does not own it."""
        for i, token in enumerate(self.tokens):
            if token.id == token_id:
                return i
        return -1

    def with_token(self, index: int, token: Token) -> Player:
        """Return new player with one token replaced."""
        tokens = list(self.tokens)
        tokens[index] = token
        return replace(self, tokens=tuple(tokens))

    @property
    def all_home(self) -> bool:
        return all(t.state == TokenState.HOME for t in self.tokens)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "color": self.color.value,
            "startPos": self.start_pos,
            "homeEntryPos": self.home_entry_pos,
            "tokens": [t.to_dict() for t in self.tokens],
            "hasFinished": self.has_finished,
            "finishOrder": self.finish_order,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        return cls(
            index=data["index"],
            name=data["name"],
            color=Color(data["color"]),
            start_pos=data["startPos"],
            home_entry_pos=data["homeEntryPos"],
            tokens=tuple(Token.from_dict(t) for t in data["tokens"]),
            has_finished=data["hasFinished"],
            finish_order=data["finishOrder"],
        )


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the only value the engine reads and writes. Callers hold the
    latest snapshot and replace it with whatever an operation returns.
    """
    id: str
    players: tuple[Player, ...] = ()

    current_player_index: int = 0
    dice_value: int | None = None
    dice_rolled: bool = False
    turn_phase: TurnPhase = TurnPhase.ROLL
    consecutive_sixes: int = 0
    has_extra_turn: bool = False

    game_over: bool = False
    winner: int | None = None
    finish_order: tuple[int, ...] = ()

    # Presentation only, never drives logic
    message: str = ""
    last_roll: int | None = None

    move_history: tuple[MoveRecord, ...] = field(default_factory=tuple)

    @property
    def current_player(self) -> Player:
        """Get the current player."""
        return self.players[self.current_player_index]

    @property
    def num_players(self) -> int:
        return len(self.players)

    def get_token(self, token_id: str) -> tuple[int, int] | None:
        """(player_index, token_index) of a token anywhere in the game."""
        for player in self.players:
            i = player.token_index(token_id)
            if i >= 0:
                return player.index, i
        return None

    def with_player(self, player: Player) -> GameState:
        """Return new state with updated player."""
        players = tuple(
            player if p.index == player.index else p
            for p in self.players
        )
        return self._copy_with(players=players)

    def with_message(self, message: str) -> GameState:
        """Return new state that differs only in its status line."""
        return self._copy_with(message=message)

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible form."""
        return {
            "id": self.id,
            "players": [p.to_dict() for p in self.players],
            "currentPlayerIndex": self.current_player_index,
            "diceValue": self.dice_value,
            "diceRolled": self.dice_rolled,
            "turnPhase": self.turn_phase.value,
            "consecutiveSixes": self.consecutive_sixes,
            "hasExtraTurn": self.has_extra_turn,
            "gameOver": self.game_over,
            "winner": self.winner,
            "finishOrder": list(self.finish_order),
            "message": self.message,
            "lastRoll": self.last_roll,
            "moveHistory": [m.to_dict() for m in self.move_history],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """Rebuild a state from to_dict() output."""
        return cls(
            id=data["id"],
            players=tuple(Player.from_dict(p) for p in data["players"]),
            current_player_index=data["currentPlayerIndex"],
            dice_value=data.get("diceValue"),
            dice_rolled=data.get("diceRolled", False),
            turn_phase=TurnPhase(data["turnPhase"]),
            consecutive_sixes=data.get("consecutiveSixes", 0),
            has_extra_turn=data.get("hasExtraTurn", False),
            game_over=data.get("gameOver", False),
            winner=data.get("winner"),
            finish_order=tuple(data.get("finishOrder", ())),
            message=data.get("message", ""),
            last_roll=data.get("lastRoll"),
            move_history=tuple(MoveRecord.from_dict(m) for m in data.get("moveHistory", ())),
        )

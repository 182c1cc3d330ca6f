"""
Moves - Legal-move entries and the move history log.

A Move is what valid_moves() offers the current player; a MoveRecord is
what apply_move() appends to GameState.move_history once a move lands.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Move:
    """A token the current player may move with the pending dice."""
    token_id: str
    token_index: int

    def to_dict(self) -> dict[str, Any]:
        return {"tokenId": self.token_id, "tokenIndex": self.token_index}


@dataclass(frozen=True)
class MoveRecord:
    """One applied move."""
    player_index: int
    token_id: str
    dice_value: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "playerIndex": self.player_index,
            "tokenId": self.token_id,
            "diceValue": self.dice_value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MoveRecord:
        return cls(
            player_index=data["playerIndex"],
            token_id=data["tokenId"],
            dice_value=data["diceValue"],
        )

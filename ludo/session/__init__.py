"""
Session Module - Live games held in memory.

A session represents one play-through:
- Created when the setup form is submitted
- Holds the latest game state and its die
- Serializes roll/move requests against that state
- Dropped when the game is ended or evicted

Nothing is persisted.
"""

from .manager import SessionManager, Session, GameNotFoundError

__all__ = [
    "SessionManager",
    "Session",
    "GameNotFoundError",
]

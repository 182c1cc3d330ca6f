"""
Session Manager - Holds live games in memory.

The engine is stateless between calls; something has to hold the latest
snapshot of each game and make sure two requests never act on the same
snapshot at once. That is this module:

- One Session per game: current state, its die, a lock
- Every operation runs under the session lock and replaces the held
  state with the returned one
- In-memory only; the oldest game is evicted past max_games
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import threading
import time

from ..config import LUDO_DICE_SEED, LUDO_MAX_GAMES
from ..engine_core import (
    GameConfig,
    GameState,
    Move,
    apply_move,
    create_game,
    roll_dice,
    valid_moves,
)
from ..engine_core.dice import Die, SeededDie, system_die

logger = logging.getLogger(__name__)


class GameNotFoundError(KeyError):
    """No live game with this id."""

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Game {self.game_id} not found"


@dataclass
class Session:
    """A live game and what is needed to advance it."""
    game_id: str
    state: GameState
    die: Die = system_die
    created_at: float = field(default_factory=time.time)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class SessionManager:
    """
    Registry of live games.

    Usage:
        manager = SessionManager()
        state = manager.create_game(GameConfig(player_count=2))
        state = manager.roll(state.id)
        if state.turn_phase == TurnPhase.MOVE:
            state = manager.move(state.id, manager.valid_moves(state.id)[0].token_id)
    """

    def __init__(self, max_games: int = LUDO_MAX_GAMES, dice_seed: int | None = LUDO_DICE_SEED):
        self.max_games = max_games
        self.dice_seed = dice_seed
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def _default_die(self) -> Die:
        if self.dice_seed is None:
            return system_die
        return SeededDie(self.dice_seed)

    def _get(self, game_id: str) -> Session:
        with self._lock:
            session = self._sessions.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def create_game(self, config: GameConfig | None = None, die: Die | None = None) -> GameState:
        """Start a game and register it."""
        state = create_game(config)
        session = Session(game_id=state.id, state=state, die=die or self._default_die())

        with self._lock:
            self._sessions[state.id] = session
            while len(self._sessions) > self.max_games:
                oldest = min(self._sessions.values(), key=lambda s: s.created_at)
                del self._sessions[oldest.game_id]
                logger.info("Evicted game %s", oldest.game_id)

        logger.info("Created game %s (%d players)", state.id, state.num_players)
        return state

    def get_state(self, game_id: str) -> GameState:
        return self._get(game_id).state

    def roll(self, game_id: str) -> GameState:
        session = self._get(game_id)
        with session.lock:
            session.state = roll_dice(session.state, session.die)
            return session.state

    def move(self, game_id: str, token_id: str) -> GameState:
        session = self._get(game_id)
        with session.lock:
            session.state = apply_move(session.state, token_id)
            return session.state

    def reject(self, game_id: str, message: str) -> GameState:
        """Answer a stale request: same state, new message."""
        session = self._get(game_id)
        with session.lock:
            session.state = session.state.with_message(message)
            return session.state

    def valid_moves(self, game_id: str) -> list[Move]:
        return valid_moves(self._get(game_id).state)

    def end_game(self, game_id: str) -> bool:
        """Drop a game. Returns False if it did not exist."""
        with self._lock:
            session = self._sessions.pop(game_id, None)
        if session is None:
            return False
        logger.info("Ended game %s", game_id)
        return True

    def list_games(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

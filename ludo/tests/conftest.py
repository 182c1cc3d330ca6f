"""
Pytest fixtures for Ludo tests.
"""

import pytest

from ..engine_core import GameConfig, GameState, create_game
from ..session import SessionManager


@pytest.fixture
def two_player_game() -> GameState:
    """Red (seat 0) against green (seat 1)."""
    return create_game(GameConfig(
        player_count=2,
        player_names=["Rita", "Gus"],
        player_colors=["red", "green"],
    ))


@pytest.fixture
def three_player_game() -> GameState:
    """Red, green, yellow."""
    return create_game(GameConfig(player_count=3))


@pytest.fixture
def four_player_game() -> GameState:
    """Red, green, yellow, blue in default seat order."""
    return create_game(GameConfig(player_count=4))


@pytest.fixture
def manager() -> SessionManager:
    """A fresh in-memory session manager with an unseeded die."""
    return SessionManager(max_games=10, dice_seed=None)

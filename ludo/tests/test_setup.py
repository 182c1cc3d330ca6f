"""
Tests for game creation.
"""

import pytest

from ..engine_core import GameConfig, Color, TokenState, TurnPhase, create_game
from ..engine_core.board import START_POSITIONS, HOME_ENTRY_POSITIONS


class TestCreateGame:
    """Tests for create_game."""

    @pytest.mark.parametrize("count", [2, 3, 4])
    def test_player_and_token_counts(self, count):
        """Every player gets four tokens in base; first player rolls."""
        state = create_game(GameConfig(player_count=count))

        assert state.num_players == count
        assert state.turn_phase == TurnPhase.ROLL
        assert state.current_player_index == 0
        assert state.dice_value is None
        assert not state.game_over
        assert state.winner is None
        assert state.finish_order == ()
        assert state.move_history == ()
        for player in state.players:
            assert len(player.tokens) == 4
            for token in player.tokens:
                assert token.state == TokenState.BASE
                assert token.position == -1
                assert token.home_stretch_pos == -1
                assert token.steps_from_start == 0

    @pytest.mark.parametrize("requested,expected", [(0, 2), (1, 2), (5, 4), (9, 4)])
    def test_player_count_clamped(self, requested, expected):
        state = create_game(GameConfig(player_count=requested))
        assert state.num_players == expected

    def test_defaults(self):
        """Missing names and colours get the default cycle."""
        state = create_game(GameConfig(player_count=4))

        assert [p.name for p in state.players] == ["Player 1", "Player 2", "Player 3", "Player 4"]
        assert [p.color for p in state.players] == [Color.RED, Color.GREEN, Color.YELLOW, Color.BLUE]
        assert [p.index for p in state.players] == [0, 1, 2, 3]

    def test_partial_config(self):
        state = create_game(GameConfig(
            player_count=3,
            player_names=["Ann"],
            player_colors=["blue"],
        ))

        assert [p.name for p in state.players] == ["Ann", "Player 2", "Player 3"]
        assert [p.color for p in state.players] == [Color.BLUE, Color.RED, Color.GREEN]

    def test_duplicate_and_unknown_colors_replaced(self):
        """Colours stay unique even if the config repeats one."""
        state = create_game(GameConfig(
            player_count=3,
            player_colors=["green", "green", "purple"],
        ))

        colors = [p.color for p in state.players]
        assert colors == [Color.GREEN, Color.RED, Color.YELLOW]
        assert len(set(colors)) == 3

    def test_offsets_follow_color(self):
        """Start and home-entry cells come from the colour, not the seat."""
        state = create_game(GameConfig(player_count=2, player_colors=["yellow", "blue"]))

        yellow, blue = state.players
        assert yellow.start_pos == 26 == START_POSITIONS[Color.YELLOW]
        assert yellow.home_entry_pos == 24 == HOME_ENTRY_POSITIONS[Color.YELLOW]
        assert blue.start_pos == 39
        assert blue.home_entry_pos == 37

    def test_token_ids_unique(self, four_player_game):
        ids = [t.id for p in four_player_game.players for t in p.tokens]
        assert len(ids) == len(set(ids)) == 16
        assert four_player_game.players[0].tokens[2].id == "red_2"

    def test_game_ids_unique(self):
        ids = {create_game().id for _ in range(20)}
        assert len(ids) == 20

    def test_initial_message_names_first_player(self, two_player_game):
        assert "Rita" in two_player_game.message

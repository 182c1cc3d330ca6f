"""
Tests for the terminal CLI.
"""

import argparse

from ..cli import cmd_play, describe_token
from ..engine_core import GameState, Token, TokenState


def _inputs(*answers):
    answers = iter(answers)
    return lambda prompt: next(answers, "q")


class TestDescribeToken:

    def test_locations(self):
        assert describe_token(Token(id="red_0")) == "base"
        assert describe_token(Token(id="red_0", state=TokenState.HOME, steps_from_start=58)) == "home"
        assert describe_token(
            Token(id="red_0", state=TokenState.ACTIVE, home_stretch_pos=2, steps_from_start=55)
        ) == "home stretch 3/5"
        assert describe_token(
            Token(id="red_0", state=TokenState.ACTIVE, position=9, steps_from_start=9)
        ) == "cell 9 (9 steps)"


class TestPlay:

    def test_quit_immediately(self, capsys):
        args = argparse.Namespace(players=2, names=["Ann", "Bob"], colors=[], seed=3)

        state = cmd_play(args, input_fn=_inputs("q"))

        assert isinstance(state, GameState)
        assert [p.name for p in state.players] == ["Ann", "Bob"]
        assert state.move_history == ()
        assert "Ann" in capsys.readouterr().out

    def test_rolls_and_moves(self):
        args = argparse.Namespace(players=3, names=[], colors=["blue"], seed=5)

        # Enter rolls; "1".."4" answer any move prompt
        state = cmd_play(args, input_fn=_inputs(*(["", "1", "2", "3", "4"] * 20)))

        assert state.players[0].color.value == "blue"
        assert state.last_roll is not None

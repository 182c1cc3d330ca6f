"""
Ludo CLI - Command-line interface for the engine.

Usage:
    ludo play [--players N] [--names ...] [--colors ...] [--seed S]
                                   Pass-and-play in the terminal
    ludo serve [--host H] [--port P]
                                   Run the HTTP API with uvicorn
"""

import argparse
import sys

from .config import configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Ludo - Pass-and-play race game engine",
        prog="ludo",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: LUDO_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("--players", type=int, default=2, help="Number of players (2-4)")
    play_parser.add_argument("--names", nargs="*", default=[], help="Player names in seat order")
    play_parser.add_argument(
        "--colors", nargs="*", default=[],
        choices=["red", "green", "yellow", "blue"],
        help="Player colours in seat order",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Seed the die")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=3001, help="Bind port")

    args = parser.parse_args(argv)
    configure_logging(args.log_level.upper() if args.log_level else None)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def describe_token(token) -> str:
    """One-line location of a token."""
    from .engine_core import TokenState

    if token.state == TokenState.BASE:
        return "base"
    if token.state == TokenState.HOME:
        return "home"
    if token.in_home_stretch:
        return f"home stretch {token.home_stretch_pos + 1}/5"
    return f"cell {token.position} ({token.steps_from_start} steps)"


def print_board(state):
    for player in state.players:
        marker = ">" if player.index == state.current_player_index and not state.game_over else " "
        tokens = ", ".join(
            f"{i + 1}:{describe_token(t)}" for i, t in enumerate(player.tokens)
        )
        print(f"{marker} {player.name} [{player.color.value}]  {tokens}")


def cmd_play(args, input_fn=input):
    """Terminal pass-and-play loop."""
    from .engine_core import (
        GameConfig, SeededDie, TurnPhase, apply_move, create_game, roll_dice, system_die, valid_moves,
    )

    state = create_game(GameConfig(
        player_count=args.players,
        player_names=args.names,
        player_colors=args.colors,
    ))
    die = SeededDie(args.seed) if args.seed is not None else system_die

    print(f"Game {state.id}")
    print("Enter: roll    1-4: move token    q: quit")

    while not state.game_over:
        print()
        print_board(state)
        print(state.message)

        player = state.current_player
        if state.turn_phase == TurnPhase.ROLL:
            command = input_fn(f"{player.name}, roll> ").strip().lower()
            if command == "q":
                return state
            state = roll_dice(state, die)
            continue

        moves = valid_moves(state)
        choices = {str(m.token_index + 1): m.token_id for m in moves}
        command = input_fn(
            f"{player.name}, rolled {state.dice_value}. Move token {'/'.join(choices)}> "
        ).strip().lower()
        if command == "q":
            return state
        if command not in choices:
            print("Pick one of the listed tokens.")
            continue
        state = apply_move(state, choices[command])

    print()
    print_board(state)
    print(state.message)
    return state


def cmd_serve(args):
    """Run the HTTP API."""
    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn not installed. Install with: pip install 'ludo-engine[server]'")
        sys.exit(1)

    from .api import create_app

    uvicorn.run(create_app(), host=args.host, port=args.port)


if __name__ == "__main__":
    main()

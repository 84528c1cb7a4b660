"""
Terminal front end for Minesweeper.

Usage:
    python main.py play [--seed N]
    python main.py watch [--games N] [--delay S] [--seed N]
"""
import argparse
import time
from typing import Callable, List, Optional, Tuple

import numpy as np

from .environment import MinesweeperEnv
from .session import GameSession
from .view import render_text


HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"

Command = Tuple[str, Optional[int], Optional[int]]


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Returns:
        Tuple of (verb, row, col). Row and col are None for "n" and "q".

    Raises:
        ValueError: If the line is not a known command.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")
    verb = parts[0].lower()
    if verb in ("n", "q"):
        if len(parts) != 1:
            raise ValueError(f"'{verb}' takes no arguments")
        return verb, None, None
    if verb in ("r", "f"):
        if len(parts) != 3:
            raise ValueError(f"'{verb}' needs a row and a column")
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            raise ValueError("Row and column must be integers") from None
        return verb, row, col
    raise ValueError(f"Unknown command: {parts[0]}")


def play(
    session: GameSession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Run an interactive game until the player quits or input ends."""
    write(HELP_TEXT)
    write(render_text(session.game))

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            return

        try:
            verb, row, col = parse_command(line)
        except ValueError as exc:
            write(f"{exc}. {HELP_TEXT}")
            continue

        if verb == "q":
            return
        if verb == "n":
            game = session.on_new_game()
        elif verb == "r":
            game = session.on_reveal(row, col)
        else:
            game = session.on_toggle_flag(row, col)
        write(render_text(game))


def watch(games: int = 5, delay: float = 0.3, seed: Optional[int] = None) -> None:
    """Watch a player that clicks random hidden cells."""
    env = MinesweeperEnv(render_mode="ansi")
    rng = np.random.default_rng(seed)
    wins = 0

    for game in range(games):
        env.reset(seed=None if seed is None else seed + game)
        print(f"=== Game {game + 1}/{games} ===")
        print(env.render())

        done = False
        step = 0
        while not done:
            reveal_mask = env.get_action_mask()[: env.config.total_cells]
            action = int(rng.choice(np.flatnonzero(reveal_mask)))
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            row, col = divmod(action, env.config.width)
            print(f"\n=== Game {game + 1}/{games} | Step {step} | ({row}, {col}) ===")
            print(env.render())
            time.sleep(delay)

        if info["game_state"] == "WON":
            wins += 1

    print(f"\n=== Final: {wins}/{games} wins ===")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    watch_parser = subparsers.add_parser(
        "watch", help="Watch a random player"
    )
    watch_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    watch_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )
    watch_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mines and moves"
    )

    args = parser.parse_args(argv)

    if args.command == "play":
        play(GameSession(seed=args.seed))
    elif args.command == "watch":
        watch(games=args.games, delay=args.delay, seed=args.seed)
    else:
        parser.print_help()

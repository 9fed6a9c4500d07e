"""
Interactive game: a human against the engine on the terminal.

Usage:
    xo-play                      # engine plays X
    xo-play --engine o --hints   # engine plays O, show move scores
    xo-play --board "x..-.o.-..."
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .board import GameState, Player, Position
from .errors import PositionOutOfRange, SquareOccupied
from .search import move_scores, search

log = logging.getLogger(__name__)

SQUARE_GUIDE = (
    " 0 | 1 | 2 \n"
    "---+---+---\n"
    " 3 | 4 | 5 \n"
    "---+---+---\n"
    " 6 | 7 | 8 "
)


@dataclass
class PlayConfig:
    """Interactive game configuration."""

    # Side played by the engine; None for two humans
    engine: Optional[Player] = Player.X

    # Starting board in `Position.parse` format
    board: str = ""

    # Print the score of every square before each human move
    hints: bool = False


def engine_move(pos: Position) -> int:
    """Play the engine's optimal move on `pos` and return it."""
    result = search(pos)
    log.debug("engine plays %d (score %+d)", result.move, result.score)
    pos.apply_move(result.move)
    return result.move


def user_move(pos: Position, read: Callable[[str], str] = input) -> int:
    """
    Prompt until the human enters a legal square, then play it.

    Out-of-range and occupied squares re-prompt; other errors propagate.
    """
    while True:
        raw = read("enter position (0..8): ")
        try:
            idx = int(raw.strip())
        except ValueError:
            print("expected a valid unsigned integer")
            continue

        try:
            pos.apply_move(idx)
        except PositionOutOfRange:
            print("expected number in range 0..8")
            continue
        except SquareOccupied:
            print(f"square at index {idx} was occupied")
            continue
        return idx


def print_hints(pos: Position) -> None:
    scores = move_scores(pos)
    labels = {1: "win", 0: "draw", -1: "loss"}
    print("  ".join(f"{m}:{labels[s]}" for m, s in scores.items()))


def play_interactive(cfg: PlayConfig, read: Callable[[str], str] = input) -> GameState:
    """Alternate engine and human moves until the game ends."""
    pos = Position.parse(cfg.board)

    print("Enter moves as numbers 0-8:")
    print(SQUARE_GUIDE)

    while not pos.state().is_over:
        player = pos.next_player()
        if cfg.engine is player:
            move = engine_move(pos)
            print(f"{player} plays: {move}")
        else:
            print(f"\n\n{pos}{player} to move")
            if cfg.hints:
                print_hints(pos)
            user_move(pos, read)

    state = pos.state()
    print(f"\n\n{pos}")
    if state.winner is not None:
        print(f"{state.winner} has won")
    else:
        print("draw")
    return state


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Play tic-tac-toe against a perfect engine.")
    p.add_argument("--engine", type=str, default="x", choices=["x", "o", "none"],
                   help="Side played by the engine")
    p.add_argument("--board", type=str, default="", help="Starting board, e.g. 'x..-.o.-...'")
    p.add_argument("--hints", action="store_true", help="Show the score of every square")
    p.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    return p.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    engine = None if args.engine == "none" else Player(args.engine.upper())
    cfg = PlayConfig(engine=engine, board=args.board, hints=args.hints)

    try:
        play_interactive(cfg)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted")


if __name__ == "__main__":
    main()

"""
Evaluation functions.

Plays the engine against random and perfect opponents, and audits
`best_move` on every legal position.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from tqdm.auto import tqdm, trange

from .board import GameState, Player, Position
from .errors import AuditError
from .search import best_move, iter_legal_positions, search

Agent = Callable[[Position], int]


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Games vs random
    games: int = 500

    # Random seed
    seed: int = 0

    # Exhaustive audit of all legal positions
    audit: bool = True

    # Progress bars
    progress: bool = True


def engine_agent(pos: Position) -> int:
    """Play the engine's optimal move."""
    return best_move(pos)


def random_agent(rng: random.Random) -> Agent:
    """Agent playing uniformly among empty squares."""

    def play(pos: Position) -> int:
        return rng.choice(pos.empty_squares())

    return play


def play_game(
    x_agent: Agent,
    o_agent: Agent,
    start: Optional[Position] = None,
) -> Tuple[GameState, List[int]]:
    """
    Play one game to the end.

    Returns:
        (final_state, moves) where moves lists the squares played in order
    """
    pos = start.copy() if start is not None else Position()
    moves = []

    while not pos.state().is_over:
        agent = x_agent if pos.next_player() is Player.X else o_agent
        action = agent(pos)
        pos.apply_move(action)
        moves.append(action)

    return pos.state(), moves


def eval_vs_random(
    games: int = 500,
    seed: int = 0,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Evaluate the engine vs a random opponent, alternating sides.

    Returns:
        Dict with 'games', 'engine_w', 'engine_d', 'engine_l'
    """
    rng = random.Random(seed)
    opponent = random_agent(rng)
    wins = draws = losses = 0

    for g in trange(games, desc="vs random", disable=not progress):
        engine_side = Player.X if g % 2 == 0 else Player.O
        if engine_side is Player.X:
            state, _ = play_game(engine_agent, opponent)
        else:
            state, _ = play_game(opponent, engine_agent)

        if state.winner is None:
            draws += 1
        elif state.winner is engine_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return {
        "games": total,
        "engine_w": wins / total,
        "engine_d": draws / total,
        "engine_l": losses / total,
    }


def eval_self_play() -> Tuple[GameState, List[int]]:
    """Engine vs engine from the empty board."""
    return play_game(engine_agent, engine_agent)


def audit_all_positions(progress: bool = False) -> Dict[str, int]:
    """
    Run `search` on every legal non-terminal position.

    Checks that the chosen square is empty and that the position is left
    unchanged.

    Returns:
        Dict with 'positions', 'wins', 'draws', 'losses' (by root score)

    Raises:
        AuditError: on the first position that fails a check
    """
    counts = {"positions": 0, "wins": 0, "draws": 0, "losses": 0}
    positions = list(iter_legal_positions())

    for pos in tqdm(positions, desc="audit", disable=not progress):
        before = pos.copy()
        result = search(pos)

        if pos != before:
            raise AuditError(f"search modified position {before.compact()}")
        if pos.square_at(result.move) is not None:
            raise AuditError(
                f"move {result.move} is occupied in {pos.compact()}"
            )

        counts["positions"] += 1
        if result.score > 0:
            counts["wins"] += 1
        elif result.score < 0:
            counts["losses"] += 1
        else:
            counts["draws"] += 1

    return counts

"""
Tensor encodings of positions and of the engine's optimal play.

Provides policy and value targets for learned players:
  - pi_star: uniform distribution over optimal moves
  - v_star: exact value in {-1, 0, +1} for the side to move
"""

from typing import Tuple

import torch

from .board import N_SQUARES, Position
from .search import move_scores, position_value


def position_tokens(pos: Position) -> torch.Tensor:
    """
    Encode the board from the perspective of the side to move.

    Returns:
        [9] long tensor: 0 empty, 1 side to move, 2 opponent
    """
    me = pos.next_player()
    tokens = torch.zeros(N_SQUARES, dtype=torch.long)
    for i in range(N_SQUARES):
        occupant = pos.square_at(i)
        if occupant is None:
            continue
        tokens[i] = 1 if occupant is me else 2
    return tokens


def legal_move_mask(pos: Position) -> torch.Tensor:
    """[9] bool tensor, True on empty squares."""
    mask = torch.zeros(N_SQUARES, dtype=torch.bool)
    mask[pos.empty_squares()] = True
    return mask


def score_tensor(pos: Position) -> torch.Tensor:
    """[9] float tensor of per-square scores; nan on occupied squares."""
    scores = torch.full((N_SQUARES,), float("nan"), dtype=torch.float32)
    for move, score in move_scores(pos).items():
        scores[move] = float(score)
    return scores


def optimal_policy(pos: Position) -> Tuple[torch.Tensor, torch.Tensor]:
    """
    Compute optimal targets (policy and value).

    Returns:
        pi_star: [9] tensor with uniform distribution over optimal moves
            (all zeros for a finished game)
        v_star: scalar tensor in {-1, 0, +1}
    """
    v = position_value(pos)
    pi = torch.zeros(N_SQUARES, dtype=torch.float32)

    if not pos.state().is_over:
        scores = move_scores(pos)
        best = max(scores.values())
        best_moves = [m for m, s in scores.items() if s == best]
        pi[best_moves] = 1.0 / len(best_moves)

    return pi, torch.tensor(float(v), dtype=torch.float32)

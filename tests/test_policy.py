import math

import pytest
import torch

from xo import (
    InvalidBoard,
    Position,
    legal_move_mask,
    optimal_policy,
    position_tokens,
    score_tensor,
)


def test_position_tokens_perspective():
    # O to move: O squares are "self"
    pos = Position.parse("x..-.o.-..x")
    tokens = position_tokens(pos)
    assert tokens.dtype == torch.long
    assert tokens.tolist() == [2, 0, 0, 0, 1, 0, 0, 0, 2]


def test_legal_move_mask():
    mask = legal_move_mask(Position.parse("x..-.o.-..x"))
    assert mask.dtype == torch.bool
    assert mask.tolist() == [False, True, True, True, False, True, True, True, False]


def test_optimal_policy_empty_board():
    pi, v = optimal_policy(Position())
    assert torch.allclose(pi, torch.full((9,), 1.0 / 9))
    assert v.item() == 0.0


def test_optimal_policy_winning_position():
    pos = Position.parse("xx.-oo.-...")
    pi, v = optimal_policy(pos)
    assert v.item() == 1.0
    assert pi[2].item() > 0
    assert pi.sum().item() == pytest.approx(1.0)
    assert pi[[0, 1, 3, 4]].sum().item() == 0.0


def test_optimal_policy_terminal():
    pi, v = optimal_policy(Position.parse("xxx-oo.-..."))
    assert pi.sum().item() == 0.0
    assert v.item() == -1.0


def test_optimal_policy_invalid_board():
    with pytest.raises(InvalidBoard):
        optimal_policy(Position(x=1, o=1))


def test_score_tensor():
    scores = score_tensor(Position.parse("xx.-oo.-..."))
    assert math.isnan(scores[0].item())
    assert math.isnan(scores[3].item())
    assert scores[2].item() == 1.0

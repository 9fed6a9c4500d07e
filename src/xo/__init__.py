"""
xo - Perfect-play TicTacToe.

This package implements a bitset board and an exhaustive negamax search
with alpha-beta pruning that always finds a game-theoretically optimal move.
"""

from .errors import (
    XOError,
    PositionOutOfRange,
    SquareOccupied,
    GameOver,
    GameAlreadyOver,
    InvalidBoardLength,
    InvalidBoard,
    AuditError,
)
from .board import Position, Player, GameState, WIN_LINES
from .search import (
    SearchResult,
    negamax,
    search,
    best_move,
    move_scores,
    position_value,
    principal_variation,
    iter_legal_positions,
)
from .policy import position_tokens, legal_move_mask, score_tensor, optimal_policy
from .eval import (
    EvalConfig,
    engine_agent,
    random_agent,
    play_game,
    eval_vs_random,
    eval_self_play,
    audit_all_positions,
)

__version__ = "0.1.0"
__all__ = [
    "XOError",
    "PositionOutOfRange",
    "SquareOccupied",
    "GameOver",
    "GameAlreadyOver",
    "InvalidBoardLength",
    "InvalidBoard",
    "AuditError",
    "Position",
    "Player",
    "GameState",
    "WIN_LINES",
    "SearchResult",
    "negamax",
    "search",
    "best_move",
    "move_scores",
    "position_value",
    "principal_variation",
    "iter_legal_positions",
    "position_tokens",
    "legal_move_mask",
    "score_tensor",
    "optimal_policy",
    "EvalConfig",
    "engine_agent",
    "random_agent",
    "play_game",
    "eval_vs_random",
    "eval_self_play",
    "audit_all_positions",
]

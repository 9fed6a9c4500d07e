"""
Exhaustive negamax search with alpha-beta pruning.

Scores are from the perspective of the side to move:
  +1 win, 0 draw, -1 loss (with perfect play from both sides).

The search explores hypothetical moves in place on a private copy of the
position and retracts each one before trying the next.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, List

from .board import N_SQUARES, GameState, Player, Position, has_line
from .errors import GameOver, InvalidBoard

# Window sentinels; never equal to a real score under negation.
NEG_INF = -math.inf
POS_INF = math.inf


@dataclass(frozen=True)
class SearchResult:
    """Chosen square and its score for the side to move."""
    move: int
    score: int


def negamax(pos: Position, alpha: float = NEG_INF, beta: float = POS_INF) -> float:
    """
    Score `pos` for the player about to move.

    Args:
        pos: Position to evaluate; restored before returning
        alpha: lower bound of the search window
        beta: upper bound of the search window

    Returns:
        +1, 0 or -1; NEG_INF only if an ongoing position had no empty square
    """
    mover = pos.next_player()
    state = pos.state()

    if state.winner is mover:
        return 1
    if state.winner is not None:
        return -1
    if state is GameState.DRAW:
        return 0

    best = NEG_INF
    for idx in pos.empty_squares():
        with pos.trial(idx, mover):
            score = -negamax(pos, -beta, -alpha)
        if score > best:
            best = score
        if best > alpha:
            alpha = best
        if alpha >= beta:
            break
    return best


def _check_searchable(pos: Position) -> None:
    if not pos.is_valid():
        raise InvalidBoard()
    if pos.state().is_over:
        raise GameOver()


def _root_scores(pos: Position) -> Iterator[SearchResult]:
    """Exact score of each empty square, in increasing index order."""
    work = pos.copy()
    mover = work.next_player()
    for idx in work.empty_squares():
        with work.trial(idx, mover):
            score = -negamax(work, NEG_INF, POS_INF)
        yield SearchResult(move=idx, score=int(score))


def search(pos: Position) -> SearchResult:
    """
    Find an optimal move and its score.

    Ties go to the lowest square index.

    Raises:
        InvalidBoard: a square is claimed by both players
        GameOver: the position is already won or drawn
    """
    _check_searchable(pos)

    best = None
    for result in _root_scores(pos):
        if best is None or result.score > best.score:
            best = result

    if best is None:
        raise GameOver("no empty square to play")
    return best


def best_move(pos: Position) -> int:
    """Index of an optimal move for the side to move. See `search`."""
    return search(pos).move


def move_scores(pos: Position) -> Dict[int, int]:
    """Exact score of every empty square. Same errors as `search`."""
    _check_searchable(pos)
    return {r.move: r.score for r in _root_scores(pos)}


def position_value(pos: Position) -> int:
    """
    Exact value of `pos` for the side to move, terminal positions included.

    Raises:
        InvalidBoard: a square is claimed by both players
    """
    if not pos.is_valid():
        raise InvalidBoard()
    return int(negamax(pos.copy(), NEG_INF, POS_INF))


def _decode(n: int) -> Position:
    """Base-3 digit i of `n`: 0 empty, 1 X, 2 O."""
    pos = Position()
    for i in range(N_SQUARES):
        n, d = divmod(n, 3)
        if d == 1:
            pos.force_square(i, Player.X)
        elif d == 2:
            pos.force_square(i, Player.O)
    return pos


def iter_legal_positions(include_terminal: bool = False) -> Iterator[Position]:
    """
    Iterate over every position reachable in legal play.

    Yields:
        Positions with X having as many marks as O or one more, at most one
        winner, and (unless `include_terminal`) no winner and no full board.
    """
    for n in range(3 ** N_SQUARES):
        pos = _decode(n)
        x_cnt = bin(pos.x).count("1")
        o_cnt = bin(pos.o).count("1")

        # Legal turn order: X starts
        if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
            continue

        if not _reachable(pos, x_cnt, o_cnt):
            continue

        if not include_terminal and pos.state().is_over:
            continue

        yield pos


def _reachable(pos: Position, x_cnt: int, o_cnt: int) -> bool:
    """Reject boards where play would have stopped earlier."""
    x_won = has_line(pos.x)
    o_won = has_line(pos.o)
    if x_won and o_won:
        return False
    # The winner made the last move.
    if x_won and x_cnt != o_cnt + 1:
        return False
    if o_won and x_cnt != o_cnt:
        return False
    return True


def principal_variation(pos: Position) -> List[int]:
    """Moves chosen by `best_move` for both sides until the game ends."""
    work = pos.copy()
    line = []
    while not work.state().is_over:
        move = best_move(work)
        work.apply_move(move)
        line.append(move)
    return line

"""
TicTacToe board representation and rules.

Board representation: two 9-bit sets, one per player.
  - bit i of `x` set: X occupies square i
  - bit i of `o` set: O occupies square i

Squares are numbered row-major:
   0 | 1 | 2
  ---+---+---
   3 | 4 | 5
  ---+---+---
   6 | 7 | 8

X moves first. The side to move is derived from the mark counts.
"""

from contextlib import contextmanager
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator, List, Optional

from .errors import GameOver, InvalidBoardLength, PositionOutOfRange, SquareOccupied

N_SQUARES = 9

# Winning lines (rows, columns, diagonals)
WIN_LINES = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]

WIN_MASKS = [(1 << a) | (1 << b) | (1 << c) for a, b, c in WIN_LINES]
FULL_MASK = (1 << N_SQUARES) - 1


class Player(Enum):
    """A player in XO. X moves first."""

    X = "X"
    O = "O"

    def __str__(self) -> str:
        return self.value


class GameState(Enum):
    """Terminal classification of a position."""

    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"
    ONGOING = "ongoing"

    @property
    def winner(self) -> Optional[Player]:
        if self is GameState.X_WINS:
            return Player.X
        if self is GameState.O_WINS:
            return Player.O
        return None

    @property
    def is_over(self) -> bool:
        return self is not GameState.ONGOING


def has_line(bits: int) -> bool:
    for mask in WIN_MASKS:
        if bits & mask == mask:
            return True
    return False


@dataclass
class Position:
    """
    Occupancy of the 3x3 board.

    Compared by value. Mutated only through `apply_move`, or through
    `force_square`/`trial` while exploring hypothetical moves.
    """

    x: int = 0
    o: int = 0

    def copy(self) -> "Position":
        return replace(self)

    def next_player(self) -> Player:
        """X if the mark counts are equal, otherwise O."""
        if bin(self.x).count("1") > bin(self.o).count("1"):
            return Player.O
        return Player.X

    def state(self) -> GameState:
        """
        Classify the position as won, drawn or ongoing.

        If both players own a full line (unreachable in play) X's win is
        reported.
        """
        if has_line(self.x):
            return GameState.X_WINS
        if has_line(self.o):
            return GameState.O_WINS
        if self.x | self.o == FULL_MASK:
            return GameState.DRAW
        return GameState.ONGOING

    def square_at(self, idx: int) -> Optional[Player]:
        """Occupant of square `idx`, or None if empty or out of range."""
        if not 0 <= idx < N_SQUARES:
            return None
        bit = 1 << idx
        if self.x & bit:
            return Player.X
        if self.o & bit:
            return Player.O
        return None

    def is_valid(self) -> bool:
        """True iff no square is claimed by both players."""
        return self.x & self.o == 0

    def empty_squares(self) -> List[int]:
        """Indices of empty squares in increasing order."""
        taken = self.x | self.o
        return [i for i in range(N_SQUARES) if not taken & (1 << i)]

    def apply_move(self, idx: int) -> GameState:
        """
        Place the next player's mark at `idx`.

        Returns:
            the game state as it was *before* the move

        Raises:
            PositionOutOfRange, GameOver, SquareOccupied (checked in that order)
        """
        if not 0 <= idx < N_SQUARES:
            raise PositionOutOfRange(idx)
        state = self.state()
        if state.is_over:
            raise GameOver()
        if self.square_at(idx) is not None:
            raise SquareOccupied(idx)
        self.force_square(idx, self.next_player())
        return state

    def force_square(self, idx: int, value: Optional[Player]) -> None:
        """Set square `idx` to `value` (None clears it). No legality checks."""
        if not 0 <= idx < N_SQUARES:
            return
        bit = 1 << idx
        self.x &= ~bit
        self.o &= ~bit
        if value is Player.X:
            self.x |= bit
        elif value is Player.O:
            self.o |= bit

    @contextmanager
    def trial(self, idx: int, player: Player) -> Iterator["Position"]:
        """Temporarily place `player` at the empty square `idx`."""
        self.force_square(idx, player)
        try:
            yield self
        finally:
            self.force_square(idx, None)

    @classmethod
    def parse(cls, text: str) -> "Position":
        """
        Parse a board from text, e.g. "xo.-oxx-..o" or "XXO/OXO/XOX".

        'X'/'x' mark X, 'O'/'o'/'0' mark O, ' ', '.' and '_' are empty
        squares. Any other character separates rows and is skipped.
        """
        pos = cls()
        idx = 0
        for ch in text:
            if ch in "Oo0":
                owner = Player.O
            elif ch in "Xx":
                owner = Player.X
            elif ch in " ._":
                owner = None
            else:
                continue

            if idx >= N_SQUARES:
                raise InvalidBoardLength()
            if owner is Player.X:
                pos.x |= 1 << idx
            elif owner is Player.O:
                pos.o |= 1 << idx
            idx += 1
        return pos

    def compact(self) -> str:
        """One-line form accepted by `parse`, e.g. "xo.-oxx-..o"."""
        rows = []
        for row in range(3):
            cells = []
            for col in range(3):
                occupant = self.square_at(row * 3 + col)
                cells.append(occupant.value.lower() if occupant else ".")
            rows.append("".join(cells))
        return "-".join(rows)

    def __str__(self) -> str:
        out = []
        for row in range(3):
            out.append("+---+---+---+\n| ")
            for col in range(3):
                occupant = self.square_at(row * 3 + col)
                out.append(f"{occupant} | " if occupant else "  | ")
            out.append("\n")
        out.append("+---+---+---+\n")
        return "".join(out)

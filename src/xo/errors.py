"""
Exceptions raised by the board and the search.
"""


class XOError(Exception):
    """Base class for all xo errors."""


class PositionOutOfRange(XOError, IndexError):
    """The square index is outside 0..8."""

    def __init__(self, index: int):
        super().__init__(f"square index {index} is outside 0..8")
        self.index = index


class SquareOccupied(XOError, ValueError):
    """The target square already holds a mark."""

    def __init__(self, index: int):
        super().__init__(f"square {index} is already occupied")
        self.index = index


class GameOver(XOError):
    """The game is already won or drawn, so no more moves can be played."""

    def __init__(self, message: str = "the game is already over"):
        super().__init__(message)


GameAlreadyOver = GameOver


class InvalidBoardLength(XOError, ValueError):
    """Too many squares were given to Position.parse."""

    def __init__(self, message: str = "board text describes more than 9 squares"):
        super().__init__(message)


class InvalidBoard(XOError, ValueError):
    """A square is claimed by both players."""

    def __init__(self, message: str = "a square is claimed by both players"):
        super().__init__(message)


class AuditError(XOError, AssertionError):
    """The engine broke one of its guarantees on some position."""

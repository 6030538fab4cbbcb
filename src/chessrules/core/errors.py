"""Exception hierarchy for the rules engine.

Rule violations on the predicate API are reported as ``False``. The classes
below cover the cases where a boolean is not enough: malformed input, boards
missing a king, and explicit requests (``perform_*`` / ``*_move`` helpers)
that cannot be honoured.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all errors raised by the rules engine."""


class OutOfBoundsSquareError(ChessRulesError, ValueError):
    """A square index lies outside the 8x8 board."""

    def __init__(self, square: object) -> None:
        super().__init__(f"Square out of bounds: {square!r}")
        self.square = square


class KingNotFoundError(ChessRulesError, LookupError):
    """The board has no king of the requested color."""

    def __init__(self, color: object) -> None:
        name = getattr(color, "name", color)
        super().__init__(f"No {name} king on board")
        self.color = color


class EmptySquareError(ChessRulesError, LookupError):
    """A move was applied from a square that holds no piece."""

    def __init__(self, square: object) -> None:
        super().__init__(f"No piece on {square!r}")
        self.square = square


class InvalidPlacementError(ChessRulesError, ValueError):
    """A board placement string could not be parsed."""


class IllegalMoveError(ChessRulesError, ValueError):
    """An explicitly requested move is not allowed."""


class InvalidPromotionError(IllegalMoveError):
    """A pawn promotion request is malformed or illegal."""

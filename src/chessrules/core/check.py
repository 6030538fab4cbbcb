"""Check detection built on the move validator."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.types import Square, as_square
from chessrules.core.validator import is_legal_move


def attackers_of(board: Board, target: tuple[int, int], by_color: Color) -> list[Square]:
    """Squares of *by_color* pieces that could legally move onto *target*.

    This asks the validator, so a pawn only counts when *target* holds a piece
    of the other color; an empty square is never "attacked" by a pawn here.
    """
    target = as_square(target)
    return [
        sq
        for sq, piece in board.occupied()
        if piece.color == by_color and is_legal_move(board, piece, sq, target)
    ]


def checkers(board: Board, color: Color) -> list[Square]:
    """Enemy squares currently giving check to *color*'s king."""
    return attackers_of(board, board.king_square(color), color.opposite)


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by any opposing piece?

    Raises:
        KingNotFoundError: if *color* has no king on the board.
    """
    king_sq = board.king_square(color)
    opponent = color.opposite
    for sq, piece in board.occupied():
        if piece.color == opponent and is_legal_move(board, piece, sq, king_sq):
            return True
    return False


def leaves_king_safe(board: Board, move: Move, color: Color) -> bool:
    """Apply *move* on a clone and report whether *color* is out of check."""
    trial = board.copy()
    trial.make_move(move)
    return not is_in_check(trial, color)

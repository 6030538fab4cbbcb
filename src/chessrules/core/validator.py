"""Move validation by piece kind: movement pattern and path blocking only.

None of these predicates knows about check. They also trust the caller on
two points: that *piece* actually stands on *start*, and that it is that
side's turn.
"""

from __future__ import annotations

from collections.abc import Callable

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, as_square

MoveValidator = Callable[[Board, Piece, Square, Square], bool]

# Rank step of a pawn advance, and the rank it starts the game on.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_START_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _coords(
    start: tuple[int, int], end: tuple[int, int]
) -> tuple[Square, Square]:
    return as_square(start), as_square(end)


def _can_land(board: Board, piece: Piece, end: Square) -> bool:
    """Destination is empty or holds an enemy piece."""
    target = board[end]
    return target is None or target.color != piece.color


def _path_clear(board: Board, start: Square, end: Square) -> bool:
    """Every square strictly between *start* and *end* is empty.

    Assumes the two squares share a rank, a file or a diagonal.
    """
    step_rank = _sign(end.rank - start.rank)
    step_file = _sign(end.file - start.file)
    rank = start.rank + step_rank
    file = start.file + step_file
    while (rank, file) != end:
        if board[rank, file] is not None:
            return False
        rank += step_rank
        file += step_file
    return True


# -- Per-kind validators ----------------------------------------------------


def is_valid_pawn_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    """Single step, double step from the start rank, or diagonal capture."""
    start, end = _coords(start, end)
    direction = PAWN_DIRECTION[piece.color]
    d_rank = end.rank - start.rank
    d_file = end.file - start.file
    target = board[end]

    if d_file == 0:
        if d_rank == direction:
            return target is None
        if d_rank == 2 * direction and start.rank == PAWN_START_RANK[piece.color]:
            skipped = Square(start.rank + direction, start.file)
            return target is None and board.is_empty(skipped)
        return False

    if abs(d_file) == 1 and d_rank == direction:
        return piece.is_enemy_of(target)
    return False


def is_valid_rook_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    start, end = _coords(start, end)
    if start == end:
        return False
    if start.rank != end.rank and start.file != end.file:
        return False
    return _path_clear(board, start, end) and _can_land(board, piece, end)


def is_valid_knight_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    """Knights jump: only the L-shape and the destination matter."""
    start, end = _coords(start, end)
    d_rank = abs(end.rank - start.rank)
    d_file = abs(end.file - start.file)
    if (d_rank, d_file) not in ((2, 1), (1, 2)):
        return False
    return _can_land(board, piece, end)


def is_valid_bishop_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    start, end = _coords(start, end)
    if start == end:
        return False
    if abs(end.rank - start.rank) != abs(end.file - start.file):
        return False
    return _path_clear(board, start, end) and _can_land(board, piece, end)


def is_valid_queen_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    return is_valid_rook_move(board, piece, start, end) or is_valid_bishop_move(
        board, piece, start, end
    )


def is_valid_king_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    """One square in any direction. Castling is handled in special_moves."""
    start, end = _coords(start, end)
    d_rank = abs(end.rank - start.rank)
    d_file = abs(end.file - start.file)
    if max(d_rank, d_file) != 1:
        return False
    return _can_land(board, piece, end)


_VALIDATORS: dict[PieceType, MoveValidator] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
    PieceType.KING: is_valid_king_move,
}


def is_legal_move(
    board: Board, piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> bool:
    """Whether *piece* may move from *start* to *end* on the static *board*.

    Raises:
        OutOfBoundsSquareError: if either square is off the board.
    """
    start, end = _coords(start, end)
    if start == end:
        return False
    return _VALIDATORS[piece.kind](board, piece, start, end)

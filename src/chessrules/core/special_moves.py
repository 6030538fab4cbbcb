"""En passant, castling and pawn promotion.

Castling rights and the en passant target are state the caller tracks
between moves; every function here takes them as arguments and keeps
nothing.
"""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.check import is_in_check
from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.errors import IllegalMoveError, InvalidPromotionError
from chessrules.core.move import Move
from chessrules.core.options import DEFAULT_OPTIONS, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.types import Square, as_square
from chessrules.core.validator import (
    PAWN_DIRECTION,
    PAWN_START_RANK,
    is_valid_pawn_move,
)

_LOGGER = logging.getLogger(__name__)

PROMOTION_KINDS: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_HOME_RANK: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}
_KING_HOME_FILE = 4
# A pawn can only capture en passant from its fifth rank.
_EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 4, Color.BLACK: 3}
_PROMOTION_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


# ── En passant ──────────────────────────────────────────────────────────────


def en_passant_target(
    piece: Piece, start: tuple[int, int], end: tuple[int, int]
) -> Square | None:
    """The square skipped by a pawn double step, or None for any other move."""
    start, end = as_square(start), as_square(end)
    if piece.kind != PieceType.PAWN or start.file != end.file:
        return None
    direction = PAWN_DIRECTION[piece.color]
    if start.rank != PAWN_START_RANK[piece.color] or end.rank - start.rank != 2 * direction:
        return None
    return Square(start.rank + direction, start.file)


def is_valid_en_passant(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    en_passant: tuple[int, int] | None,
) -> bool:
    """Pawn on its fifth rank moving onto the en passant target.

    Only the rank and the target square are checked. Whether *en_passant*
    really follows an enemy double step next to *start* is up to the caller.
    """
    start, end = as_square(start), as_square(end)
    if piece.kind != PieceType.PAWN:
        return False
    if start.rank != _EN_PASSANT_RANK[piece.color]:
        return False
    return en_passant is not None and end == as_square(en_passant)


def en_passant_move(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    en_passant: tuple[int, int] | None,
) -> Move:
    """Build the flagged en passant :class:`Move` or raise ``IllegalMoveError``."""
    if not is_valid_en_passant(board, piece, start, end, en_passant):
        raise IllegalMoveError(f"Not a valid en passant capture: {start} -> {end}")
    return Move(as_square(start), as_square(end), MoveFlag.EN_PASSANT)


# ── Castling ────────────────────────────────────────────────────────────────


def _king_safe_on(board: Board, king: Piece, home: Square, sq: Square) -> bool:
    trial = board.copy()
    trial[home] = None
    trial[sq] = king
    return not is_in_check(trial, king.color)


def is_valid_castling(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    rights: tuple[bool, bool],
    options: RuleOptions | None = None,
) -> bool:
    """King two files toward a rook from its home square.

    *rights* is the caller's ``(queenside, kingside)`` availability for the
    king's color. The king must not stand in check once castled; with
    ``options.castling_transit_check`` it must also not start in check or
    cross an attacked square.
    """
    options = options if options is not None else DEFAULT_OPTIONS
    start, end = as_square(start), as_square(end)
    if piece.kind != PieceType.KING:
        return False

    home = Square(_HOME_RANK[piece.color], _KING_HOME_FILE)
    if start != home:
        return False
    if end.rank != start.rank or end.file not in (2, 6):
        return False

    kingside = end.file == 6
    queenside_right, kingside_right = rights
    if not (kingside_right if kingside else queenside_right):
        _LOGGER.debug("Castling %s -> %s rejected: right not available", start, end)
        return False

    between = range(5, 7) if kingside else range(1, 4)
    if any(not board.is_empty((start.rank, f)) for f in between):
        return False

    if options.castling_transit_check:
        transit = Square(start.rank, 5 if kingside else 3)
        if not _king_safe_on(board, piece, home, home):
            return False
        if not _king_safe_on(board, piece, home, transit):
            return False

    # Only the king is moved for this test; the rook stays on its corner.
    if not _king_safe_on(board, piece, home, end):
        _LOGGER.debug("Castling %s -> %s rejected: king ends in check", start, end)
        return False
    return True


def castling_move(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    rights: tuple[bool, bool],
    options: RuleOptions | None = None,
) -> Move:
    """Build the flagged castling :class:`Move` or raise ``IllegalMoveError``."""
    if not is_valid_castling(board, piece, start, end, rights, options):
        raise IllegalMoveError(f"Castling not allowed: {start} -> {end}")
    end = as_square(end)
    flag = MoveFlag.CASTLE_KINGSIDE if end.file == 6 else MoveFlag.CASTLE_QUEENSIDE
    return Move(as_square(start), end, flag)


# ── Promotion ───────────────────────────────────────────────────────────────


def is_valid_pawn_promotion(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    promotion: PieceType,
) -> bool:
    """Pawn on its seventh rank reaching the last rank as a queen, rook,
    bishop or knight."""
    start, end = as_square(start), as_square(end)
    if piece.kind != PieceType.PAWN:
        return False
    if start.rank != _PROMOTION_RANK[piece.color]:
        return False
    if end.rank != _HOME_RANK[piece.color.opposite]:
        return False
    if not is_valid_pawn_move(board, piece, start, end):
        return False
    return promotion in PROMOTION_KINDS


def promotion_move(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    promotion: PieceType,
) -> Move:
    """Build the flagged promotion :class:`Move` or raise ``InvalidPromotionError``."""
    if not is_valid_pawn_promotion(board, piece, start, end, promotion):
        raise InvalidPromotionError(
            f"Invalid promotion to {promotion.name}: {start} -> {end}"
        )
    return Move(as_square(start), as_square(end), MoveFlag.PROMOTION, promotion)


def perform_pawn_promotion(
    board: Board,
    piece: Piece,
    start: tuple[int, int],
    end: tuple[int, int],
    promotion: PieceType,
) -> None:
    """Replace the pawn on *start* with a *promotion* piece on *end*, in place.

    Raises:
        InvalidPromotionError: if the request is not a valid promotion; the
            board is left untouched.
    """
    move = promotion_move(board, piece, start, end, promotion)
    board[move.start] = None
    board[move.end] = Piece(promotion, piece.color)
    _LOGGER.debug("Promoted %s pawn on %s to %s", piece.color, move.end, promotion.name)

"""High-level chess rules: checkmate, stalemate, legal moves, game result."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessrules.core.board import Board
from chessrules.core.check import is_in_check as _is_in_check
from chessrules.core.check import leaves_king_safe
from chessrules.core.enums import Color, GameResult, MoveFlag, PieceType
from chessrules.core.move import Move
from chessrules.core.options import DEFAULT_OPTIONS, RuleOptions
from chessrules.core.special_moves import (
    PROMOTION_KINDS,
    is_valid_castling,
    is_valid_en_passant,
)
from chessrules.core.types import Square, all_squares, as_square
from chessrules.core.validator import PAWN_DIRECTION, is_legal_move

_LOGGER = logging.getLogger(__name__)

_LAST_RANK: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}
_MINOR_PIECES = (PieceType.KNIGHT, PieceType.BISHOP)


def _behind_target(start: Square, target: Square, color: Color) -> bool:
    return (
        target.rank - start.rank == PAWN_DIRECTION[color]
        and abs(target.file - start.file) == 1
    )


def _candidate_moves(
    board: Board,
    color: Color,
    en_passant: tuple[int, int] | None,
    castling: tuple[bool, bool] | None,
    options: RuleOptions,
) -> Iterator[Move]:
    """Every move of *color* the validator or a special-move rule accepts.

    Each piece is tried against all 64 destinations. Moves are yielded
    lazily so callers can stop at the first witness. En passant is only
    offered to a pawn one diagonal step behind the target, and castling
    never while *color* is in check.
    """
    ep_square = as_square(en_passant) if en_passant is not None else None
    may_castle = castling is not None and not _is_in_check(board, color)

    for start, piece in board.occupied():
        if piece.color != color:
            continue

        for end in all_squares():
            if not is_legal_move(board, piece, start, end):
                continue
            if piece.kind == PieceType.PAWN and end.rank == _LAST_RANK[color]:
                for kind in PROMOTION_KINDS:
                    yield Move(start, end, MoveFlag.PROMOTION, kind)
            elif piece.kind == PieceType.PAWN and abs(end.rank - start.rank) == 2:
                yield Move(start, end, MoveFlag.DOUBLE_PAWN)
            else:
                yield Move(start, end)

        if (
            ep_square is not None
            and _behind_target(start, ep_square, color)
            and is_valid_en_passant(board, piece, start, ep_square, ep_square)
        ):
            yield Move(start, ep_square, MoveFlag.EN_PASSANT)

        if may_castle and piece.kind == PieceType.KING:
            for file, flag in ((6, MoveFlag.CASTLE_KINGSIDE), (2, MoveFlag.CASTLE_QUEENSIDE)):
                end = Square(start.rank, file)
                if is_valid_castling(board, piece, start, end, castling, options):
                    yield Move(start, end, flag)


def _first_witness(
    board: Board,
    color: Color,
    *,
    safe: bool,
    en_passant: tuple[int, int] | None,
    castling: tuple[bool, bool] | None,
    options: RuleOptions,
) -> Move | None:
    """First candidate move, optionally required to leave the king safe."""
    for move in _candidate_moves(board, color, en_passant, castling, options):
        if not safe or leaves_king_safe(board, move, color):
            return move
    return None


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    The board is never modified; every hypothetical move is tried on a copy.
    Functions that look for a king raise ``KingNotFoundError`` when it is
    missing.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return _is_in_check(board, color)

    @staticmethod
    def is_checkmate(
        board: Board,
        color: Color,
        *,
        en_passant: tuple[int, int] | None = None,
        castling: tuple[bool, bool] | None = None,
        options: RuleOptions | None = None,
    ) -> bool:
        """*color* is in check and no move gets its king out of check."""
        options = options if options is not None else DEFAULT_OPTIONS
        if not _is_in_check(board, color):
            return False
        escape = _first_witness(
            board,
            color,
            safe=True,
            en_passant=en_passant,
            castling=castling,
            options=options,
        )
        if escape is not None:
            _LOGGER.debug("%s escapes check with %s", color, escape)
            return False
        return True

    @staticmethod
    def is_stalemate(
        board: Board,
        color: Color,
        *,
        en_passant: tuple[int, int] | None = None,
        castling: tuple[bool, bool] | None = None,
        options: RuleOptions | None = None,
    ) -> bool:
        """*color* is not in check and has no move.

        With ``options.strict_stalemate`` (the default) only moves that keep
        the king safe count; otherwise any validator-approved move does.
        """
        options = options if options is not None else DEFAULT_OPTIONS
        if _is_in_check(board, color):
            return False
        witness = _first_witness(
            board,
            color,
            safe=options.strict_stalemate,
            en_passant=en_passant,
            castling=castling,
            options=options,
        )
        if witness is not None:
            _LOGGER.debug("%s is not stalemated: %s", color, witness)
            return False
        return True

    @staticmethod
    def legal_moves(
        board: Board,
        color: Color,
        *,
        en_passant: tuple[int, int] | None = None,
        castling: tuple[bool, bool] | None = None,
        options: RuleOptions | None = None,
    ) -> list[Move]:
        """All moves of *color* that do not leave its own king in check."""
        options = options if options is not None else DEFAULT_OPTIONS
        return [
            move
            for move in _candidate_moves(board, color, en_passant, castling, options)
            if leaves_king_safe(board, move, color)
        ]

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        others = [
            (sq, piece) for sq, piece in board.occupied() if piece.kind != PieceType.KING
        ]

        # K vs K
        if not others:
            return True

        # K+minor vs K
        if len(others) == 1:
            return others[0][1].kind in _MINOR_PIECES

        # K+B vs K+B with same-colour bishops
        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            if a.kind == b.kind == PieceType.BISHOP and a.color != b.color:
                return (sq_a.rank + sq_a.file) % 2 == (sq_b.rank + sq_b.file) % 2

        return False

    @staticmethod
    def game_result(
        board: Board,
        side_to_move: Color,
        *,
        en_passant: tuple[int, int] | None = None,
        castling: tuple[bool, bool] | None = None,
        options: RuleOptions | None = None,
    ) -> GameResult:
        """Classify the position for *side_to_move*."""
        options = options if options is not None else DEFAULT_OPTIONS
        in_check = _is_in_check(board, side_to_move)
        witness = _first_witness(
            board,
            side_to_move,
            safe=in_check or options.strict_stalemate,
            en_passant=en_passant,
            castling=castling,
            options=options,
        )

        if witness is None:
            if in_check:
                return (
                    GameResult.BLACK_WINS
                    if side_to_move == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            return GameResult.DRAW  # stalemate

        if Rules.is_insufficient_material(board):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS


is_checkmate = Rules.is_checkmate
is_stalemate = Rules.is_stalemate
legal_moves = Rules.legal_moves
is_insufficient_material = Rules.is_insufficient_material
game_result = Rules.game_result

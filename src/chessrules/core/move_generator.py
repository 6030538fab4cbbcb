"""Pseudo-legal target generation by piece geometry.

The generator only looks at the board to stop sliding rays; it never asks
whether a move would leave the mover in check. Sliding rays include the
first occupied square whoever owns it, and knight/king offsets are filtered
by the board edge only. The validator is what rejects friendly captures,
unless :attr:`RuleOptions.include_friendly_targets` is switched off.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.options import DEFAULT_OPTIONS, RuleOptions
from chessrules.core.piece import Piece
from chessrules.core.types import Square, all_squares, as_square
from chessrules.core.validator import PAWN_DIRECTION

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[Square, ...]]:
    targets: dict[Square, tuple[Square, ...]] = {}
    for sq in all_squares():
        moves = [sq.offset(dr, df) for dr, df in offsets]
        targets[sq] = tuple(to_sq for to_sq in moves if to_sq is not None)
    return targets


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> dict[Square, tuple[tuple[Square, ...], ...]]:
    rays_per_square: dict[Square, tuple[tuple[Square, ...], ...]] = {}
    for sq in all_squares():
        square_rays: list[tuple[Square, ...]] = []
        for dr, df in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, df)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, df)
            square_rays.append(tuple(ray))
        rays_per_square[sq] = tuple(square_rays)
    return rays_per_square


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)
_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)


class MoveGenerator:
    """Enumerates geometric destinations for pieces on a :class:`Board`."""

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: RuleOptions | None = None) -> None:
        self._board = board
        self._options = options if options is not None else DEFAULT_OPTIONS

    # -- Public API ---------------------------------------------------------

    def targets(self, square: tuple[int, int]) -> list[Square]:
        """Squares reachable by the piece on *square*; empty if there is none."""
        sq = as_square(square)
        piece = self._board[sq]
        if piece is None:
            return []

        kind = piece.kind
        if kind == PieceType.PAWN:
            found = self._gen_pawn(sq, piece)
        elif kind == PieceType.KNIGHT:
            found = list(_KNIGHT_TARGETS[sq])
        elif kind == PieceType.KING:
            found = list(_KING_TARGETS[sq])
        elif kind == PieceType.BISHOP:
            found = self._gen_sliding(_BISHOP_RAYS[sq])
        elif kind == PieceType.ROOK:
            found = self._gen_sliding(_ROOK_RAYS[sq])
        else:
            found = self._gen_sliding(_ROOK_RAYS[sq]) + self._gen_sliding(
                _BISHOP_RAYS[sq]
            )

        if self._options.include_friendly_targets:
            return found
        board = self._board
        return [
            to_sq
            for to_sq in found
            if (target := board[to_sq]) is None or target.color != piece.color
        ]

    def pseudo_legal_moves(self, color: Color) -> list[Move]:
        """A plain :class:`Move` for every target of every *color* piece."""
        moves: list[Move] = []
        for sq in self._board.all_pieces(color):
            moves.extend(Move(sq, to_sq) for to_sq in self.targets(sq))
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, piece: Piece) -> list[Square]:
        board = self._board
        direction = PAWN_DIRECTION[piece.color]
        moves: list[Square] = []

        one_step = sq.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)

        for d_file in (-1, 1):
            cap_sq = sq.offset(direction, d_file)
            if cap_sq is not None and piece.is_enemy_of(board[cap_sq]):
                moves.append(cap_sq)
        return moves

    def _gen_sliding(self, rays: tuple[tuple[Square, ...], ...]) -> list[Square]:
        board = self._board
        moves: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                moves.append(to_sq)
                if board[to_sq] is not None:
                    break
        return moves

"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.errors import EmptySquareError, KingNotFoundError
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square, all_squares, as_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 8x8 grid of optional pieces, indexed by ``(rank, file)``."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        rank, file = as_square(sq)
        return self._grid[rank][file]

    def __setitem__(self, sq: tuple[int, int], piece: Piece | None) -> None:
        rank, file = as_square(sq)
        self._grid[rank][file] = piece

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> list[tuple[Square, Piece]]:
        """Every occupied square with its piece, a1 first."""
        grid = self._grid
        return [
            (sq, piece)
            for sq in all_squares()
            if (piece := grid[sq.rank][sq.file]) is not None
        ]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in self.occupied() if piece.color == color]

    def king_square(self, color: Color) -> Square:
        """Return the first king square found for *color*."""
        for sq, piece in self.occupied():
            if piece.kind == PieceType.KING and piece.color == color:
                return sq
        raise KingNotFoundError(color)

    # -- Mutation / copying -------------------------------------------------

    def make_move(self, move: Move) -> Piece | None:
        """Apply *move* in place and return the captured piece, if any.

        No legality check is made; the move's flag decides the side effects
        (en passant victim removal, rook slide, promotion).
        """
        start = as_square(move.start)
        end = as_square(move.end)
        piece = self[start]
        if piece is None:
            raise EmptySquareError(start)

        captured = self[end]
        if move.flag == MoveFlag.EN_PASSANT:
            victim_sq = Square(start.rank, end.file)
            captured = self[victim_sq]
            self[victim_sq] = None

        placed = piece
        if move.flag == MoveFlag.PROMOTION and move.promotion is not None:
            placed = Piece(move.promotion, piece.color)
        self[start] = None
        self[end] = placed

        if move.flag == MoveFlag.CASTLE_KINGSIDE:
            self._slide_rook(start.rank, 7, 5)
        elif move.flag == MoveFlag.CASTLE_QUEENSIDE:
            self._slide_rook(start.rank, 0, 3)
        return captured

    def _slide_rook(self, rank: int, from_file: int, to_file: int) -> None:
        rook = self._grid[rank][from_file]
        if rook is None or rook.kind != PieceType.ROOK:
            return
        self._grid[rank][from_file] = None
        self._grid[rank][to_file] = rook

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(BOARD_SIZE):
            b._grid[1][f] = Piece(PieceType.PAWN, Color.WHITE)
            b._grid[6][f] = Piece(PieceType.PAWN, Color.BLACK)
        for f, kind in enumerate(_BACK_RANK):
            b._grid[0][f] = Piece(kind, Color.WHITE)
            b._grid[7][f] = Piece(kind, Color.BLACK)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

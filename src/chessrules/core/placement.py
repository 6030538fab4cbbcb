"""Board placement strings (the first field of FEN).

Only piece placement is handled. Side to move, castling rights and the en
passant target are passed to the rules functions directly.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.errors import InvalidPlacementError
from chessrules.core.piece import Piece
from chessrules.core.types import BOARD_SIZE, Square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(text: str) -> Board:
    """Parse a placement string into a :class:`Board`.

    A full FEN record is accepted too; everything after the first field is
    ignored.
    """
    fields = text.split()
    if not fields:
        raise InvalidPlacementError(f"Empty placement: {text!r}")

    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise InvalidPlacementError(f"Placement must contain 8 ranks: {text!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in "0123456789":
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise InvalidPlacementError(f"Invalid digit {ch!r}: {text!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise InvalidPlacementError(f"Invalid rank width: {text!r}")
                try:
                    board[Square(rank, file)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise InvalidPlacementError(str(exc)) from exc
                file += 1
            if file > BOARD_SIZE:
                raise InvalidPlacementError(f"Invalid rank width: {text!r}")
        if file != BOARD_SIZE:
            raise InvalidPlacementError(f"Invalid rank width: {text!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise a :class:`Board` to a placement string."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for file in range(BOARD_SIZE):
            piece = board[rank, file]
            if piece is None:
                empty += 1
                continue
            if empty:
                row += str(empty)
                empty = 0
            row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)

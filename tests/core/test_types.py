"""Tests for square helpers and small value types."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import OutOfBoundsSquareError
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, E4, H8,
    CastlingRights,
    Square,
    as_square,
    is_valid_square,
    parse_square,
    square_name,
)


class TestSquares:
    def test_parse_square(self) -> None:
        assert parse_square("e4") == Square(3, 4) == E4
        assert parse_square("a1") == A1
        assert parse_square("h8") == H8

    def test_square_name(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name((7, 7)) == "h8"
        assert str(E4) == "e4"

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_invalid_square(self, name: str) -> None:
        with pytest.raises(OutOfBoundsSquareError):
            parse_square(name)

    def test_as_square_converts_tuples(self) -> None:
        sq = as_square((3, 4))
        assert isinstance(sq, Square)
        assert sq.rank == 3 and sq.file == 4

    @pytest.mark.parametrize("value", [(8, 0), (0, 8), (-1, 0), (0, -1), (1,), "e4", None, (True, 0)])
    def test_as_square_rejects_bad_input(self, value: object) -> None:
        with pytest.raises(OutOfBoundsSquareError):
            as_square(value)  # type: ignore[arg-type]

    def test_out_of_bounds_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            as_square((9, 9))

    def test_is_valid_square(self) -> None:
        assert is_valid_square(0, 0)
        assert is_valid_square(7, 7)
        assert not is_valid_square(8, 0)

    def test_offset_stops_at_edge(self) -> None:
        assert A1.offset(1, 1) == Square(1, 1)
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None


class TestValueTypes:
    def test_castling_rights_defaults(self) -> None:
        rights = CastlingRights()
        assert rights == (True, True)
        assert CastlingRights(kingside=False).queenside

    def test_piece_is_value_type(self) -> None:
        assert Piece(PieceType.ROOK, Color.BLACK) == Piece(PieceType.ROOK, Color.BLACK)
        assert Piece(PieceType.ROOK, Color.BLACK) != Piece(PieceType.ROOK, Color.WHITE)

    def test_piece_chars(self) -> None:
        assert str(Piece.from_char("N")) == "N"
        assert Piece.from_char("q") == Piece(PieceType.QUEEN, Color.BLACK)
        with pytest.raises(ValueError):
            Piece.from_char("x")

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, MoveFlag, PieceType
from chessrules.core.errors import (
    ChessRulesError,
    EmptySquareError,
    KingNotFoundError,
    OutOfBoundsSquareError,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2, E4, E5, E7, E8, D5, D6, D8,
    A8, B8, C8, F8, G8, H8,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(PieceType.KING, Color.WHITE)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(PieceType.KING, Color.BLACK)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, kind in expected:
            assert board[sq] == Piece(kind, Color.WHITE), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, kind in expected:
            assert board[sq] == Piece(kind, Color.BLACK), f"Mismatch at square {sq}"

    def test_pawn_ranks(self) -> None:
        board = Board.initial()
        for file in range(8):
            assert board[1, file] == Piece(PieceType.PAWN, Color.WHITE)
            assert board[6, file] == Piece(PieceType.PAWN, Color.BLACK)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board[rank, file] is None


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(PieceType.PAWN, Color.WHITE)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_plain_tuples_index_the_board(self) -> None:
        board = Board.initial()
        assert board[(0, 4)] == board[E1]

    def test_out_of_bounds_index_raises(self) -> None:
        board = Board()
        with pytest.raises(OutOfBoundsSquareError):
            board[8, 0]
        with pytest.raises(OutOfBoundsSquareError):
            board[(-1, 3)] = Piece(PieceType.ROOK, Color.BLACK)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(PieceType.KING, Color.WHITE)

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(KingNotFoundError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_missing_king_error_is_recoverable(self) -> None:
        board = Board()
        with pytest.raises(ChessRulesError):
            board.king_square(Color.BLACK)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text


class TestMakeMove:
    def test_plain_move(self, make_board) -> None:
        board = make_board({"e2": "P"})
        captured = board.make_move(Move(E2, E4))
        assert captured is None
        assert board[E2] is None
        assert board[E4] == Piece(PieceType.PAWN, Color.WHITE)

    def test_capture_returns_piece(self, make_board) -> None:
        board = make_board({"d1": "Q", "d8": "r"})
        captured = board.make_move(Move(D1, D8))
        assert captured == Piece(PieceType.ROOK, Color.BLACK)
        assert board[D8] == Piece(PieceType.QUEEN, Color.WHITE)

    def test_en_passant_removes_victim(self, make_board) -> None:
        board = make_board({"e5": "P", "d5": "p"})
        captured = board.make_move(Move(E5, D6, MoveFlag.EN_PASSANT))
        assert captured == Piece(PieceType.PAWN, Color.BLACK)
        assert board[D5] is None
        assert board[D6] == Piece(PieceType.PAWN, Color.WHITE)

    def test_castling_slides_rook(self, make_board) -> None:
        board = make_board({"e1": "K", "h1": "R", "a1": "R"})
        board.make_move(Move(E1, G1, MoveFlag.CASTLE_KINGSIDE))
        assert board[G1] == Piece(PieceType.KING, Color.WHITE)
        assert board[F1] == Piece(PieceType.ROOK, Color.WHITE)
        assert board[H1] is None
        assert board[A1] == Piece(PieceType.ROOK, Color.WHITE)

    def test_queenside_castling_slides_rook(self, make_board) -> None:
        board = make_board({"e8": "k", "a8": "r"})
        board.make_move(Move(E8, C8, MoveFlag.CASTLE_QUEENSIDE))
        assert board[C8] == Piece(PieceType.KING, Color.BLACK)
        assert board[D8] == Piece(PieceType.ROOK, Color.BLACK)
        assert board[A8] is None

    def test_promotion_replaces_pawn(self, make_board) -> None:
        board = make_board({"e7": "P"})
        board.make_move(Move(E7, E8, MoveFlag.PROMOTION, PieceType.KNIGHT))
        assert board[E8] == Piece(PieceType.KNIGHT, Color.WHITE)
        assert board[E7] is None

    def test_empty_start_raises(self) -> None:
        board = Board()
        with pytest.raises(EmptySquareError):
            board.make_move(Move(E2, E4))

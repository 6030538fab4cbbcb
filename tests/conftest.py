"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import parse_square

BoardFactory = Callable[[dict[str, str]], Board]


def _build_board(pieces: dict[str, str]) -> Board:
    board = Board()
    for name, char in pieces.items():
        board[parse_square(name)] = Piece.from_char(char)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from ``{"e1": "K", "e8": "k", ...}``."""
    return _build_board

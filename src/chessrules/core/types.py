"""Square type and coordinate helpers.

Board layout (rank, file), both 0-7:
    rank 0 is White's back row (printed as "1"), rank 7 is Black's ("8")
    file 0 is the a-file, file 7 the h-file

So ``Square(0, 4)`` is e1 and ``Square(7, 3)`` is d8.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from chessrules.core.errors import OutOfBoundsSquareError

BOARD_SIZE = 8


class Square(NamedTuple):
    """A board coordinate. Plain ``(rank, file)`` tuples are accepted too."""

    rank: int
    file: int

    def offset(self, d_rank: int, d_file: int) -> Square | None:
        """Square shifted by the given deltas, or None past the edge."""
        rank = self.rank + d_rank
        file = self.file + d_file
        if 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE:
            return Square(rank, file)
        return None

    def __str__(self) -> str:
        return square_name(self)


class CastlingRights(NamedTuple):
    """Castling availability for one color, tracked by the caller."""

    queenside: bool = True
    kingside: bool = True


def is_valid_square(rank: int, file: int) -> bool:
    """Check whether the coordinates lie on the board."""
    return 0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE


def as_square(value: tuple[int, int]) -> Square:
    """Validate *value* and return it as a :class:`Square`."""
    try:
        rank, file = value
    except (TypeError, ValueError):
        raise OutOfBoundsSquareError(value) from None
    if (
        not isinstance(rank, int)
        or not isinstance(file, int)
        or isinstance(rank, bool)
        or isinstance(file, bool)
        or not is_valid_square(rank, file)
    ):
        raise OutOfBoundsSquareError(value)
    return value if isinstance(value, Square) else Square(rank, file)


def all_squares() -> Iterator[Square]:
    """All 64 squares, rank by rank starting from a1."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            yield Square(rank, file)


def square_name(sq: tuple[int, int]) -> str:
    """Human-readable name, e.g. (0, 0) -> 'a1', (7, 7) -> 'h8'."""
    rank, file = as_square(sq)
    return chr(ord("a") + file) + str(rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' -> Square(3, 4)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise OutOfBoundsSquareError(name)
    return Square(int(name[1]) - 1, ord(name[0]) - ord("a"))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(0, f) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(1, f) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(2, f) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(3, f) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(4, f) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(5, f) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(6, f) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(7, f) for f in range(8))

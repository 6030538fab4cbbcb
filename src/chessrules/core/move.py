"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveFlag, PieceType
from chessrules.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A (start, end) transition plus its special-move classification.

    Constructing a Move does not validate it; legality is always computed
    against a board.
    """

    start: Square
    end: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

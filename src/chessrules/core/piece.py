"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType

# Placement character ↔ (PieceType, Color)
_CHAR_MAP: dict[str, tuple[PieceType, Color]] = {
    "P": (PieceType.PAWN, Color.WHITE),
    "N": (PieceType.KNIGHT, Color.WHITE),
    "B": (PieceType.BISHOP, Color.WHITE),
    "R": (PieceType.ROOK, Color.WHITE),
    "Q": (PieceType.QUEEN, Color.WHITE),
    "K": (PieceType.KING, Color.WHITE),
    "p": (PieceType.PAWN, Color.BLACK),
    "n": (PieceType.KNIGHT, Color.BLACK),
    "b": (PieceType.BISHOP, Color.BLACK),
    "r": (PieceType.ROOK, Color.BLACK),
    "q": (PieceType.QUEEN, Color.BLACK),
    "k": (PieceType.KING, Color.BLACK),
}

_CHARS: dict[tuple[PieceType, Color], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece kind of a given color."""

    kind: PieceType
    color: Color

    def __str__(self) -> str:
        """Placement character (uppercase = white, lowercase = black)."""
        return _CHARS[(self.kind, self.color)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from placement character, e.g. 'N' → white knight."""
        try:
            kind, color = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, color)

    def is_enemy_of(self, other: Piece | None) -> bool:
        """Whether *other* is a piece of the opposite color."""
        return other is not None and other.color != self.color

"""Core enumerations for the board model."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color. White is the light side and starts on ranks 1–2."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Rank step of a forward pawn move: +1 for white, -1 for black."""
        return 1 if self is Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class SquareColor(IntEnum):
    """Checkerboard shade of a square."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> SquareColor:
        return SquareColor(1 - self.value)


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class File(IntEnum):
    """Board file (column). The value is the 0-based column index."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    def __str__(self) -> str:
        return self.name

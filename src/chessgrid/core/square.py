"""Square - one cell of the board."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import SquareColor
from chessgrid.core.types import Location

if TYPE_CHECKING:
    from chessgrid.core.piece import Piece


class Square:
    """A board cell with a fixed shade, a fixed location and an optional occupant.

    The square does not own its piece. Occupancy and the piece's back-reference
    are kept in step by :class:`~chessgrid.core.board.Board`.
    """

    __slots__ = ("_color", "_location", "_piece")

    def __init__(self, color: SquareColor, location: Location) -> None:
        self._color = color
        self._location = location
        self._piece: Piece | None = None

    @property
    def color(self) -> SquareColor:
        return self._color

    @property
    def location(self) -> Location:
        return self._location

    @property
    def piece(self) -> Piece | None:
        return self._piece

    @property
    def occupied(self) -> bool:
        return self._piece is not None

    @property
    def is_light(self) -> bool:
        return self._color == SquareColor.LIGHT

    def place(self, piece: Piece | None) -> None:
        """Set the occupant (``None`` empties the square)."""
        self._piece = piece

    def clear(self) -> None:
        self._piece = None

    def __repr__(self) -> str:
        return (
            f"Square(color={self._color.name}, location={self._location.name}, "
            f"occupied={self.occupied})"
        )

"""Piece base class: identity, board back-reference and destination filtering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, ClassVar

from chessgrid.core.enums import Color, PieceType

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.square import Square
    from chessgrid.core.types import Location

# FEN-style letters, uppercase for white.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


class Piece(ABC):
    """A chess piece placed on a :class:`~chessgrid.core.board.Board`.

    A piece knows its color and the square it currently stands on. The
    back-reference is maintained by the board: it is set when the piece is
    placed, updated on every executed move and cleared when the piece is
    captured.
    """

    __slots__ = ("_color", "_square", "_captured")

    piece_type: ClassVar[PieceType]
    name: ClassVar[str]

    def __init__(self, color: Color) -> None:
        self._color = color
        self._square: Square | None = None
        self._captured = False

    # ── Identity ─────────────────────────────────────────────────────────

    @property
    def color(self) -> Color:
        return self._color

    @property
    def symbol(self) -> str:
        """Single letter, uppercase = white, lowercase = black."""
        letter = _LETTERS[self.piece_type]
        return letter if self._color == Color.WHITE else letter.lower()

    @property
    def glyph(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self.piece_type)]

    # ── Board back-reference ─────────────────────────────────────────────

    @property
    def square(self) -> Square | None:
        return self._square

    @property
    def location(self) -> Location:
        if self._square is None:
            raise ValueError(f"{self!r} is not on the board")
        return self._square.location

    @property
    def captured(self) -> bool:
        return self._captured

    def attach(self, square: Square) -> None:
        """Record *square* as this piece's position without counting a move."""
        self._square = square

    def moved_to(self, square: Square) -> None:
        """Record an executed move onto *square*."""
        self._square = square

    def mark_captured(self) -> None:
        self._square = None
        self._captured = True

    # ── Move generation ──────────────────────────────────────────────────

    @abstractmethod
    def legal_destinations(self, board: Board) -> list[Location]:
        """Locations this piece may move to given the board's occupancy."""

    def is_legal_destination(self, board: Board, location: Location) -> bool:
        return location in self.legal_destinations(board)

    def can_land_on(self, square: Square) -> bool:
        """Empty squares and enemy-occupied squares are valid landings."""
        occupant = square.piece
        return occupant is None or occupant.color != self._color

    def filter_destinations(
        self, board: Board, candidates: Iterable[Location]
    ) -> list[Location]:
        """Keep the candidates that exist on *board* and are not friendly-occupied."""
        squares = board.squares
        return [
            loc
            for loc in candidates
            if loc in squares and self.can_land_on(squares[loc])
        ]

    # ── Dunder helpers ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        where = self._square.location.name if self._square is not None else "-"
        return f"{type(self).__name__}({self._color.name}, {where})"

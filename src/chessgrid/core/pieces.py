"""The six concrete piece variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.move_generator import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    pawn_destinations,
    slide_destinations,
    step_destinations,
)
from chessgrid.core.piece import Piece

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.square import Square
    from chessgrid.core.types import Location


class King(Piece):
    __slots__ = ()
    piece_type = PieceType.KING
    name = "King"

    def legal_destinations(self, board: Board) -> list[Location]:
        return step_destinations(board, self, KING_OFFSETS)


class Queen(Piece):
    __slots__ = ()
    piece_type = PieceType.QUEEN
    name = "Queen"

    def legal_destinations(self, board: Board) -> list[Location]:
        return slide_destinations(board, self, QUEEN_DIRS)


class Rook(Piece):
    __slots__ = ()
    piece_type = PieceType.ROOK
    name = "Rook"

    def legal_destinations(self, board: Board) -> list[Location]:
        return slide_destinations(board, self, ROOK_DIRS)


class Bishop(Piece):
    __slots__ = ()
    piece_type = PieceType.BISHOP
    name = "Bishop"

    def legal_destinations(self, board: Board) -> list[Location]:
        return slide_destinations(board, self, BISHOP_DIRS)


class Knight(Piece):
    __slots__ = ()
    piece_type = PieceType.KNIGHT
    name = "Knight"

    def legal_destinations(self, board: Board) -> list[Location]:
        return step_destinations(board, self, KNIGHT_OFFSETS)


class Pawn(Piece):
    """Pawn. The two-square push is available until its first executed move."""

    __slots__ = ("first_move",)
    piece_type = PieceType.PAWN
    name = "Pawn"

    def __init__(self, color: Color, *, first_move: bool = True) -> None:
        super().__init__(color)
        self.first_move = first_move

    def moved_to(self, square: Square) -> None:
        super().moved_to(square)
        self.first_move = False

    def legal_destinations(self, board: Board) -> list[Location]:
        return pawn_destinations(board, self)


_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

PIECE_CLASSES: dict[PieceType, type[Piece]] = {
    cls.piece_type: cls for cls in (Pawn, Knight, Bishop, Rook, Queen, King)
}


def make_piece(color: Color, piece_type: PieceType) -> Piece:
    return PIECE_CLASSES[piece_type](color)


def piece_from_char(char: str) -> Piece:
    """Create a piece from its letter, e.g. 'N' → white knight, 'q' → black queen."""
    try:
        color, piece_type = _CHAR_MAP[char]
    except KeyError:
        raise ValueError(f"Invalid piece character: {char!r}") from None
    return make_piece(color, piece_type)

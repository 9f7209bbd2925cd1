"""Standard starting layout."""

from __future__ import annotations

from chessgrid.core.enums import Color, File, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.pieces import make_piece
from chessgrid.core.types import Location

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_HOME_RANKS: dict[Color, tuple[int, int]] = {
    # color -> (back rank, pawn rank)
    Color.WHITE: (1, 2),
    Color.BLACK: (8, 7),
}


def starting_pieces() -> dict[Location, Piece]:
    """Fresh pieces for the 32 starting locations, white first."""
    pieces: dict[Location, Piece] = {}
    for color, (back_rank, pawn_rank) in _HOME_RANKS.items():
        for f, pt in zip(File, BACK_RANK):
            pieces[Location(f, back_rank)] = make_piece(color, pt)
        for f in File:
            pieces[Location(f, pawn_rank)] = make_piece(color, PieceType.PAWN)
    return pieces

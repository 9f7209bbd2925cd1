"""Core domain layer - board model and piece movement with zero external dependencies.

Quick start::

    from chessgrid.core import Board
    from chessgrid.core.types import E2, E4

    board = Board()
    pawn = board.piece_at(E2)
    print(pawn.legal_destinations(board))  # [E3, E4]
    board.move(E2, E4)
"""

from chessgrid.core.board import Board
from chessgrid.core.config import BoardSettings
from chessgrid.core.enums import Color, File, PieceType, SquareColor
from chessgrid.core.errors import IllegalMoveError, OffBoardFileError
from chessgrid.core.move_generator import MoveGenerator
from chessgrid.core.piece import Piece
from chessgrid.core.pieces import (
    Bishop,
    King,
    Knight,
    Pawn,
    Queen,
    Rook,
    make_piece,
    piece_from_char,
)
from chessgrid.core.setup import starting_pieces
from chessgrid.core.square import Square
from chessgrid.core.types import (
    Location,
    offset_location,
    parse_location,
)

__all__ = [
    # Enums
    "Color",
    "File",
    "PieceType",
    "SquareColor",
    # Errors / settings
    "BoardSettings",
    "IllegalMoveError",
    "OffBoardFileError",
    # Types / helpers
    "Location",
    "offset_location",
    "parse_location",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Square",
    "Bishop",
    "King",
    "Knight",
    "Pawn",
    "Queen",
    "Rook",
    "make_piece",
    "piece_from_char",
    "starting_pieces",
]

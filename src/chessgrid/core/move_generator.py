"""Destination generation for every piece variant.

All generators are read-only with respect to the board. Results come out in
direction-table order, then in order of distance from the origin.

A step that runs past the A or H file raises
:class:`~chessgrid.core.errors.OffBoardFileError` while the target is being
derived. That ends the current direction only; the remaining directions are
still generated. Steps past rank 1 or 8 never raise, they just miss the
board's lookup map.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessgrid.core.enums import Color
from chessgrid.core.errors import OffBoardFileError
from chessgrid.core.types import Location, offset_location

if TYPE_CHECKING:
    from chessgrid.core.board import Board
    from chessgrid.core.piece import Piece
    from chessgrid.core.pieces import Pawn

_LOGGER = logging.getLogger(__name__)

Offsets = tuple[tuple[int, int], ...]

ROOK_DIRS: Offsets = ((1, 0), (-1, 0), (0, 1), (0, -1))
BISHOP_DIRS: Offsets = ((1, 1), (-1, 1), (1, -1), (-1, -1))
QUEEN_DIRS: Offsets = ROOK_DIRS + BISHOP_DIRS
KING_OFFSETS: Offsets = QUEEN_DIRS

KNIGHT_OFFSETS: Offsets = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)


# -- Piece-specific generators ----------------------------------------------


def slide_destinations(board: Board, piece: Piece, directions: Offsets) -> list[Location]:
    """Slide from *piece* along each direction until blocked or off the board."""
    squares = board.squares
    origin = piece.location
    moves: list[Location] = []

    for df, dr in directions:
        current = origin
        while True:
            try:
                current = offset_location(current, df, dr)
            except OffBoardFileError as exc:
                _LOGGER.debug(
                    "%r: direction (%d, %d) left the board at file index %d",
                    piece,
                    df,
                    dr,
                    exc.file_index,
                )
                break
            sq = squares.get(current)
            if sq is None:
                break
            target = sq.piece
            if target is None:
                moves.append(current)
                continue
            if target.color != piece.color:
                moves.append(current)
            break
    return moves


def step_destinations(board: Board, piece: Piece, offsets: Offsets) -> list[Location]:
    """Single jump per offset; squares in between are never inspected."""
    origin = piece.location
    candidates: list[Location] = []

    for df, dr in offsets:
        try:
            candidates.append(offset_location(origin, df, dr))
        except OffBoardFileError:
            continue
    return piece.filter_destinations(board, candidates)


def pawn_destinations(board: Board, pawn: Pawn) -> list[Location]:
    """Forward pushes onto empty squares plus diagonal captures."""
    squares = board.squares
    origin = pawn.location
    direction = pawn.color.pawn_direction
    moves: list[Location] = []

    one_step = offset_location(origin, 0, direction)
    one_sq = squares.get(one_step)
    if one_sq is not None and not one_sq.occupied:
        moves.append(one_step)
        if pawn.first_move:
            two_step = offset_location(origin, 0, 2 * direction)
            two_sq = squares.get(two_step)
            if two_sq is not None and not two_sq.occupied:
                moves.append(two_step)

    for df in (-1, 1):
        try:
            diagonal = offset_location(origin, df, direction)
        except OffBoardFileError:
            continue
        diag_sq = squares.get(diagonal)
        if diag_sq is None:
            continue
        target = diag_sq.piece
        if target is not None and target.color != pawn.color:
            moves.append(diagonal)
    return moves


# -- Board-wide queries -----------------------------------------------------


class MoveGenerator:
    """Destination queries over the pieces of a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def legal_destinations(self, piece: Piece) -> list[Location]:
        return piece.legal_destinations(self._board)

    def is_legal_destination(self, piece: Piece, location: Location) -> bool:
        return piece.is_legal_destination(self._board, location)

    def destinations_by_piece(self, color: Color) -> dict[Piece, list[Location]]:
        """Every active piece of *color* mapped to its destinations."""
        board = self._board
        return {piece: piece.legal_destinations(board) for piece in board.pieces(color)}

    def count_destinations(self, color: Color) -> int:
        """Total number of destinations available to *color*."""
        return sum(len(moves) for moves in self.destinations_by_piece(color).values())

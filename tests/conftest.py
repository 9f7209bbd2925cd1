"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessgrid.core.board import Board
from chessgrid.core.piece import Piece
from chessgrid.core.pieces import piece_from_char
from chessgrid.core.types import Location

PlacePiece = Callable[[str, Location], Piece]


@pytest.fixture
def board() -> Board:
    """Board in the standard starting position."""
    return Board()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def place(empty_board: Board) -> PlacePiece:
    """Put a piece, given by its letter, onto ``empty_board``."""

    def _place(char: str, location: Location) -> Piece:
        piece = piece_from_char(char)
        empty_board.place_piece(piece, location)
        return piece

    return _place

"""Exceptions raised by the board model."""

from __future__ import annotations


class OffBoardFileError(IndexError):
    """A derived file index fell outside the A–H table.

    Rank overflow never raises; an out-of-range rank just produces a
    location that is not on the board.
    """

    def __init__(self, file_index: int) -> None:
        super().__init__(f"File index out of range: {file_index!r}")
        self.file_index = file_index


class IllegalMoveError(ValueError):
    """Move rejected by a board that enforces legal destinations."""

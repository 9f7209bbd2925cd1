"""Board coordinates and coordinate helpers.

A :class:`Location` is a plain (file, rank) value. Files come from the fixed
eight-entry :class:`~chessgrid.core.enums.File` table; ranks are ordinary
integers and are deliberately not range-checked, so ``Location(File.A, 9)``
is a valid value that simply does not exist on the board.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import File
from chessgrid.core.errors import OffBoardFileError

_FILES: tuple[File, ...] = tuple(File)

BOARD_SIZE = 8


@dataclass(frozen=True, slots=True)
class Location:
    """Immutable board coordinate, e.g. ``Location(File.E, 4)`` for E4."""

    file: File
    rank: int

    @property
    def file_index(self) -> int:
        """Column index 0–7 (A–H)."""
        return int(self.file)

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'E4'``."""
        return f"{self.file.name}{self.rank}"

    def __str__(self) -> str:
        return self.name


def offset_location(origin: Location, file_offset: int, rank_offset: int) -> Location:
    """Location shifted by (*file_offset*, *rank_offset*) from *origin*.

    Raises :class:`OffBoardFileError` when the new file index leaves 0–7.
    The rank is never checked.
    """
    file_index = origin.file_index + file_offset
    # Negative indexes would silently wrap around on a tuple.
    if not 0 <= file_index < BOARD_SIZE:
        raise OffBoardFileError(file_index)
    return Location(_FILES[file_index], origin.rank + rank_offset)


def parse_location(name: str) -> Location:
    """Parse a square name, e.g. ``'e4'`` or ``'E4'``."""
    text = name.strip().upper()
    if len(text) != 2 or text[0] not in "ABCDEFGH" or text[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Location(File[text[0]], int(text[1]))


def is_on_board(location: Location) -> bool:
    """Whether *location* has a rank in 1–8 (files are always valid)."""
    return 1 <= location.rank <= BOARD_SIZE


# ── Named location constants ────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Location(f, 1) for f in _FILES)
A2, B2, C2, D2, E2, F2, G2, H2 = (Location(f, 2) for f in _FILES)
A3, B3, C3, D3, E3, F3, G3, H3 = (Location(f, 3) for f in _FILES)
A4, B4, C4, D4, E4, F4, G4, H4 = (Location(f, 4) for f in _FILES)
A5, B5, C5, D5, E5, F5, G5, H5 = (Location(f, 5) for f in _FILES)
A6, B6, C6, D6, E6, F6, G6, H6 = (Location(f, 6) for f in _FILES)
A7, B7, C7, D7, E7, F7, G7, H7 = (Location(f, 7) for f in _FILES)
A8, B8, C8, D8, E8, F8, G8, H8 = (Location(f, 8) for f in _FILES)

# Board order: rank 8 first, files A → H within a rank.
ALL_LOCATIONS: tuple[Location, ...] = tuple(
    Location(f, rank) for rank in range(BOARD_SIZE, 0, -1) for f in _FILES
)

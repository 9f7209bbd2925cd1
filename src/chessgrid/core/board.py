"""Board - 64 squares, a location lookup and per-color piece rosters."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chessgrid.core.config import BoardSettings
from chessgrid.core.enums import Color, File, SquareColor
from chessgrid.core.errors import IllegalMoveError
from chessgrid.core.piece import Piece
from chessgrid.core.setup import starting_pieces
from chessgrid.core.square import Square
from chessgrid.core.types import BOARD_SIZE, Location

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 board.

    ``squares`` maps every on-board :class:`Location` to its :class:`Square`
    and is the only structure the move generators consult. ``rows`` holds the
    same squares in display order (rank 8 first) and exists for iteration.

    The board is the only writer of square occupancy and piece
    back-references, and changes both together.
    """

    __slots__ = ("_settings", "_squares", "_rows", "_rosters")

    def __init__(
        self,
        settings: BoardSettings | None = None,
        pieces: Mapping[Location, Piece] | None = None,
    ) -> None:
        self._settings = settings if settings is not None else BoardSettings()
        self._squares: dict[Location, Square] = {}
        self._rows: list[list[Square]] = []
        # [color] -> every piece ever placed for that color, in placement order.
        self._rosters: list[list[Piece]] = [[], []]

        for row in range(BOARD_SIZE):
            rank = BOARD_SIZE - row
            shade = SquareColor.LIGHT if row % 2 == 0 else SquareColor.DARK
            squares_row: list[Square] = []
            for f in File:
                loc = Location(f, rank)
                sq = Square(shade, loc)
                self._squares[loc] = sq
                squares_row.append(sq)
                shade = shade.opposite
            self._rows.append(squares_row)

        layout = starting_pieces() if pieces is None else pieces
        for loc, piece in layout.items():
            self.place_piece(piece, loc)

        _LOGGER.debug(
            "Board built with %d white and %d black pieces",
            len(self._rosters[Color.WHITE]),
            len(self._rosters[Color.BLACK]),
        )

    @classmethod
    def empty(cls, settings: BoardSettings | None = None) -> Board:
        """Board with no pieces on it."""
        return cls(settings, pieces={})

    # -- Element access -----------------------------------------------------

    @property
    def settings(self) -> BoardSettings:
        return self._settings

    @property
    def squares(self) -> Mapping[Location, Square]:
        return self._squares

    @property
    def rows(self) -> tuple[tuple[Square, ...], ...]:
        return tuple(tuple(row) for row in self._rows)

    def __contains__(self, location: object) -> bool:
        return location in self._squares

    def square_at(self, location: Location) -> Square:
        try:
            return self._squares[location]
        except KeyError:
            raise KeyError(f"Location not on board: {location!r}") from None

    def piece_at(self, location: Location) -> Piece | None:
        return self.square_at(location).piece

    def layout(self) -> dict[Location, Piece]:
        """Occupied locations mapped to their pieces, in board order."""
        return {
            sq.location: sq.piece
            for row in self._rows
            for sq in row
            if sq.piece is not None
        }

    # -- Rosters ------------------------------------------------------------

    def roster(self, color: Color) -> list[Piece]:
        """Every piece placed for *color*, captured ones included."""
        return list(self._rosters[int(color)])

    def pieces(self, color: Color) -> list[Piece]:
        """Pieces of *color* still on the board."""
        return [p for p in self._rosters[int(color)] if not p.captured]

    def captured_pieces(self, color: Color) -> list[Piece]:
        return [p for p in self._rosters[int(color)] if p.captured]

    # -- Mutation -----------------------------------------------------------

    def place_piece(self, piece: Piece, location: Location) -> None:
        """Put a piece that is not yet on any board onto an empty square."""
        sq = self.square_at(location)
        if sq.occupied:
            raise ValueError(f"Square already occupied: {location.name!r}")
        if piece.square is not None or piece.captured:
            raise ValueError(f"Piece already placed: {piece!r}")
        sq.place(piece)
        piece.attach(sq)
        self._rosters[int(piece.color)].append(piece)

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Move the occupant of *from_square* onto *to_square*.

        An empty source is a no-op. Whatever stood on the target is captured.
        Unless ``enforce_legal_moves`` is set, the move is not checked against
        the piece's legal destinations.
        """
        piece = from_square.piece
        if piece is None:
            _LOGGER.debug("No piece on %s, move ignored", from_square.location)
            return
        if from_square is to_square:
            _LOGGER.debug("%r moved onto its own square, move ignored", piece)
            return

        if self._settings.enforce_legal_moves and not piece.is_legal_destination(
            self, to_square.location
        ):
            _LOGGER.warning(
                "Rejected illegal move %s->%s for %r",
                from_square.location,
                to_square.location,
                piece,
            )
            raise IllegalMoveError(
                f"Illegal move: {from_square.location}->{to_square.location}"
            )

        captured = to_square.piece
        if captured is not None:
            captured.mark_captured()
            _LOGGER.debug("%r captured on %s", captured, to_square.location)

        to_square.place(piece)
        from_square.clear()
        piece.moved_to(to_square)
        _LOGGER.debug("%r moved %s->%s", piece, from_square.location, to_square.location)

    def move(self, from_location: Location, to_location: Location) -> None:
        """Resolve both locations and call :meth:`move_piece`."""
        self.move_piece(self.square_at(from_location), self.square_at(to_location))

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        lines: list[str] = []
        for row in self._rows:
            rank = row[0].location.rank
            cells = [sq.piece.symbol if sq.piece is not None else "." for sq in row]
            lines.append(f"{rank} {' '.join(cells)}")
        lines.append("  " + " ".join(f.name for f in File))
        return "\n".join(lines)

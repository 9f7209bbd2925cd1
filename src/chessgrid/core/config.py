"""Board behaviour settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class BoardSettings:
    """Options fixed at board construction.

    ``enforce_legal_moves`` makes :meth:`Board.move_piece` reject any target
    that is not among the moving piece's legal destinations. It is off by
    default: the board executes whatever move it is given.
    """

    enforce_legal_moves: bool = False

"""Tests for Board."""

import logging

import pytest

from chessgrid.core.board import Board
from chessgrid.core.config import BoardSettings
from chessgrid.core.enums import Color, File, PieceType, SquareColor
from chessgrid.core.errors import IllegalMoveError
from chessgrid.core.pieces import King, Pawn, Rook
from chessgrid.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2, E2, E3, E4, E5, D7, D5,
    A5, A8, B8, C8, D8, E8, F8, G8, H8,
    ALL_LOCATIONS,
    Location,
)


class TestBoardInitial:
    def test_white_king_position(self, board: Board) -> None:
        king = board.piece_at(E1)
        assert isinstance(king, King)
        assert king.color == Color.WHITE

    def test_black_king_position(self, board: Board) -> None:
        king = board.piece_at(E8)
        assert isinstance(king, King)
        assert king.color == Color.BLACK

    def test_white_back_rank(self, board: Board) -> None:
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for loc, pt in expected:
            piece = board.piece_at(loc)
            assert piece is not None, f"Missing piece at {loc}"
            assert (piece.color, piece.piece_type) == (Color.WHITE, pt), f"Mismatch at {loc}"

    def test_black_back_rank(self, board: Board) -> None:
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for loc, pt in expected:
            piece = board.piece_at(loc)
            assert piece is not None, f"Missing piece at {loc}"
            assert (piece.color, piece.piece_type) == (Color.BLACK, pt), f"Mismatch at {loc}"

    def test_pawns(self, board: Board) -> None:
        for f in File:
            white = board.piece_at(Location(f, 2))
            black = board.piece_at(Location(f, 7))
            assert isinstance(white, Pawn) and white.color == Color.WHITE
            assert isinstance(black, Pawn) and black.color == Color.BLACK

    def test_empty_middle(self, board: Board) -> None:
        for rank in range(3, 7):
            for f in File:
                assert board.piece_at(Location(f, rank)) is None

    def test_rosters(self, board: Board) -> None:
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert all(p.color == Color.WHITE for p in board.pieces(Color.WHITE))
        assert board.captured_pieces(Color.WHITE) == []

    def test_back_references(self, board: Board) -> None:
        for color in Color:
            for piece in board.pieces(color):
                assert piece.square is not None
                assert piece.square.piece is piece
                assert board.square_at(piece.location) is piece.square


class TestBoardGeometry:
    def test_one_square_per_location(self, empty_board: Board) -> None:
        assert len(empty_board.squares) == 64
        assert set(empty_board.squares) == set(ALL_LOCATIONS)

    def test_rows_agree_with_lookup(self, empty_board: Board) -> None:
        rows = empty_board.rows
        assert len(rows) == 8
        assert all(len(row) == 8 for row in rows)
        flat = [sq for row in rows for sq in row]
        assert [sq.location for sq in flat] == list(ALL_LOCATIONS)
        for sq in flat:
            assert empty_board.squares[sq.location] is sq

    def test_square_colors(self, empty_board: Board) -> None:
        assert empty_board.square_at(A1).color == SquareColor.DARK
        assert empty_board.square_at(H1).color == SquareColor.LIGHT
        assert empty_board.square_at(A8).color == SquareColor.LIGHT
        assert empty_board.square_at(H8).color == SquareColor.DARK
        assert empty_board.square_at(E4).color == SquareColor.LIGHT

    def test_checkerboard_parity(self, empty_board: Board) -> None:
        for loc, sq in empty_board.squares.items():
            expected = SquareColor.LIGHT if (loc.file_index + loc.rank) % 2 == 0 else SquareColor.DARK
            assert sq.color == expected, f"Wrong shade at {loc}"

    def test_contains(self, empty_board: Board) -> None:
        assert E4 in empty_board
        assert Location(File.E, 9) not in empty_board
        assert Location(File.E, 0) not in empty_board

    def test_square_at_off_board_raises(self, empty_board: Board) -> None:
        with pytest.raises(KeyError, match="Location not on board"):
            empty_board.square_at(Location(File.A, 9))


class TestPlacePiece:
    def test_place_sets_both_references(self, empty_board: Board) -> None:
        rook = Rook(Color.WHITE)
        empty_board.place_piece(rook, A1)
        assert empty_board.piece_at(A1) is rook
        assert rook.square is empty_board.square_at(A1)
        assert empty_board.pieces(Color.WHITE) == [rook]

    def test_place_on_occupied_raises(self, empty_board: Board) -> None:
        empty_board.place_piece(Rook(Color.WHITE), A1)
        with pytest.raises(ValueError, match="Square already occupied"):
            empty_board.place_piece(Rook(Color.BLACK), A1)

    def test_place_twice_raises(self, empty_board: Board) -> None:
        rook = Rook(Color.WHITE)
        empty_board.place_piece(rook, A1)
        with pytest.raises(ValueError, match="Piece already placed"):
            empty_board.place_piece(rook, A2)

    def test_place_off_board_raises(self, empty_board: Board) -> None:
        with pytest.raises(KeyError):
            empty_board.place_piece(Rook(Color.WHITE), Location(File.A, 0))

    def test_custom_layout(self) -> None:
        king = King(Color.BLACK)
        board = Board(pieces={E8: king})
        assert board.layout() == {E8: king}
        assert board.pieces(Color.WHITE) == []


class TestMovePiece:
    def test_move_updates_squares_and_back_reference(self, board: Board) -> None:
        pawn = board.piece_at(E2)
        board.move_piece(board.square_at(E2), board.square_at(E4))
        assert not board.square_at(E2).occupied
        assert board.piece_at(E4) is pawn
        assert pawn is not None
        assert pawn.square is board.square_at(E4)

    def test_move_from_empty_square_is_noop(self, board: Board) -> None:
        before = board.layout()
        rosters = [board.roster(c) for c in Color]
        board.move_piece(board.square_at(E4), board.square_at(E5))
        assert board.layout() == before
        assert [board.roster(c) for c in Color] == rosters
        for loc, piece in before.items():
            assert piece.square is board.square_at(loc)

    def test_move_onto_own_square_is_noop(self, board: Board) -> None:
        pawn = board.piece_at(E2)
        board.move(E2, E2)
        assert board.piece_at(E2) is pawn
        assert isinstance(pawn, Pawn) and pawn.first_move

    def test_capture_marks_piece(self, board: Board) -> None:
        board.move(E2, E4)
        board.move(D7, D5)
        victim = board.piece_at(D5)
        board.move(E4, D5)
        assert victim is not None
        assert victim.captured
        assert victim.square is None
        assert victim not in board.pieces(Color.BLACK)
        assert board.captured_pieces(Color.BLACK) == [victim]
        assert len(board.pieces(Color.BLACK)) == 15
        assert len(board.roster(Color.BLACK)) == 16

    def test_no_legality_check_by_default(self, board: Board) -> None:
        rook = board.piece_at(A1)
        board.move(A1, A5)  # jumps over its own pawn
        assert board.piece_at(A5) is rook

    def test_self_capture_is_executed(self, board: Board) -> None:
        pawn = board.piece_at(A2)
        board.move(A1, A2)
        assert pawn is not None and pawn.captured
        assert board.captured_pieces(Color.WHITE) == [pawn]

    def test_pawn_first_move_consumed(self, board: Board) -> None:
        pawn = board.piece_at(E2)
        assert isinstance(pawn, Pawn)
        board.move(E2, E3)
        assert not pawn.first_move

    def test_move_logs(self, board: Board, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="chessgrid.core.board")
        board.move(E2, E4)
        assert "moved E2->E4" in caplog.text


class TestEnforcedMoves:
    def test_illegal_move_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        board = Board(BoardSettings(enforce_legal_moves=True))
        before = board.layout()
        with caplog.at_level(logging.WARNING, logger="chessgrid.core.board"):
            with pytest.raises(IllegalMoveError, match="Illegal move: E2->E5"):
                board.move(E2, E5)
        assert board.layout() == before
        assert "Rejected illegal move" in caplog.text

    def test_illegal_move_is_value_error(self) -> None:
        board = Board(BoardSettings(enforce_legal_moves=True))
        with pytest.raises(ValueError):
            board.move(A1, A5)

    def test_legal_move_executed(self) -> None:
        board = Board(BoardSettings(enforce_legal_moves=True))
        pawn = board.piece_at(E2)
        board.move(E2, E4)
        assert board.piece_at(E4) is pawn
        assert board.piece_at(E3) is None

    def test_empty_source_still_noop(self) -> None:
        board = Board(BoardSettings(enforce_legal_moves=True))
        board.move(E4, E5)
        assert board.piece_at(E5) is None


class TestBoardRepr:
    def test_initial_repr(self, board: Board) -> None:
        lines = repr(board).splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[3] == "5 . . . . . . . ."
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  A B C D E F G H"

"""Tests for Piece movement rules."""

import pytest

from sandchess.core.board import Board
from sandchess.core.enums import PieceKind, Side
from sandchess.core.errors import IllegalMoveRequested, InvalidParameter
from sandchess.core.piece import Piece
from sandchess.core.setup import board_from_placement
from sandchess.core.square import Square, parse_square, square_names


def _put(board: Board, kind: PieceKind, side: Side, name: str, *, moved: bool = False) -> Piece:
    piece = Piece(kind, side, parse_square(name), moved)
    board.place(piece)
    return piece


def _moves(board: Board, name: str) -> list[str]:
    return square_names(board.possible_moves(parse_square(name)))


class TestSide:
    def test_forward_direction(self) -> None:
        assert Side.WHITE.forward_direction == 1
        assert Side.BLACK.forward_direction == -1

    def test_starting_rank(self) -> None:
        assert Side.WHITE.starting_rank == 1
        assert Side.BLACK.starting_rank == 6

    def test_opposite_is_involutive(self) -> None:
        for side in Side:
            assert side.opposite != side
            assert side.opposite.opposite == side


class TestPieceConstruction:
    def test_rejects_string_side(self) -> None:
        with pytest.raises(InvalidParameter):
            Piece(PieceKind.PAWN, "WHITE", parse_square("e2"))  # type: ignore[arg-type]

    def test_rejects_string_square(self) -> None:
        with pytest.raises(InvalidParameter):
            Piece(PieceKind.PAWN, Side.WHITE, "e2")  # type: ignore[arg-type]

    def test_rejects_missing_kind(self) -> None:
        with pytest.raises(InvalidParameter):
            Piece(None, Side.WHITE, parse_square("e2"))  # type: ignore[arg-type]

    def test_from_char(self) -> None:
        piece = Piece.from_char("n", parse_square("g8"))
        assert piece.kind == PieceKind.KNIGHT
        assert piece.side == Side.BLACK
        assert str(piece) == "n"
        assert piece.symbol == "♞"

    def test_from_char_invalid(self) -> None:
        with pytest.raises(InvalidParameter, match="Invalid piece character"):
            Piece.from_char("x", parse_square("a1"))


class TestPawnScenarios:
    def test_e2_on_empty_board(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        assert _moves(board, "e2") == ["e3", "e4"]

    def test_e2_blocked_by_black_e3(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        _put(board, PieceKind.PAWN, Side.BLACK, "e3")
        assert _moves(board, "e2") == []

    def test_moved_e4_with_black_d5(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e4", moved=True)
        _put(board, PieceKind.PAWN, Side.BLACK, "d5")
        assert _moves(board, "e4") == ["d5", "e5"]

    def test_friendly_diagonal_not_capturable(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "a2")
        _put(board, PieceKind.PAWN, Side.WHITE, "b3")
        assert _moves(board, "a2") == ["a3", "a4"]


class TestPawnRules:
    def test_black_pawn_moves_down(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.BLACK, "d7")
        assert _moves(board, "d7") == ["d5", "d6"]

    def test_double_step_blocked_on_destination(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        _put(board, PieceKind.KNIGHT, Side.BLACK, "e4")
        assert _moves(board, "e2") == ["e3"]

    def test_has_moved_disables_double_step(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e2", moved=True)
        assert _moves(board, "e2") == ["e3"]

    def test_double_step_only_from_starting_rank(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e3")
        assert _moves(board, "e3") == ["e4"]

    def test_blocked_pawn_still_captures(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        _put(board, PieceKind.PAWN, Side.BLACK, "e3")
        _put(board, PieceKind.BISHOP, Side.BLACK, "f3")
        assert _moves(board, "e2") == ["f3"]

    def test_both_diagonal_captures(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.BLACK, "e5", moved=True)
        _put(board, PieceKind.PAWN, Side.WHITE, "d4")
        _put(board, PieceKind.ROOK, Side.WHITE, "f4")
        assert _moves(board, "e5") == ["d4", "e4", "f4"]

    def test_edge_file_single_diagonal(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "h2")
        _put(board, PieceKind.PAWN, Side.BLACK, "g3")
        assert _moves(board, "h2") == ["g3", "h3", "h4"]

    def test_last_rank_pawn_has_no_moves(self) -> None:
        board = Board()
        _put(board, PieceKind.PAWN, Side.WHITE, "c8", moved=True)
        _put(board, PieceKind.ROOK, Side.BLACK, "d7")
        assert _moves(board, "c8") == []

    def test_never_moves_backward_or_sideways(self) -> None:
        board = Board()
        pawn = _put(board, PieceKind.PAWN, Side.WHITE, "d4", moved=True)
        for name in ("d3", "c3", "e3", "c4", "e4"):
            _put(board, PieceKind.PAWN, Side.BLACK, name)
        for target in pawn.legal_destinations(board):
            assert pawn.square.row_difference(target) * Side.WHITE.forward_direction > 0


class TestOtherKinds:
    def test_knight_in_corner(self) -> None:
        board = Board()
        _put(board, PieceKind.KNIGHT, Side.WHITE, "a1")
        assert _moves(board, "a1") == ["c2", "b3"]

    def test_knight_jumps_over_pieces(self) -> None:
        board = Board.initial()
        assert _moves(board, "g1") == ["f3", "h3"]

    def test_king_center(self) -> None:
        board = Board()
        _put(board, PieceKind.KING, Side.WHITE, "e4")
        _put(board, PieceKind.PAWN, Side.WHITE, "e5")
        _put(board, PieceKind.PAWN, Side.BLACK, "d5")
        assert _moves(board, "e4") == ["d3", "e3", "f3", "d4", "f4", "d5", "f5"]

    def test_rook_stops_at_friend_and_captures_enemy(self) -> None:
        board = Board()
        _put(board, PieceKind.ROOK, Side.WHITE, "a1")
        _put(board, PieceKind.PAWN, Side.WHITE, "a3")
        _put(board, PieceKind.PAWN, Side.BLACK, "c1")
        assert _moves(board, "a1") == ["b1", "c1", "a2"]

    def test_bishop_open_board(self) -> None:
        board = Board()
        _put(board, PieceKind.BISHOP, Side.BLACK, "d4")
        assert len(board.possible_moves(parse_square("d4"))) == 13

    def test_queen_open_board(self) -> None:
        board = Board()
        _put(board, PieceKind.QUEEN, Side.WHITE, "d4")
        assert len(board.possible_moves(parse_square("d4"))) == 27

    def test_initial_back_rank_sliders_are_stuck(self) -> None:
        board = Board.initial()
        for name in ("a1", "c1", "d1", "f1", "h8", "d8"):
            assert _moves(board, name) == []

    def test_king_has_no_castling(self) -> None:
        board = board_from_placement("8/8/8/8/8/8/8/R3K2R")
        assert "g1" not in _moves(board, "e1")
        assert "c1" not in _moves(board, "e1")


class TestMoveContract:
    def test_can_move_to_matches_destinations(self) -> None:
        board = Board.initial()
        for piece in list(board.pieces()):
            destinations = piece.legal_destinations(board)
            for sq in Square.all():
                assert piece.can_move_to(sq, board) == (sq in destinations)

    def test_generation_is_pure(self) -> None:
        board = Board.initial()
        before = board.copy()
        for piece in list(board.pieces()):
            piece.legal_destinations(board)
        assert board == before

    def test_generation_is_deterministic(self) -> None:
        board = Board.initial()
        e2 = parse_square("e2")
        first = square_names(board.possible_moves(e2))
        assert first == square_names(board.possible_moves(e2))

    def test_apply_move_marks_moved(self) -> None:
        board = Board()
        pawn = _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        pawn.apply_move(parse_square("e4"), board)
        assert pawn.has_moved
        # Relocation is the board's job
        assert pawn.square == parse_square("e2")

    def test_apply_move_illegal_raises(self) -> None:
        board = Board()
        pawn = _put(board, PieceKind.PAWN, Side.WHITE, "e2")
        with pytest.raises(IllegalMoveRequested, match="white pawn on e2"):
            pawn.apply_move(parse_square("e5"), board)
        assert not pawn.has_moved

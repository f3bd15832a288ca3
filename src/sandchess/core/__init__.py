"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from sandchess.core import Board, Square

    board = Board.initial()
    e2 = Square.from_algebraic("e2")
    print(sorted(board.possible_moves(e2)))
    board.make_move(e2, Square.from_algebraic("e4"))
"""

from sandchess.core.board import Board
from sandchess.core.enums import PieceKind, Side
from sandchess.core.errors import (
    ChessError,
    IllegalMoveRequested,
    InvalidParameter,
    InvalidPosition,
)
from sandchess.core.move_generator import is_legal_destination, legal_destinations
from sandchess.core.piece import Piece
from sandchess.core.setup import (
    LAYOUTS,
    PAWNS_ONLY_LAYOUT,
    STANDARD_LAYOUT,
    STANDARD_PLACEMENT,
    Layout,
    board_from_placement,
    layout_by_name,
    placement_of,
)
from sandchess.core.square import Square, parse_square, square_names

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Errors
    "ChessError",
    "IllegalMoveRequested",
    "InvalidParameter",
    "InvalidPosition",
    # Types / helpers
    "Square",
    "parse_square",
    "square_names",
    # Domain objects
    "Board",
    "Piece",
    "is_legal_destination",
    "legal_destinations",
    # Setup
    "LAYOUTS",
    "Layout",
    "PAWNS_ONLY_LAYOUT",
    "STANDARD_LAYOUT",
    "STANDARD_PLACEMENT",
    "board_from_placement",
    "layout_by_name",
    "placement_of",
]

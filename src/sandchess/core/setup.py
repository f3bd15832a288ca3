"""Position-setup sources: named layouts and FEN piece placement."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

from sandchess.core.enums import PieceKind, Side
from sandchess.core.errors import InvalidParameter
from sandchess.core.piece import Piece
from sandchess.core.square import BOARD_SIZE, Square

if TYPE_CHECKING:
    from sandchess.core.board import Board

Layout: TypeAlias = Mapping[Square, tuple[Side, PieceKind]]

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)

STANDARD_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def _pawn_ranks() -> dict[Square, tuple[Side, PieceKind]]:
    layout: dict[Square, tuple[Side, PieceKind]] = {}
    for side in Side:
        for col in range(BOARD_SIZE):
            layout[Square(side.starting_rank, col)] = (side, PieceKind.PAWN)
    return layout


def _standard() -> dict[Square, tuple[Side, PieceKind]]:
    layout = _pawn_ranks()
    for side in Side:
        for col, kind in enumerate(BACK_RANK):
            layout[Square(side.back_rank, col)] = (side, kind)
    return layout


PAWNS_ONLY_LAYOUT: Layout = MappingProxyType(_pawn_ranks())
STANDARD_LAYOUT: Layout = MappingProxyType(_standard())

LAYOUTS: dict[str, Layout] = {
    "standard": STANDARD_LAYOUT,
    "pawns": PAWNS_ONLY_LAYOUT,
}


def layout_by_name(name: str) -> Layout:
    try:
        return LAYOUTS[name]
    except KeyError:
        raise InvalidParameter(
            f"Unknown layout {name!r}; expected one of {sorted(LAYOUTS)}"
        ) from None


def populate(board: Board, layout: Layout) -> None:
    """Place fresh (unmoved) pieces for every entry of *layout*."""
    for sq, (side, kind) in layout.items():
        board.place(Piece(kind, side, sq))


# ── FEN piece placement ─────────────────────────────────────────────────────


def board_from_placement(placement: str) -> Board:
    """Build a board from the piece-placement field of a FEN string.

    Pawns that are not on their side's starting rank load as moved.
    """
    from sandchess.core.board import Board

    ranks = placement.split("/")
    if len(ranks) != BOARD_SIZE:
        raise InvalidParameter(
            f"Invalid placement (must contain 8 ranks): {placement!r}"
        )
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        row = BOARD_SIZE - 1 - rank_idx
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise InvalidParameter(
                        f"Invalid placement digit {ch!r}: {placement!r}"
                    )
                col += step
            else:
                if col >= BOARD_SIZE:
                    raise InvalidParameter(f"Invalid placement width: {placement!r}")
                sq = Square(row, col)
                piece = Piece.from_char(ch, sq)
                if piece.kind == PieceKind.PAWN:
                    piece.has_moved = row != piece.side.starting_rank
                board.place(piece)
                col += 1
            if col > BOARD_SIZE:
                raise InvalidParameter(f"Invalid placement width: {placement!r}")
        if col != BOARD_SIZE:
            raise InvalidParameter(f"Invalid placement width: {placement!r}")
    return board


def placement_of(board: Board) -> str:
    """Serialise *board* as a FEN piece-placement field."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        text = ""
        empty = 0
        for col in range(BOARD_SIZE):
            piece = board.piece_at(Square(row, col))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    return "/".join(rows)

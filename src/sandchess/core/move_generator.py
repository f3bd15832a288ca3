"""Legal destination generation, one rule evaluator per piece kind.

Every legality question (full destination set or single-target check)
goes through :func:`legal_destinations`; there is no second code path.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from sandchess.core.enums import PieceKind
from sandchess.core.square import Square

if TYPE_CHECKING:
    from sandchess.core.board import Board
    from sandchess.core.piece import Piece


# Offsets are (drow, dcol).
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_PAWN_CAPTURE_COLS: tuple[int, int] = (-1, 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in Square.all():
        moves: list[Square] = []
        for drow, dcol in offsets:
            to_sq = sq.offset(drow, dcol)
            if to_sq is not None:
                moves.append(to_sq)
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in Square.all():
        square_rays: list[tuple[Square, ...]] = []
        for drow, dcol in directions:
            ray: list[Square] = []
            to_sq = sq.offset(drow, dcol)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(drow, dcol)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


# -- Public API -------------------------------------------------------------


def legal_destinations(piece: Piece, board: Board) -> set[Square]:
    """Squares *piece* may move to on *board*.

    Pure: neither the piece nor the board is modified.
    """
    return _RULES[piece.kind](piece, board)


def is_legal_destination(piece: Piece, target: Square, board: Board) -> bool:
    return target in legal_destinations(piece, board)


# -- Piece-specific rules (private) ----------------------------------------


def _pawn(piece: Piece, board: Board) -> set[Square]:
    moves: set[Square] = set()
    sq = piece.square
    side = piece.side
    forward = side.forward_direction

    one_step = sq.offset(forward, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.add(one_step)
        if not piece.has_moved and sq.row == side.starting_rank:
            two_step = sq.offset(2 * forward, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.add(two_step)

    for dcol in _PAWN_CAPTURE_COLS:
        cap_sq = sq.offset(forward, dcol)
        if cap_sq is None:
            continue
        target = board.piece_at(cap_sq)
        if target is not None and piece.is_opponent_of(target):
            moves.add(cap_sq)
    return moves


def _jumps(
    piece: Piece, board: Board, targets: tuple[tuple[Square, ...], ...]
) -> set[Square]:
    moves: set[Square] = set()
    for to_sq in targets[piece.square.index]:
        target = board.piece_at(to_sq)
        if target is None or piece.is_opponent_of(target):
            moves.add(to_sq)
    return moves


def _sliding(
    piece: Piece, board: Board, rays: tuple[tuple[tuple[Square, ...], ...], ...]
) -> set[Square]:
    moves: set[Square] = set()
    for ray in rays[piece.square.index]:
        for to_sq in ray:
            target = board.piece_at(to_sq)
            if target is None:
                moves.add(to_sq)
                continue
            if piece.is_opponent_of(target):
                moves.add(to_sq)
            break
    return moves


def _knight(piece: Piece, board: Board) -> set[Square]:
    return _jumps(piece, board, _KNIGHT_TARGETS)


def _king(piece: Piece, board: Board) -> set[Square]:
    return _jumps(piece, board, _KING_TARGETS)


def _bishop(piece: Piece, board: Board) -> set[Square]:
    return _sliding(piece, board, _BISHOP_RAYS)


def _rook(piece: Piece, board: Board) -> set[Square]:
    return _sliding(piece, board, _ROOK_RAYS)


def _queen(piece: Piece, board: Board) -> set[Square]:
    return _sliding(piece, board, _QUEEN_RAYS)


_RULES: dict[PieceKind, Callable[[Piece, Board], set[Square]]] = {
    PieceKind.PAWN: _pawn,
    PieceKind.KNIGHT: _knight,
    PieceKind.BISHOP: _bishop,
    PieceKind.ROOK: _rook,
    PieceKind.QUEEN: _queen,
    PieceKind.KING: _king,
}

_missing = set(PieceKind) - _RULES.keys()
if _missing:
    raise RuntimeError(f"No movement rule for {sorted(k.name for k in _missing)}")

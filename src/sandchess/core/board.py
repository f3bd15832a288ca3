"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from sandchess.core.enums import PieceKind, Side
from sandchess.core.errors import InvalidParameter
from sandchess.core.piece import Piece
from sandchess.core.setup import STANDARD_LAYOUT, Layout, populate
from sandchess.core.square import BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)


class Board:
    """Mutable 8x8 grid holding at most one :class:`Piece` per square.

    The board never checks legality when relocating pieces; callers ask
    :meth:`possible_moves` (or use :meth:`make_move`) first.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    # -- Element access -----------------------------------------------------

    def piece_at(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    def place(self, piece: Piece) -> None:
        """Put *piece* on its own square, replacing any occupant."""
        if not isinstance(piece, Piece):
            raise InvalidParameter(f"Expected a Piece, got {piece!r}")
        self._grid[piece.square.row][piece.square.col] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq* and return whatever stood there."""
        piece = self._grid[sq.row][sq.col]
        self._grid[sq.row][sq.col] = None
        return piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, side: Side | None = None) -> Iterator[Piece]:
        """Pieces in square order (a1..h8), optionally filtered by *side*."""
        for row in self._grid:
            for piece in row:
                if piece is not None and (side is None or piece.side == side):
                    yield piece

    def count(self, side: Side, kind: PieceKind) -> int:
        return sum(1 for p in self.pieces(side) if p.kind == kind)

    def possible_moves(self, sq: Square) -> set[Square]:
        """Legal destinations of the piece on *sq*; empty set if none."""
        piece = self.piece_at(sq)
        if piece is None:
            return set()
        return piece.legal_destinations(self)

    # -- Mutation -----------------------------------------------------------

    def clear(self) -> None:
        self._grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def place_initial_setup(self, layout: Layout = STANDARD_LAYOUT) -> None:
        """Clear the grid and populate it from *layout*."""
        self.clear()
        populate(self, layout)
        _LOGGER.debug("Board set up with %d pieces", len(layout))

    def apply_move(self, origin: Square, target: Square) -> Piece | None:
        """Relocate the piece on *origin* to *target*.

        Whatever stood on *target* is discarded and returned. Legality is
        not re-checked.
        """
        piece = self.piece_at(origin)
        if piece is None:
            raise InvalidParameter(f"No piece on {origin.to_algebraic()}")

        captured = self.remove(target) if target != origin else None
        self._grid[origin.row][origin.col] = None
        piece.square = target
        piece.has_moved = True
        self._grid[target.row][target.col] = piece

        _LOGGER.debug(
            "%s moved %s-%s%s",
            piece.kind,
            origin.to_algebraic(),
            target.to_algebraic(),
            f" capturing {captured.kind!s}" if captured is not None else "",
        )
        return captured

    def make_move(self, origin: Square, target: Square) -> Piece | None:
        """Validated variant of :meth:`apply_move`.

        Raises :class:`IllegalMoveRequested` if *target* is not a legal
        destination of the piece on *origin*.
        """
        piece = self.piece_at(origin)
        if piece is None:
            raise InvalidParameter(f"No piece on {origin.to_algebraic()}")
        piece.apply_move(target, self)
        return self.apply_move(origin, target)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        """Deep copy; pieces are duplicated so the copies never alias."""
        b = Board()
        for piece in self.pieces():
            b.place(Piece(piece.kind, piece.side, piece.square, piece.has_moved))
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, layout: Layout = STANDARD_LAYOUT) -> Board:
        b = cls()
        b.place_initial_setup(layout)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self._grid[row][col]
                cells.append(str(p) if p else ".")
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side color.

    Row-derived facts assume row 0 is rank 1 (white's home rank).
    """

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def forward_direction(self) -> int:
        """Row delta of a pawn step: +1 for white, -1 for black."""
        return 1 if self is Side.WHITE else -1

    @property
    def starting_rank(self) -> int:
        """Row index pawns of this side begin on."""
        return 1 if self is Side.WHITE else 6

    @property
    def back_rank(self) -> int:
        return 0 if self is Side.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()

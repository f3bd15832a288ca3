"""Square value type and coordinate helpers.

Board layout (row 0 is rank 1, column 0 is file a):
    a1=(0, 0), b1=(0, 1), ..., h1=(0, 7)
    a2=(1, 0), ...
    ...
    a8=(7, 0), ..., h8=(7, 7)

White pawns advance towards higher rows, black pawns towards lower rows.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sandchess.core.errors import InvalidParameter, InvalidPosition

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"

_ALGEBRAIC_RE = re.compile(r"[a-h][1-8]")


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable board cell addressed by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for value in (self.row, self.col):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameter(f"Square index must be an int: {value!r}")
        if not Square.in_bounds(self.row, self.col):
            raise InvalidPosition(
                f"Square indices out of range: ({self.row!r}, {self.col!r})"
            )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_algebraic(cls, text: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(3, 4)."""
        if not isinstance(text, str) or _ALGEBRAIC_RE.fullmatch(text) is None:
            raise InvalidPosition(f"Invalid square name: {text!r}")
        return cls(RANKS.index(text[1]), FILES.index(text[0]))

    @classmethod
    def from_indices(cls, row: int, col: int) -> Square:
        return cls(row, col)

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Inverse of :attr:`index` (0 → a1, 63 → h8)."""
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise InvalidPosition(f"Square index out of range: {index!r}")
        return cls(index // BOARD_SIZE, index % BOARD_SIZE)

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    @staticmethod
    def all() -> Iterator[Square]:
        """All 64 squares, a1 first, h8 last."""
        for index in range(BOARD_SIZE * BOARD_SIZE):
            yield _ALL_SQUARES[index]

    # ── Queries ──────────────────────────────────────────────────────────

    def to_algebraic(self) -> str:
        return FILES[self.col] + RANKS[self.row]

    @property
    def index(self) -> int:
        """Linear index 0–63 (a1=0, h1=7, a8=56)."""
        return self.row * BOARD_SIZE + self.col

    @property
    def rank(self) -> int:
        """Human rank number 1–8."""
        return self.row + 1

    @property
    def file(self) -> str:
        return FILES[self.col]

    def is_in_bounds(self) -> bool:
        # Always true: construction rejects anything off the board.
        return Square.in_bounds(self.row, self.col)

    def row_difference(self, other: Square) -> int:
        """Signed row delta from *self* to *other*."""
        return other.row - self.row

    def col_difference(self, other: Square) -> int:
        """Signed column delta from *self* to *other*."""
        return other.col - self.col

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Square shifted by ``(drow, dcol)``, or ``None`` if off the board."""
        row = self.row + drow
        col = self.col + dcol
        if not Square.in_bounds(row, col):
            return None
        return _ALL_SQUARES[row * BOARD_SIZE + col]

    def is_light(self) -> bool:
        return (self.row + self.col) % 2 == 1

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.to_algebraic()

    def __repr__(self) -> str:
        return f"Square({self.to_algebraic()!r})"


def parse_square(text: str) -> Square:
    """Shorthand for :meth:`Square.from_algebraic`."""
    return Square.from_algebraic(text)


def square_names(squares: Iterable[Square]) -> list[str]:
    """Sorted algebraic names, handy for stable display and assertions."""
    return [sq.to_algebraic() for sq in sorted(squares)]


_ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = _ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = _ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = _ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = _ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = _ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = _ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = _ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = _ALL_SQUARES[56:64]

"""Piece entity: kind, side, square and per-kind movement state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sandchess.core.enums import PieceKind, Side
from sandchess.core.errors import IllegalMoveRequested, InvalidParameter
from sandchess.core.move_generator import legal_destinations
from sandchess.core.square import Square

if TYPE_CHECKING:
    from sandchess.core.board import Board

# FEN character ↔ (Side, PieceKind)
_CHAR_MAP: dict[str, tuple[Side, PieceKind]] = {
    "P": (Side.WHITE, PieceKind.PAWN),
    "N": (Side.WHITE, PieceKind.KNIGHT),
    "B": (Side.WHITE, PieceKind.BISHOP),
    "R": (Side.WHITE, PieceKind.ROOK),
    "Q": (Side.WHITE, PieceKind.QUEEN),
    "K": (Side.WHITE, PieceKind.KING),
    "p": (Side.BLACK, PieceKind.PAWN),
    "n": (Side.BLACK, PieceKind.KNIGHT),
    "b": (Side.BLACK, PieceKind.BISHOP),
    "r": (Side.BLACK, PieceKind.ROOK),
    "q": (Side.BLACK, PieceKind.QUEEN),
    "k": (Side.BLACK, PieceKind.KING),
}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}

_FEN_CHARS: dict[tuple[Side, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece standing on a board square.

    ``has_moved`` only matters to pawns (it gates the double step) but is
    tracked for every kind so the contract stays uniform.
    """

    kind: PieceKind
    side: Side
    square: Square
    has_moved: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.kind, PieceKind):
            raise InvalidParameter(f"Invalid piece kind: {self.kind!r}")
        if not isinstance(self.side, Side):
            raise InvalidParameter(f"Invalid side: {self.side!r}")
        if not isinstance(self.square, Square):
            raise InvalidParameter(f"Invalid square: {self.square!r}")

    # ── Movement ─────────────────────────────────────────────────────────

    def legal_destinations(self, board: Board) -> set[Square]:
        return legal_destinations(self, board)

    def can_move_to(self, target: Square, board: Board) -> bool:
        return target in legal_destinations(self, board)

    def apply_move(self, target: Square, board: Board) -> None:
        """Record that this piece moves to *target*.

        Only ``has_moved`` changes here; relocating the piece is
        :meth:`Board.apply_move`'s job.
        """
        if not self.can_move_to(target, board):
            raise IllegalMoveRequested(
                f"{self.describe()} cannot move to {target.to_algebraic()}"
            )
        self.has_moved = True

    def is_opponent_of(self, other: Piece) -> bool:
        return self.side != other.side

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _FEN_CHARS[(self.side, self.kind)]

    @classmethod
    def from_char(cls, char: str, square: Square, *, has_moved: bool = False) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            side, kind = _CHAR_MAP[char]
        except KeyError:
            raise InvalidParameter(f"Invalid piece character: {char!r}") from None
        return cls(kind, side, square, has_moved)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]

    def describe(self) -> str:
        """Human-readable label, e.g. 'white pawn on e2'."""
        return f"{self.side!s} {self.kind!s} on {self.square.to_algebraic()}"

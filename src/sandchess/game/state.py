"""Screen selector and move bookkeeping for a play session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sandchess.core.enums import PieceKind, Side
    from sandchess.core.square import Square


class GameState(IntEnum):
    """Which screen the driving layer updates and renders."""

    MENU = auto()
    PLAYING = auto()


class ClickResult(IntEnum):
    """Outcome of a single board click."""

    IGNORED = auto()  # not playing, or click outside the board
    SELECTED = auto()
    MOVED = auto()
    CLEARED = auto()


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    origin: Square
    target: Square
    side: Side
    kind: PieceKind
    captured: PieceKind | None = None

    def __str__(self) -> str:
        sep = "x" if self.captured is not None else "-"
        return f"{self.origin}{sep}{self.target}"

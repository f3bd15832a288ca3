"""PieceItem — a chess piece drawn as a glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsSimpleTextItem

from sandchess.core.enums import PieceKind
from sandchess.core.piece import Piece
from sandchess.core.square import Square

# Solid glyphs for both sides; the side is told apart by fill colour.
_GLYPHS: dict[PieceKind, str] = {
    PieceKind.PAWN: "♟",
    PieceKind.KNIGHT: "♞",
    PieceKind.BISHOP: "♝",
    PieceKind.ROOK: "♜",
    PieceKind.QUEEN: "♛",
    PieceKind.KING: "♚",
}


class PieceItem(QGraphicsSimpleTextItem):
    """A single chess piece on the board.

    Stores the logical *square* it was drawn for; not interactive itself,
    clicks are handled by the scene.
    """

    _FONT_RATIO = 0.72

    def __init__(
        self, piece: Piece, tile_size: int, fill: QColor, outline: QColor
    ) -> None:
        super().__init__(_GLYPHS[piece.kind])
        self.piece = piece
        self.square: Square = piece.square
        self._tile_size = tile_size

        font = QFont()
        font.setPixelSize(max(8, int(tile_size * self._FONT_RATIO)))
        self.setFont(font)
        self.setBrush(QBrush(fill))
        self.setPen(QPen(QBrush(outline), 1.0))
        self.setToolTip(f"{piece.symbol} {piece.describe()}")
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setZValue(1)

    def place_at(self, x: float, y: float) -> None:
        """Centre the glyph inside the tile whose top-left corner is (x, y)."""
        bounds = self.boundingRect()
        t = self._tile_size
        self.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)

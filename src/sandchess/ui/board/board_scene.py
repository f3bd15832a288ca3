"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from sandchess.core.enums import Side
from sandchess.core.square import BOARD_SIZE, FILES, Square
from sandchess.game.controller import GameController
from sandchess.game.state import ClickResult, MoveRecord
from sandchess.ui.board.piece_item import PieceItem
from sandchess.ui.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece items.

    Clicks are mapped to squares and handed to the :class:`GameController`;
    the scene redraws itself from the controller's events.

    Signals:
        move_made(MoveRecord): Emitted after a click completed a move.
    """

    move_made = pyqtSignal(object)

    TILE = 80  # px per square

    def __init__(
        self, controller: GameController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._theme = BoardTheme.default()
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True
        self._last_move: MoveRecord | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        events = controller.events
        events.on_move.append(self._on_move)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_board_reset.append(self._on_board_reset)

        self._draw_board()
        self._sync_pieces()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-destination dots."""
        self._show_legal_moves = visible
        self._draw_selection(self._controller.selected, self._controller.targets)

    def piece_item_at(self, sq: Square) -> PieceItem | None:
        return self._piece_items.get(sq)

    def pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square (``None`` outside the board)."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not Square.in_bounds(row, col):
            return None
        if self._flipped:
            return Square(row, BOARD_SIZE - 1 - col)
        return Square(BOARD_SIZE - 1 - row, col)

    def square_center(self, sq: Square) -> QPointF:
        vx, vy = self._visual_coords(sq)
        t = self.TILE
        return QPointF(vx * t + t / 2, vy * t + t / 2)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._draw_last_move()
        self._draw_selection(self._controller.selected, self._controller.targets)

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        self._clear_items(self._coord_items)

        t = self.TILE
        font = QFont()
        font.setPixelSize(max(9, t // 7))

        for sq in Square.all():
            vx, vy = self._visual_coords(sq)
            light = sq.is_light()
            color = self._theme.light_square if light else self._theme.dark_square
            rect = QGraphicsRectItem(vx * t, vy * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

            text_color = self._theme.coord_dark if light else self._theme.coord_light
            # Rank numbers on the left edge, file letters on the bottom edge
            if vx == 0:
                self._add_coord(str(sq.rank), font, text_color, vx * t + 2, vy * t + 1)
            if vy == BOARD_SIZE - 1:
                self._add_coord(
                    FILES[sq.col], font, text_color, vx * t + t - 12, vy * t + t - 16
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the controller's board."""
        self._clear_items(self._piece_items.values())
        self._piece_items.clear()

        t = self.TILE
        with self._controller.locked() as board:
            for piece in board.pieces():
                fill, outline = self._piece_colors(piece.side)
                item = PieceItem(piece, t, fill, outline)
                vx, vy = self._visual_coords(piece.square)
                item.place_at(vx * t, vy * t)
                self.addItem(item)
                self._piece_items[piece.square] = item

    def _piece_colors(self, side: Side) -> tuple[QColor, QColor]:
        if side == Side.WHITE:
            return self._theme.white_piece, self._theme.black_piece
        return self._theme.black_piece, self._theme.white_piece

    # ── Controller events ────────────────────────────────────────────────

    def _on_move(self, record: MoveRecord) -> None:
        self._last_move = record
        self._sync_pieces()
        self._draw_last_move()
        self.move_made.emit(record)

    def _on_board_reset(self) -> None:
        self._last_move = None
        self._clear_items(self._last_move_highlights)
        self._sync_pieces()

    def _on_selection_changed(self, sq: Square | None, targets: set[Square]) -> None:
        self._draw_selection(sq, targets)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.click_at(event.scenePos())
        event.accept()

    def click_at(self, pos: QPointF) -> ClickResult:
        """Forward a click at scene position *pos* to the controller."""
        return self._controller.click(self.pos_to_square(pos))

    # ── Selection / highlights ───────────────────────────────────────────

    def _draw_selection(self, sq: Square | None, targets: set[Square]) -> None:
        self._clear_items(self._highlight_items)
        if sq is None:
            return

        self._highlight_items.append(
            self._make_highlight(sq, self._theme.highlight_from)
        )
        if not self._show_legal_moves:
            return
        for target in sorted(targets):
            self._highlight_items.append(self._make_dot(target))

    def _draw_last_move(self) -> None:
        self._clear_items(self._last_move_highlights)
        if self._last_move is None:
            return
        for sq in (self._last_move.origin, self._last_move.target):
            rect = self._make_highlight(sq, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_highlights.append(rect)

    def _clear_items(self, items: Iterable[QGraphicsItem]) -> None:
        for item in list(items):
            self.removeItem(item)
        if isinstance(items, list):
            items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row), row 0 at the top."""
        if self._flipped:
            return BOARD_SIZE - 1 - sq.col, sq.row
        return sq.col, BOARD_SIZE - 1 - sq.row

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vx, vy = self._visual_coords(sq)
        rect = QGraphicsRectItem(vx * t, vy * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    def _make_dot(self, sq: Square) -> QGraphicsEllipseItem:
        t = self.TILE
        d = t / 3
        center = self.square_center(sq)
        dot = QGraphicsEllipseItem(center.x() - d / 2, center.y() - d / 2, d, d)
        dot.setBrush(QBrush(self._theme.highlight_to))
        dot.setPen(QPen(Qt.PenStyle.NoPen))
        dot.setZValue(2)
        self.addItem(dot)
        return dot

"""Visual theme constants and QSS styles for Sandchess."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # selected piece origin
    highlight_to: QColor  # legal destinations
    last_move: QColor  # origin and destination of the last move
    white_piece: QColor
    black_piece: QColor
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            highlight_to=QColor(0, 0, 0, 40),  # dark dot overlay
            last_move=QColor(155, 199, 0, 105),  # green
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_from=QColor(255, 255, 0, 100),
            highlight_to=QColor(0, 0, 0, 40),
            last_move=QColor(155, 199, 0, 105),
            white_piece=QColor(250, 250, 250),
            black_piece=QColor(20, 20, 20),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def contrast(cls) -> BoardTheme:
        """White and black squares with blue/red pieces."""
        return cls(
            light_square=QColor(255, 255, 255),
            dark_square=QColor(0, 0, 0),
            highlight_from=QColor(255, 255, 0, 120),
            highlight_to=QColor(128, 128, 128, 90),
            last_move=QColor(155, 199, 0, 105),
            white_piece=QColor(0, 0, 255),
            black_piece=QColor(255, 0, 0),
            coord_light=QColor(255, 255, 255),
            coord_dark=QColor(0, 0, 0),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Blue": BoardTheme.blue(),
    "Contrast": BoardTheme.contrast(),
}


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Helvetica Neue", sans-serif;
}

QLabel#menuTitle {
    font-size: 32px;
    font-weight: bold;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
"""

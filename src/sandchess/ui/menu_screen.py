"""MenuScreen — the start page shown while the game is in the MENU state."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget


class MenuScreen(QWidget):
    """Title plus the "start game" action.

    Signals:
        start_requested(): The user asked to begin a game.
        quit_requested(): The user asked to close the application.
    """

    start_requested = pyqtSignal()
    quit_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._title = QLabel("Sandchess")
        self._title.setObjectName("menuTitle")
        self._title.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start game")
        self._start_btn.clicked.connect(self.start_requested.emit)
        self._quit_btn = QPushButton("Quit")
        self._quit_btn.clicked.connect(self.quit_requested.emit)

        layout = QVBoxLayout(self)
        layout.addStretch()
        layout.addWidget(self._title)
        layout.addSpacing(24)
        layout.addWidget(self._start_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()

    @property
    def start_button(self) -> QPushButton:
        return self._start_btn

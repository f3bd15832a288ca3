"""MainWindow — top-level window switching between menu and board."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from sandchess.game.controller import GameController
from sandchess.game.state import GameState, MoveRecord
from sandchess.ui.board.board_view import BoardView
from sandchess.ui.menu_screen import MenuScreen
from sandchess.ui.settings import AppSettings, apply_settings

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Sandchess.

    One stacked page per :class:`GameState`; the controller's state decides
    which page is visible and therefore which one receives input.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        controller: GameController | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Sandchess")
        self.setMinimumSize(480, 560)
        self.resize(720, 780)

        self._settings = settings or AppSettings()
        self._controller = controller or GameController(
            self._settings.resolve_layout()
        )

        self._setup_ui()
        self._connect_signals()
        apply_settings(self._board_view.board_scene, self._settings)
        self._show_state(self._controller.state)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def menu_screen(self) -> MenuScreen:
        return self._menu

    def current_page(self) -> QWidget | None:
        return self._stack.currentWidget()

    # ── UI construction ──────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        self._stack = QStackedWidget()

        self._menu = MenuScreen()

        self._playing = QWidget()
        self._board_view = BoardView(self._controller)
        self._status = QLabel()
        self._menu_btn = QPushButton("Menu")
        self._restart_btn = QPushButton("Restart")

        buttons = QHBoxLayout()
        buttons.addWidget(self._status, stretch=1)
        buttons.addWidget(self._restart_btn)
        buttons.addWidget(self._menu_btn)

        playing_layout = QVBoxLayout(self._playing)
        playing_layout.addWidget(self._board_view, stretch=1)
        playing_layout.addLayout(buttons)

        self._pages: dict[GameState, QWidget] = {
            GameState.MENU: self._menu,
            GameState.PLAYING: self._playing,
        }
        for page in self._pages.values():
            self._stack.addWidget(page)
        self.setCentralWidget(self._stack)

    def _connect_signals(self) -> None:
        self._menu.start_requested.connect(self._on_start)
        self._menu.quit_requested.connect(self.close)
        self._menu_btn.clicked.connect(self._on_menu)
        self._restart_btn.clicked.connect(self._on_start)
        self._board_view.move_made.connect(self._on_move_made)
        self._controller.events.on_state_changed.append(self._show_state)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_start(self) -> None:
        self._controller.start_game()
        self._status.setText("")

    def _on_menu(self) -> None:
        self._controller.show_menu()

    def _on_move_made(self, record: MoveRecord) -> None:
        ply = len(self._controller.history)
        self._status.setText(f"{ply}. {record.side!s} {record.kind!s} {record}")

    def _show_state(self, state: GameState) -> None:
        _LOGGER.debug("Showing %s page", state.name)
        self._stack.setCurrentWidget(self._pages[state])

"""User-configurable settings and how they reach the widgets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sandchess.core.setup import Layout, layout_by_name
from sandchess.ui.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from sandchess.ui.board.board_scene import BoardScene

LOG_LEVEL_ENV = "SANDCHESS_LOG_LEVEL"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    layout: str = "standard"  # "standard" or "pawns"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flipped: bool = False

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        settings = cls()
        settings.log_level = os.environ.get(LOG_LEVEL_ENV, settings.log_level).upper()
        return settings

    def resolve_layout(self) -> Layout:
        return layout_by_name(self.layout)

    def resolve_theme(self) -> BoardTheme:
        return THEMES.get(self.board_theme, BoardTheme.default())


def apply_settings(scene: BoardScene, settings: AppSettings) -> None:
    scene.set_theme(settings.resolve_theme())
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)
    scene.set_flipped(settings.flipped)

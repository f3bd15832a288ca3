"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from sandchess.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Install the root handler once; unknown level names fall back to WARNING."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    if numeric == logging.WARNING and level.upper() != "WARNING":
        _LOGGER.warning("Unknown log level %r, using WARNING", level)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from sandchess.ui.theme import APP_STYLE

    app.setApplicationName("Sandchess")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from sandchess.ui.main_window import MainWindow

    settings = settings or AppSettings.from_env()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Sandchess started (layout=%s)", settings.layout)

    return app.exec()

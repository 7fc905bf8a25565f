"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from draughtie.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(level: int = logging.INFO) -> None:
    """Route engine/game traces to stderr."""
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from draughtie.ui.styles.theme import APP_STYLE

    app.setApplicationName("Draughtie")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from draughtie.ui.main_window import MainWindow

    settings = settings or AppSettings()
    _configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Engine search depth: %d", settings.engine_depth)

    return app.exec()

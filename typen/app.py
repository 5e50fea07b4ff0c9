"""Application entry point and setup for the Typen typing trainer."""

import logging
import sys

from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QApplication

from typen.core.config import load_config
from typen.core.library import LibraryStore
from typen.core.samples import seed_library
from typen.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load configuration and the library, then start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Typen")
    app.setApplicationDisplayName("Typen")

    app_font = QFont()
    app_font.setPointSize(11)
    app.setFont(app_font)

    config = load_config()
    library = LibraryStore(config.library_path)
    seed_library(library)
    if not config.api_key:
        logging.info("No Gemini API key configured; document upload will be unavailable")

    window = MainWindow(config=config, library=library)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        window.setGeometry(screen.availableGeometry())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()

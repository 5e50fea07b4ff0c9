from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from typen.core.config import AppConfig
from typen.core.errors import EmptyContentError
from typen.core.extraction import GeminiExtractor
from typen.core.library import LibraryStore, SourceText, create_text_record
from typen.core.session import PracticeResult
from typen.ui.library_view import LibraryScreen
from typen.ui.result_overlay import ResultOverlay
from typen.ui.selection_view import SelectionScreen
from typen.ui.typing_view import TypingScreen
from typen.ui.workers import ExtractionWorker, Workers

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Three-screen window: library -> paragraph selection -> typing practice.

    The finished-session summary is an overlay on top of the typing screen;
    closing it returns to the library.
    """

    def __init__(self, config: AppConfig, library: LibraryStore) -> None:
        super().__init__()
        self._config = config
        self._library = library
        self._extractor = GeminiExtractor.from_config(config)
        self._extraction_busy = False

        self.setWindowTitle("Typen")
        self._stack = QStackedWidget(self)
        self.setCentralWidget(self._stack)

        self._library_screen = LibraryScreen()
        self._selection_screen = SelectionScreen()
        self._typing_screen = TypingScreen()
        for screen in (self._library_screen, self._selection_screen, self._typing_screen):
            self._stack.addWidget(screen)

        self._result_overlay = ResultOverlay(self._stack)
        self._result_overlay.hide()

        inputs = self._library_screen.input_section
        inputs.upload_requested.connect(self._start_extraction)
        inputs.paste_submitted.connect(self._add_pasted_text)
        self._library_screen.text_selected.connect(self._open_selection)
        self._library_screen.text_deleted.connect(self._delete_text)
        self._selection_screen.confirmed.connect(self._start_practice)
        self._selection_screen.cancelled.connect(self._show_library)
        self._typing_screen.finished.connect(self._practice_finished)
        self._typing_screen.exited.connect(self._show_library)
        self._result_overlay.closed.connect(self._show_library)

        self._refresh_library()
        self._show_library()
        QTimer.singleShot(0, self.showMaximized)

    # ------------------------------------------------------------------
    # Library
    # ------------------------------------------------------------------

    def _refresh_library(self) -> None:
        texts = self._library.all()
        best = {t.id: self._library.best_result(t.id) for t in texts}
        self._library_screen.set_texts(texts, best)

    def _add_text(self, text: SourceText) -> None:
        self._library.add(text)
        logger.info("Added text %r (%d characters) to the library", text.title, len(text.content))
        self._refresh_library()

    def _add_pasted_text(self, title: str, content: str) -> None:
        inputs = self._library_screen.input_section
        try:
            text = create_text_record(title, content, min_length=self._config.min_content_length)
        except EmptyContentError as e:
            inputs.show_error(str(e))
            return
        self._add_text(text)
        inputs.reset_paste()

    def _start_extraction(self, path: str) -> None:
        if self._extraction_busy:
            return
        self._extraction_busy = True
        self._library_screen.input_section.set_busy(True)
        worker = ExtractionWorker(self._extractor, Path(path))
        worker.signals.loaded.connect(self._extraction_loaded)
        worker.signals.failed.connect(self._extraction_failed)
        Workers.pool.start(worker)

    def _extraction_loaded(self, title: str, content: str) -> None:
        self._extraction_busy = False
        self._library_screen.input_section.set_busy(False)
        self._add_text(SourceText.create(title, content))

    def _extraction_failed(self, message: str) -> None:
        self._extraction_busy = False
        inputs = self._library_screen.input_section
        inputs.set_busy(False)
        inputs.show_error(message)

    def _delete_text(self, text_id: str) -> None:
        if self._library.remove(text_id):
            self._refresh_library()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _show_library(self) -> None:
        self._result_overlay.hide()
        self._refresh_library()
        self._stack.setCurrentWidget(self._library_screen)

    def _open_selection(self, text_id: str) -> None:
        text = self._library.get(text_id)
        if text is None:
            return
        self._selection_screen.set_text(text)
        self._stack.setCurrentWidget(self._selection_screen)

    def _start_practice(self, text_id: str, title: str, practice_string: str) -> None:
        try:
            self._typing_screen.start(text_id, title, practice_string)
        except EmptyContentError as e:
            logger.warning("Refusing to start practice for %s: %s", text_id, e)
            self._show_library()
            self._library_screen.input_section.show_error(str(e))
            return
        self._stack.setCurrentWidget(self._typing_screen)
        self._typing_screen.setFocus()

    def _practice_finished(self, result: PracticeResult) -> None:
        self._library.record_result(result)
        self._result_overlay.show_result(result)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Stop any running session and persist the library when closing the app."""
        session = self._typing_screen.session
        if session is not None and session.is_active:
            session.exit()
        self._library.save()
        super().closeEvent(event)

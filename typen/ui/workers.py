"""Background extraction so the window stays responsive while Gemini works."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from typen.core.errors import ExtractionError
from typen.core.extraction import GeminiExtractor

logger = logging.getLogger(__name__)


class ExtractionWorkerSignals(QObject):
    loaded = Signal(str, str)  # title, cleaned text
    failed = Signal(str)


class ExtractionWorker(QRunnable):
    def __init__(self, extractor: GeminiExtractor, path: Path):
        super().__init__()
        self.extractor = extractor
        self.path = path
        self.signals = ExtractionWorkerSignals()

    def run(self):
        try:
            text = self.extractor.extract(self.path)
        except ExtractionError as e:
            self.signals.failed.emit(str(e) or "Document analysis failed.")
            return
        except Exception:
            logger.exception("Unexpected failure extracting %s", self.path.name)
            self.signals.failed.emit("Document analysis failed.")
            return
        self.signals.loaded.emit(self.path.stem, text)


class Workers:
    pool = QThreadPool.globalInstance()

"""One-second QTimer that drives a practice session's clock."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtTickScheduler(QObject):
    """Scheduler for PracticeSession: calls the callback every second until stopped."""

    INTERVAL_MS = 1000

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setInterval(self.INTERVAL_MS)
        self._callback: Optional[Callable[[], None]] = None
        self._timer.timeout.connect(self._on_timeout)

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _on_timeout(self) -> None:
        if self._callback is not None:
            self._callback()

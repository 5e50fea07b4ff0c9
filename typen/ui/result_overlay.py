"""In-window overlay summarising a finished practice session."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from typen.core.metrics import format_duration
from typen.core.session import PracticeResult
from typen.ui.colors import Palette
from typen.ui.widgets import StatTile


def _card_container(radius: int = 40, object_name: str = "resultContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(420)
    container.setMaximumWidth(480)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: {Palette.SURFACE};
            border: 1px solid {Palette.BORDER};
            border-top: 8px solid {Palette.PRIMARY};
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(40)
    shadow.setOffset(0, 12)
    shadow.setColor(QColor(15, 23, 42, 60))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(15, 23, 42, 0.4);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setCursor(Qt.CursorShape.ArrowCursor)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


class ResultOverlay(QWidget):
    """Practice summary: speed, accuracy and duration, then back to the library."""

    closed = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, self._close)
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _card_container()
        content = QVBoxLayout(container)
        content.setContentsMargins(36, 32, 36, 32)
        content.setSpacing(20)

        title = QLabel("Practice Summary")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 26px; font-weight: 900;")
        content.addWidget(title)

        tiles = QGridLayout()
        tiles.setSpacing(16)
        self._wpm_tile = StatTile("Speed (WPM)", "0")
        self._accuracy_tile = StatTile("Accuracy (%)", "0")
        self._duration_tile = StatTile(
            "Total Duration",
            "0:00",
            accent="white",
            background=Palette.PRIMARY,
            caption_color="#bfdbfe",
            value_size=30,
        )
        tiles.addWidget(self._wpm_tile, 0, 0)
        tiles.addWidget(self._accuracy_tile, 0, 1)
        tiles.addWidget(self._duration_tile, 1, 0, 1, 2)
        content.addLayout(tiles)

        back_btn = QPushButton("BACK TO LIBRARY")
        back_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        back_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        back_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {Palette.TEXT_PRIMARY};
                color: white;
                padding: 16px;
                border: none;
                border-radius: 20px;
                font-size: 16px;
                font-weight: 900;
            }}
            QPushButton:hover {{ background: #1e293b; }}
            """
        )
        back_btn.clicked.connect(self._close)
        content.addWidget(back_btn)

        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)

    def show_result(self, result: PracticeResult) -> None:
        self._wpm_tile.set_value(str(result.wpm))
        self._accuracy_tile.set_value(str(result.accuracy))
        self._duration_tile.set_value(format_duration(result.duration))
        self._update_geometry()
        self.raise_()
        self.show()

    def _close(self) -> None:
        self.hide()
        self.closed.emit()

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)

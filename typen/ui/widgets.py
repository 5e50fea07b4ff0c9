"""Shared widgets: cards, stat tiles and button styles."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from typen.ui.colors import Palette


def primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: {Palette.PRIMARY};
            color: white;
            padding: 10px 22px;
            border: none;
            border-radius: 14px;
            font-weight: 800;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {Palette.PRIMARY_DARK}; }}
        QPushButton:disabled {{
            background: {Palette.BORDER};
            color: {Palette.TEXT_MUTED};
        }}
    """


def secondary_button_style() -> str:
    return f"""
        QPushButton {{
            background: {Palette.SURFACE};
            color: {Palette.TEXT_SECONDARY};
            padding: 8px 16px;
            border: 1px solid {Palette.BORDER};
            border-radius: 12px;
            font-weight: 800;
            font-size: 12px;
        }}
        QPushButton:hover {{
            background: {Palette.BORDER_SOFT};
            border-color: {Palette.PRIMARY_LIGHT};
            color: {Palette.PRIMARY};
        }}
        QPushButton:disabled {{ color: {Palette.TEXT_UNTYPED}; }}
    """


def danger_button_style() -> str:
    return f"""
        QPushButton {{
            background: {Palette.DANGER_TINT};
            color: {Palette.DANGER};
            padding: 8px 22px;
            border: 1px solid #fee2e2;
            border-radius: 14px;
            font-weight: 800;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: #fee2e2; }}
    """


def muted_label(text: str, size: int = 11) -> QLabel:
    label = QLabel(text)
    label.setStyleSheet(
        f"color: {Palette.TEXT_MUTED}; font-size: {size}px; font-weight: 800; letter-spacing: 2px;"
    )
    return label


class Card(QFrame):
    """White rounded card with a soft shadow."""

    def __init__(self, parent: Optional[QWidget] = None, *, radius: int = 24) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.setStyleSheet(
            f"""
            QFrame#card {{
                background: {Palette.SURFACE};
                border: 1px solid {Palette.BORDER};
                border-radius: {radius}px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(24)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(15, 23, 42, 20))
        self.setGraphicsEffect(shadow)


class StatTile(QFrame):
    """Caption plus a large value, used by the live panel and the result overlay."""

    def __init__(
        self,
        caption: str,
        value: str,
        *,
        accent: str = Palette.PRIMARY,
        background: str = Palette.BG,
        caption_color: str = Palette.TEXT_MUTED,
        value_size: int = 40,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("statTile")
        self.setStyleSheet(
            f"""
            QFrame#statTile {{
                background: {background};
                border: 1px solid {Palette.BORDER_SOFT};
                border-radius: 24px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(18, 16, 18, 16)
        layout.setSpacing(4)
        caption_label = QLabel(caption.upper())
        caption_label.setAlignment(Qt.AlignCenter)
        caption_label.setStyleSheet(
            f"color: {caption_color}; font-size: 10px; font-weight: 900; letter-spacing: 2px;"
        )
        layout.addWidget(caption_label)
        self.value_label = QLabel(value)
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setStyleSheet(
            f"color: {accent}; font-size: {value_size}px; font-weight: 900; font-family: monospace;"
        )
        layout.addWidget(self.value_label)

    def set_value(self, value: str) -> None:
        self.value_label.setText(str(value))

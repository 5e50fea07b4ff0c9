"""Selection screen: choose which paragraphs of a text to practice."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QIntValidator
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from typen.core.library import SourceText
from typen.core.normalizer import normalize, word_count
from typen.core.selection import SelectionModel
from typen.ui.colors import Palette, blend_hex
from typen.ui.widgets import muted_label, primary_button_style, secondary_button_style

_DEFAULT_TIP = "TIP: USE SHIFT + CLICK TO SELECT MULTIPLE PARAGRAPHS QUICKLY"


class ParagraphCard(QFrame):
    """One selectable paragraph. Shift+click extends from the last touched card."""

    def __init__(
        self,
        index: int,
        text: str,
        *,
        on_click: Callable[[int, bool], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._index = index
        self._on_click = on_click
        self._selected = False
        self.setObjectName("paragraphCard")
        self.setCursor(Qt.PointingHandCursor)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(20)

        self._badge = QLabel(str(index + 1))
        self._badge.setFixedSize(32, 32)
        self._badge.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._badge, 0, Qt.AlignTop)

        info = QVBoxLayout()
        info.setSpacing(6)
        meta = QHBoxLayout()
        self._section_label = QLabel(f"SECTION {index + 1}")
        meta.addWidget(self._section_label)
        meta.addStretch(1)
        words = QLabel(f"{word_count(text)} WORDS")
        words.setStyleSheet(f"color: {Palette.TEXT_UNTYPED}; font-size: 9px; font-weight: 800;")
        meta.addWidget(words)
        info.addLayout(meta)

        self._body = QLabel(text)
        self._body.setWordWrap(True)
        info.addWidget(self._body)
        layout.addLayout(info, 1)

        self.set_selected(False)

    def set_selected(self, selected: bool) -> None:
        self._selected = selected
        border = Palette.PRIMARY if selected else Palette.BORDER_SOFT
        self.setStyleSheet(
            f"""
            QFrame#paragraphCard {{
                background: {Palette.SURFACE};
                border: 2px solid {border};
                border-radius: 28px;
            }}
            """
        )
        if selected:
            self._badge.setText("✓")
            self._badge.setStyleSheet(
                f"background: {Palette.PRIMARY}; color: white; border-radius: 10px;"
                " font-size: 14px; font-weight: 900;"
            )
        else:
            self._badge.setText(str(self._index + 1))
            self._badge.setStyleSheet(
                f"background: {Palette.SURFACE}; color: {Palette.TEXT_UNTYPED};"
                f" border: 2px solid {Palette.BORDER}; border-radius: 10px;"
                " font-size: 10px; font-weight: 900;"
            )
        section_color = blend_hex(Palette.PRIMARY, Palette.PRIMARY_LIGHT, 0.3) if selected else Palette.TEXT_UNTYPED
        self._section_label.setStyleSheet(f"color: {section_color}; font-size: 9px; font-weight: 900;")
        body_color = Palette.TEXT_PRIMARY if selected else Palette.TEXT_SECONDARY
        self._body.setStyleSheet(f"color: {body_color}; font-size: 17px;")

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            shift = bool(event.modifiers() & Qt.ShiftModifier)
            self._on_click(self._index, shift)
        super().mousePressEvent(event)


class SelectionScreen(QWidget):
    """Wraps a SelectionModel for one library text."""

    confirmed = Signal(str, str, str)  # text id, title, practice string
    cancelled = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._text: Optional[SourceText] = None
        self._model = SelectionModel([])
        self._cards: List[ParagraphCard] = []
        self.setStyleSheet(f"background: {Palette.BG};")

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)
        outer.addWidget(self._build_header())

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        outer.addWidget(scroll, 1)

        body = QWidget()
        scroll.setWidget(body)
        body_layout = QVBoxLayout(body)
        body_layout.setContentsMargins(64, 28, 64, 40)
        body_layout.setSpacing(14)
        self._tip_label = muted_label(_DEFAULT_TIP, 10)
        body_layout.addWidget(self._tip_label)
        self._cards_layout = QVBoxLayout()
        self._cards_layout.setSpacing(14)
        body_layout.addLayout(self._cards_layout)
        body_layout.addStretch(1)

    def _build_header(self) -> QWidget:
        header = QFrame()
        header.setObjectName("selectionHeader")
        header.setStyleSheet(
            f"QFrame#selectionHeader {{ background: {Palette.SURFACE}; border-bottom: 1px solid {Palette.BORDER}; }}"
        )
        layout = QHBoxLayout(header)
        layout.setContentsMargins(32, 18, 32, 18)
        layout.setSpacing(14)

        back = QPushButton("←")
        back.setFixedSize(40, 40)
        back.setCursor(Qt.PointingHandCursor)
        back.setStyleSheet(secondary_button_style())
        back.clicked.connect(self.cancelled.emit)
        layout.addWidget(back)

        titles = QVBoxLayout()
        titles.setSpacing(2)
        heading = QLabel("Selection Strategy")
        heading.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 19px; font-weight: 900;")
        titles.addWidget(heading)
        self._subtitle = QLabel("Select sections to begin training")
        self._subtitle.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 12px;")
        titles.addWidget(self._subtitle)
        layout.addLayout(titles)
        layout.addStretch(1)

        layout.addWidget(muted_label("RANGE", 10))
        validator = QIntValidator(1, 99999, self)
        self._range_from = QLineEdit()
        self._range_from.setPlaceholderText("From")
        self._range_to = QLineEdit()
        self._range_to.setPlaceholderText("To")
        for edit in (self._range_from, self._range_to):
            edit.setValidator(validator)
            edit.setFixedWidth(64)
            edit.setStyleSheet(
                f"QLineEdit {{ background: {Palette.SURFACE}; border: 1px solid {Palette.BORDER};"
                " border-radius: 10px; padding: 6px; font-weight: 800; }"
            )
        layout.addWidget(self._range_from)
        to_label = QLabel("to")
        to_label.setStyleSheet(f"color: {Palette.TEXT_UNTYPED};")
        layout.addWidget(to_label)
        layout.addWidget(self._range_to)
        apply_btn = QPushButton("APPLY")
        apply_btn.setStyleSheet(secondary_button_style())
        apply_btn.clicked.connect(self._apply_range)
        self._range_to.returnPressed.connect(self._apply_range)
        layout.addWidget(apply_btn)

        all_btn = QPushButton("ALL")
        all_btn.setStyleSheet(secondary_button_style())
        all_btn.clicked.connect(self._select_all)
        layout.addWidget(all_btn)
        reset_btn = QPushButton("RESET")
        reset_btn.setStyleSheet(secondary_button_style())
        reset_btn.clicked.connect(self._clear)
        layout.addWidget(reset_btn)

        self._confirm_btn = QPushButton()
        self._confirm_btn.setStyleSheet(primary_button_style())
        self._confirm_btn.setCursor(Qt.PointingHandCursor)
        self._confirm_btn.clicked.connect(self._confirm)
        layout.addWidget(self._confirm_btn)
        return header

    def set_text(self, text: SourceText) -> None:
        """Show the paragraphs of *text* with a fresh, empty selection."""
        self._text = text
        self._model = SelectionModel(normalize(text.content))
        self._subtitle.setText(f"{text.title} · select sections to begin training")
        self._range_from.clear()
        self._range_to.clear()

        for card in self._cards:
            card.deleteLater()
        self._cards = []
        for i, paragraph in enumerate(self._model.paragraphs):
            card = ParagraphCard(i, paragraph, on_click=self._on_card_clicked)
            self._cards_layout.addWidget(card)
            self._cards.append(card)
        self._refresh()

    def _on_card_clicked(self, index: int, shift: bool) -> None:
        self._model.toggle(index, shift)
        self._refresh()

    def _apply_range(self) -> None:
        try:
            first = int(self._range_from.text())
            last = int(self._range_to.text())
        except ValueError:
            return
        self._model.apply_range(first, last)
        self._refresh()

    def _select_all(self) -> None:
        self._model.select_all()
        self._refresh()

    def _clear(self) -> None:
        self._model.clear()
        self._refresh()

    def _confirm(self) -> None:
        if self._text is None:
            return
        content = self._model.confirm()
        if content is None:
            return
        self._refresh()
        self.confirmed.emit(self._text.id, self._text.title, content)

    def _refresh(self) -> None:
        for i, card in enumerate(self._cards):
            card.set_selected(self._model.is_selected(i))
        anchor = self._model.last_touched
        if anchor is None:
            self._tip_label.setText(_DEFAULT_TIP)
        else:
            self._tip_label.setText(f"SHIFT + CLICK SELECTS EVERYTHING FROM SECTION {anchor + 1}")
        count = len(self._model.selected)
        self._confirm_btn.setText(f"PRACTICE NOW ({count})")
        self._confirm_btn.setEnabled(self._model.can_confirm)

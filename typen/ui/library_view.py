"""Library screen: add texts (upload or paste) and pick one to practice."""

from __future__ import annotations

import time
from typing import Callable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFileDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QScrollArea,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from typen.core.library import SourceText
from typen.core.normalizer import word_count
from typen.core.session import PracticeResult
from typen.ui.colors import Palette, blend_hex
from typen.ui.widgets import (
    Card,
    muted_label,
    primary_button_style,
)

DOCUMENT_FILTER = "Documents (*.pdf *.doc *.docx)"


class InputSection(Card):
    """Two tabs: upload a document for extraction, or paste text by hand."""

    upload_requested = Signal(str)
    paste_submitted = Signal(str, str)  # title, content

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent, radius=32)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(16)

        self._tabs = QTabWidget()
        self._tabs.setDocumentMode(True)
        self._tabs.addTab(self._build_upload_tab(), "Upload Source")
        self._tabs.addTab(self._build_paste_tab(), "Manual Entry")
        layout.addWidget(self._tabs)

        self._error_label = QLabel("")
        self._error_label.setWordWrap(True)
        self._error_label.setStyleSheet(
            f"""
            QLabel {{
                background: {Palette.DANGER_TINT};
                color: {Palette.DANGER};
                border: 1px solid #fee2e2;
                border-radius: 16px;
                padding: 12px 16px;
                font-size: 12px;
                font-weight: 800;
            }}
            """
        )
        self._error_label.setVisible(False)
        layout.addWidget(self._error_label)

    def _build_upload_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setContentsMargins(0, 16, 0, 0)
        self._upload_button = QPushButton("Drop Document\nPDF or Word Formatting")
        self._upload_button.setMinimumHeight(160)
        self._upload_button.setCursor(Qt.PointingHandCursor)
        self._upload_button.setStyleSheet(
            f"""
            QPushButton {{
                background: {blend_hex(Palette.BG, Palette.SURFACE, 0.5)};
                color: {Palette.TEXT_PRIMARY};
                border: 2px dashed {Palette.BORDER};
                border-radius: 28px;
                font-size: 16px;
                font-weight: 900;
            }}
            QPushButton:hover {{
                background: {Palette.PRIMARY_TINT};
                border-color: {Palette.PRIMARY_LIGHT};
            }}
            QPushButton:disabled {{ color: {Palette.TEXT_SECONDARY}; }}
            """
        )
        self._upload_button.clicked.connect(self._choose_file)
        layout.addWidget(self._upload_button)
        return tab

    def _build_paste_tab(self) -> QWidget:
        tab = QWidget()
        layout = QVBoxLayout(tab)
        layout.setContentsMargins(0, 16, 0, 0)
        layout.setSpacing(12)
        field_style = f"""
            background: {Palette.BG};
            border: 1px solid {Palette.BORDER};
            border-radius: 18px;
            padding: 12px 18px;
            font-size: 13px;
        """
        self._title_edit = QLineEdit()
        self._title_edit.setPlaceholderText("Exercise Title")
        self._title_edit.setStyleSheet(f"QLineEdit {{ {field_style} font-weight: 800; }}")
        layout.addWidget(self._title_edit)

        self._content_edit = QPlainTextEdit()
        self._content_edit.setPlaceholderText("Paste text content here...")
        self._content_edit.setMinimumHeight(180)
        self._content_edit.setStyleSheet(f"QPlainTextEdit {{ {field_style} }}")
        self._content_edit.textChanged.connect(self._update_submit_enabled)
        layout.addWidget(self._content_edit)

        self._submit_button = QPushButton("INITIALIZE TRAINING")
        self._submit_button.setStyleSheet(primary_button_style())
        self._submit_button.setCursor(Qt.PointingHandCursor)
        self._submit_button.setEnabled(False)
        self._submit_button.clicked.connect(self._submit_paste)
        layout.addWidget(self._submit_button)
        return tab

    def _update_submit_enabled(self) -> None:
        self._submit_button.setEnabled(bool(self._content_edit.toPlainText().strip()))

    def _choose_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Choose a document", "", DOCUMENT_FILTER)
        if path:
            self.clear_error()
            self.upload_requested.emit(path)

    def _submit_paste(self) -> None:
        content = self._content_edit.toPlainText()
        if not content.strip():
            return
        self.paste_submitted.emit(self._title_edit.text(), content)

    def set_busy(self, busy: bool) -> None:
        self._upload_button.setEnabled(not busy)
        if busy:
            self._upload_button.setText("Processing...")
        else:
            self._upload_button.setText("Drop Document\nPDF or Word Formatting")

    def reset_paste(self) -> None:
        self._title_edit.clear()
        self._content_edit.clear()
        self.clear_error()

    def show_error(self, message: str) -> None:
        self._error_label.setText(message)
        self._error_label.setVisible(True)

    def clear_error(self) -> None:
        self._error_label.setText("")
        self._error_label.setVisible(False)


class TextCard(QFrame):
    """Library entry: title, preview, date, word count and a delete button."""

    def __init__(
        self,
        text: SourceText,
        best: Optional[PracticeResult],
        *,
        on_select: Callable[[str], None],
        on_delete: Callable[[str], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._text_id = text.id
        self._on_select = on_select
        self.setObjectName("textCard")
        self.setCursor(Qt.PointingHandCursor)
        self.setMinimumHeight(180)
        self._apply_style(hover=False)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(22, 20, 22, 18)
        layout.setSpacing(10)

        header = QHBoxLayout()
        title = QLabel(text.title)
        title.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 15px; font-weight: 900;")
        header.addWidget(title, 1)
        delete_btn = QPushButton("✕")
        delete_btn.setToolTip("Delete")
        delete_btn.setFixedSize(30, 30)
        delete_btn.setCursor(Qt.PointingHandCursor)
        delete_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: {Palette.BG};
                color: {Palette.TEXT_MUTED};
                border: 1px solid {Palette.BORDER_SOFT};
                border-radius: 10px;
                font-weight: 900;
            }}
            QPushButton:hover {{ background: {Palette.DANGER_TINT}; color: {Palette.DANGER}; }}
            """
        )
        delete_btn.clicked.connect(lambda: on_delete(self._text_id))
        header.addWidget(delete_btn, 0, Qt.AlignTop)
        layout.addLayout(header)

        preview = QLabel(_preview(text.content))
        preview.setWordWrap(True)
        preview.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        preview.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 12px;")
        layout.addWidget(preview, 1)

        footer = QHBoxLayout()
        date_label = QLabel(time.strftime("%Y-%m-%d", time.localtime(text.created_at)))
        date_label.setStyleSheet(f"color: {Palette.TEXT_MUTED}; font-size: 10px; font-weight: 800;")
        footer.addWidget(date_label)
        footer.addStretch(1)
        if best is not None:
            best_label = QLabel(f"BEST {best.wpm} WPM")
            best_label.setStyleSheet(f"color: {Palette.PRIMARY}; font-size: 10px; font-weight: 900;")
            footer.addWidget(best_label)
        words = QLabel(f"{word_count(text.content)} WORDS")
        words.setStyleSheet(
            f"background: {Palette.BG}; color: {Palette.TEXT_SECONDARY}; border-radius: 9px;"
            " padding: 3px 10px; font-size: 10px; font-weight: 900;"
        )
        footer.addWidget(words)
        layout.addLayout(footer)

    def _apply_style(self, hover: bool) -> None:
        border = Palette.PRIMARY_LIGHT if hover else Palette.BORDER
        self.setStyleSheet(
            f"""
            QFrame#textCard {{
                background: {Palette.SURFACE};
                border: 1px solid {border};
                border-radius: 24px;
            }}
            """
        )

    def enterEvent(self, event) -> None:
        self._apply_style(hover=True)
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self._apply_style(hover=False)
        super().leaveEvent(event)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._on_select(self._text_id)
        super().mousePressEvent(event)


def _preview(content: str, limit: int = 160) -> str:
    flat = " ".join(content.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1].rstrip() + "…"


class LibraryScreen(QWidget):
    """Home screen: exercise source input plus the list of recent exercises."""

    text_selected = Signal(str)
    text_deleted = Signal(str)

    COLUMNS = 3

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setStyleSheet(f"background: {Palette.BG};")
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        outer.addWidget(scroll)

        body = QWidget()
        scroll.setWidget(body)
        layout = QVBoxLayout(body)
        layout.setContentsMargins(48, 40, 48, 40)
        layout.setSpacing(28)

        header = QLabel("Typen")
        header.setAlignment(Qt.AlignCenter)
        header.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 36px; font-weight: 900;")
        layout.addWidget(header)
        tagline = QLabel("High-performance English typing trainer. Upload PDF/Word or paste text to start training.")
        tagline.setAlignment(Qt.AlignCenter)
        tagline.setWordWrap(True)
        tagline.setStyleSheet(f"color: {Palette.TEXT_SECONDARY}; font-size: 15px;")
        layout.addWidget(tagline)

        layout.addWidget(muted_label("EXERCISE SOURCE"))
        self.input_section = InputSection()
        layout.addWidget(self.input_section)

        layout.addWidget(muted_label("RECENT EXERCISES"))
        self._grid_host = QWidget()
        self._grid = QGridLayout(self._grid_host)
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._grid.setSpacing(18)
        layout.addWidget(self._grid_host)
        layout.addStretch(1)

    def set_texts(self, texts: List[SourceText], best_by_id: dict) -> None:
        while self._grid.count():
            item = self._grid.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        if not texts:
            empty = QLabel("Your library is empty. Start by uploading a text.")
            empty.setAlignment(Qt.AlignCenter)
            empty.setMinimumHeight(140)
            empty.setStyleSheet(
                f"background: {Palette.SURFACE}; color: {Palette.TEXT_SECONDARY};"
                f" border: 1px solid {Palette.BORDER}; border-radius: 24px; font-size: 14px;"
            )
            self._grid.addWidget(empty, 0, 0, 1, self.COLUMNS)
            return

        for i, text in enumerate(texts):
            card = TextCard(
                text,
                best_by_id.get(text.id),
                on_select=self.text_selected.emit,
                on_delete=self.text_deleted.emit,
            )
            row, col = divmod(i, self.COLUMNS)
            self._grid.addWidget(card, row, col)

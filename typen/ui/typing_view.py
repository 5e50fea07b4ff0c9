"""Typing screen: live rendering of the target text and the feedback panel."""

from __future__ import annotations

import html
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from typen.core.diff import CharInfo, CharState
from typen.core.metrics import format_duration
from typen.core.session import ESCAPE, PracticeResult, PracticeSession, SessionStatus, start_session
from typen.ui.colors import Palette
from typen.ui.tick_timer import QtTickScheduler
from typen.ui.widgets import Card, StatTile, danger_button_style, muted_label, secondary_button_style

_MODIFIERS = Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier


def render_characters(chars: List[CharInfo], show_cursor: bool = True) -> str:
    """Build rich text for the practice card, one span per run of equal state."""
    parts: List[str] = ['<div style="white-space: pre-wrap;">']
    run_state: Optional[CharState] = None
    run: List[str] = []

    def flush() -> None:
        if not run:
            return
        text = html.escape("".join(run)).replace("\n", "<br/>")
        if run_state is CharState.CORRECT:
            parts.append(f'<span style="color:{Palette.CORRECT};">{text}</span>')
        else:
            parts.append(f'<span style="color:{Palette.TEXT_UNTYPED};">{text}</span>')
        run.clear()

    for info in chars:
        if info.state is CharState.INCORRECT:
            flush()
            shown = "␣" if info.typed == " " else html.escape(info.typed or "")
            hint = "Space" if info.expected == " " else ("↵" if info.expected == "\n" else html.escape(info.expected))
            parts.append(
                f'<span style="color:{Palette.INCORRECT}; background:{Palette.INCORRECT_BG};">{shown}</span>'
                f'<sup style="color:{Palette.HINT}; font-size:small;">{hint}</sup>'
            )
            if info.expected == "\n":
                parts.append("<br/>")
            run_state = None
            continue
        if info.state is CharState.CURSOR:
            flush()
            shown = "↵<br/>" if info.expected == "\n" else html.escape(info.expected)
            if show_cursor:
                parts.append(
                    f'<span style="color:{Palette.TEXT_PRIMARY}; border-bottom: 2px solid {Palette.CURSOR};'
                    f' text-decoration: underline;">{shown}</span>'
                )
            else:
                parts.append(f'<span style="color:{Palette.TEXT_UNTYPED};">{shown}</span>')
            run_state = None
            continue
        if info.state is not run_state:
            flush()
            run_state = info.state
        run.append(info.expected)
    flush()
    parts.append("</div>")
    return "".join(parts)


class TypingScreen(QWidget):
    """Owns one PracticeSession at a time and forwards keystrokes to it."""

    finished = Signal(object)  # PracticeResult
    exited = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session: Optional[PracticeSession] = None
        self._scheduler = QtTickScheduler(self)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setStyleSheet(f"background: {Palette.SURFACE};")

        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.setSpacing(0)
        outer.addWidget(self._build_header())

        body = QHBoxLayout()
        body.setContentsMargins(0, 0, 0, 0)
        body.setSpacing(0)
        outer.addLayout(body, 1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setFocusPolicy(Qt.NoFocus)
        scroll.setStyleSheet(f"background: {Palette.BG};")
        body.addWidget(scroll, 1)

        content = QWidget()
        scroll.setWidget(content)
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(48, 40, 48, 40)

        card = Card(radius=40)
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(56, 48, 56, 48)
        self._paused_label = QLabel("Session Paused · press Resume to continue")
        self._paused_label.setAlignment(Qt.AlignCenter)
        self._paused_label.setStyleSheet(
            f"background: {Palette.PRIMARY_TINT}; color: {Palette.TEXT_PRIMARY}; border-radius: 16px;"
            " padding: 14px; font-size: 18px; font-weight: 900;"
        )
        self._paused_label.setVisible(False)
        card_layout.addWidget(self._paused_label)
        self._text_label = QLabel("")
        self._text_label.setTextFormat(Qt.RichText)
        self._text_label.setWordWrap(True)
        self._text_label.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self._text_label.setStyleSheet("font-family: monospace; font-size: 24px; letter-spacing: 2px;")
        card_layout.addWidget(self._text_label)
        card_layout.addStretch(1)
        content_layout.addWidget(card)
        content_layout.addStretch(1)

        body.addWidget(self._build_side_panel())

    def _build_header(self) -> QWidget:
        header = QFrame()
        header.setObjectName("typingHeader")
        header.setStyleSheet(
            f"QFrame#typingHeader {{ background: {Palette.SURFACE}; border-bottom: 1px solid {Palette.BORDER_SOFT}; }}"
        )
        layout = QHBoxLayout(header)
        layout.setContentsMargins(32, 16, 32, 16)
        self._title_label = QLabel("")
        self._title_label.setStyleSheet(f"color: {Palette.TEXT_PRIMARY}; font-size: 19px; font-weight: 800;")
        layout.addWidget(self._title_label)
        layout.addStretch(1)
        self._pause_btn = QPushButton("Pause")
        self._pause_btn.setStyleSheet(secondary_button_style())
        self._pause_btn.setFocusPolicy(Qt.NoFocus)
        self._pause_btn.clicked.connect(self._toggle_pause)
        layout.addWidget(self._pause_btn)
        stop_btn = QPushButton("Stop")
        stop_btn.setStyleSheet(danger_button_style())
        stop_btn.setFocusPolicy(Qt.NoFocus)
        stop_btn.clicked.connect(self._stop)
        layout.addWidget(stop_btn)
        return header

    def _build_side_panel(self) -> QWidget:
        panel = QFrame()
        panel.setObjectName("livePanel")
        panel.setFixedWidth(300)
        panel.setStyleSheet(
            f"QFrame#livePanel {{ background: {Palette.SURFACE}; border-left: 1px solid {Palette.BORDER_SOFT}; }}"
        )
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(28, 32, 28, 32)
        layout.setSpacing(20)
        layout.addWidget(muted_label("LIVE FEEDBACK"))
        self._wpm_tile = StatTile("Current Speed (WPM)", "0", background=Palette.PRIMARY_TINT)
        layout.addWidget(self._wpm_tile)
        self._accuracy_tile = StatTile("Accuracy", "100%", accent=Palette.TEXT_PRIMARY, value_size=34)
        layout.addWidget(self._accuracy_tile)

        self._time_value = QLabel("0:00")
        self._mistakes_value = QLabel("0")
        for caption, value, color in (
            ("TIME", self._time_value, Palette.TEXT_PRIMARY),
            ("MISTAKES", self._mistakes_value, Palette.DANGER),
        ):
            row = QHBoxLayout()
            row.addWidget(muted_label(caption))
            row.addStretch(1)
            value.setStyleSheet(f"color: {color}; font-family: monospace; font-size: 13px; font-weight: 800;")
            row.addWidget(value)
            layout.addLayout(row)
        layout.addStretch(1)
        return panel

    @property
    def session(self) -> Optional[PracticeSession]:
        return self._session

    def start(self, text_id: str, title: str, practice_string: str) -> None:
        """Begin a fresh idle session; raises EmptyContentError for empty text."""
        if self._session is not None and self._session.is_active:
            self._session.exit()
        self._session = start_session(
            practice_string,
            text_id,
            scheduler=self._scheduler,
            on_finish=self._on_finish,
            on_change=self._on_change,
        )
        self._title_label.setText(title)
        self._refresh()
        self.setFocus()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        session = self._session
        if session is None or not session.is_active:
            super().keyPressEvent(event)
            return
        key = event.key()
        if key == Qt.Key_Escape:
            text = ESCAPE
        elif key in (Qt.Key_Return, Qt.Key_Enter):
            text = "\n"
        else:
            text = event.text()
        modifier = bool(event.modifiers() & _MODIFIERS)
        if text and (text == "\n" or text == ESCAPE or text.isprintable()):
            session.handle_key(text, modifier=modifier)
            event.accept()
            return
        super().keyPressEvent(event)

    def _toggle_pause(self) -> None:
        if self._session is not None:
            self._session.toggle_pause()
            self.setFocus()

    def _stop(self) -> None:
        if self._session is not None and self._session.is_active:
            self._session.exit()
        else:
            self.exited.emit()

    def _on_change(self) -> None:
        self._refresh()
        if self._session is not None and self._session.status is SessionStatus.EXITED:
            self.exited.emit()

    def _on_finish(self, result: PracticeResult) -> None:
        self.finished.emit(result)

    def _refresh(self) -> None:
        session = self._session
        if session is None:
            return
        status = session.status
        self._text_label.setText(
            render_characters(session.diff.characters(), show_cursor=status is not SessionStatus.PAUSED)
        )
        self._paused_label.setVisible(status is SessionStatus.PAUSED)
        self._pause_btn.setText("Resume" if status is SessionStatus.PAUSED else "Pause")
        self._pause_btn.setEnabled(status in (SessionStatus.RUNNING, SessionStatus.PAUSED))

        live = session.live_metrics()
        self._wpm_tile.set_value(str(live.wpm))
        self._accuracy_tile.set_value(f"{live.accuracy}%")
        self._time_value.setText(format_duration(live.elapsed_seconds))
        self._mistakes_value.setText(str(live.mistakes))

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from typen.core import metrics
from typen.core.diff import TypingDiff
from typen.core.errors import EmptyContentError
from typen.core.normalizer import build_target_text

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"


class SessionStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"
    EXITED = "exited"


_TERMINAL = (SessionStatus.FINISHED, SessionStatus.EXITED)


@dataclass(frozen=True)
class PracticeResult:
    """Final score of one finished practice session."""

    id: str
    text_id: str
    wpm: int
    accuracy: int
    duration: int
    timestamp: float


class NullScheduler:
    """Scheduler that never ticks; the caller drives ``tick()`` by hand."""

    def start(self, callback: Callable[[], None]) -> None:
        pass

    def stop(self) -> None:
        pass


class PracticeSession:
    """One practice attempt: idle -> running <-> paused -> finished / exited.

    The elapsed-time counter only advances while running.  The *scheduler*
    supplies the one-second tick: it is started on entering ``RUNNING`` and
    stopped on leaving it, for whatever reason.  A finished or exited session
    never becomes active again; start a new instance instead.
    """

    def __init__(
        self,
        target: str,
        text_id: str,
        *,
        scheduler=None,
        on_finish: Optional[Callable[[PracticeResult], None]] = None,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        if not target:
            raise EmptyContentError("Nothing to practice: the selected text is empty.")
        self._diff = TypingDiff(target)
        self._text_id = text_id
        self._scheduler = scheduler if scheduler is not None else NullScheduler()
        self._on_finish = on_finish
        self._on_change = on_change
        self._status = SessionStatus.IDLE
        self._elapsed_seconds = 0
        self._started_at: Optional[float] = None
        self._result: Optional[PracticeResult] = None

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed_seconds

    @property
    def started_at(self) -> Optional[float]:
        """Unix timestamp of the first keystroke, or None while idle."""
        return self._started_at

    @property
    def text_id(self) -> str:
        return self._text_id

    @property
    def diff(self) -> TypingDiff:
        return self._diff

    @property
    def result(self) -> Optional[PracticeResult]:
        return self._result

    @property
    def is_active(self) -> bool:
        return self._status not in _TERMINAL

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_key(self, key: str, *, modifier: bool = False) -> bool:
        """Feed the text produced by one keystroke.

        Escape exits.  Anything that is not exactly one character, or that was
        pressed together with Ctrl/Alt/Meta, is ignored and never starts the
        session.  Enter is typed like any other character once the session
        runs, but only a printable key starts it.  Returns True when a
        character was appended.
        """
        if not self.is_active:
            return False
        if key == ESCAPE:
            self.exit()
            return False
        if modifier or not key or len(key) != 1:
            return False
        if self._status is SessionStatus.IDLE:
            if not key.isprintable():
                return False
            self._enter_running()
        return self.append(key)

    def append(self, char: str) -> bool:
        if self._status is not SessionStatus.RUNNING:
            return False
        if not self._diff.append(char):
            return False
        if self._diff.is_complete:
            self._finish()
        else:
            self._changed()
        return True

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def pause(self) -> None:
        if self._status is not SessionStatus.RUNNING:
            return
        self._scheduler.stop()
        self._status = SessionStatus.PAUSED
        logger.debug("Session paused at %ss", self._elapsed_seconds)
        self._changed()

    def resume(self) -> None:
        if self._status is not SessionStatus.PAUSED:
            return
        self._status = SessionStatus.RUNNING
        self._scheduler.start(self.tick)
        logger.debug("Session resumed at %ss", self._elapsed_seconds)
        self._changed()

    def toggle_pause(self) -> None:
        if self._status is SessionStatus.RUNNING:
            self.pause()
        elif self._status is SessionStatus.PAUSED:
            self.resume()

    def exit(self) -> None:
        """Abandon the session without producing a result."""
        if not self.is_active:
            return
        self._scheduler.stop()
        self._status = SessionStatus.EXITED
        logger.info("Session for text %s exited after %ss", self._text_id, self._elapsed_seconds)
        self._changed()

    def tick(self) -> None:
        """Advance the counter by one second; ignored unless running."""
        if self._status is not SessionStatus.RUNNING:
            return
        self._elapsed_seconds += 1
        self._changed()

    def live_metrics(self) -> metrics.LiveMetrics:
        return metrics.compute(self._diff.correct_count(), len(self._diff), self._elapsed_seconds)

    def _enter_running(self) -> None:
        self._status = SessionStatus.RUNNING
        self._started_at = time.time()
        self._scheduler.start(self.tick)
        logger.debug("Session for text %s started", self._text_id)

    def _finish(self) -> None:
        self._scheduler.stop()
        self._status = SessionStatus.FINISHED
        final = self.live_metrics()
        self._result = PracticeResult(
            id=uuid.uuid4().hex,
            text_id=self._text_id,
            wpm=final.wpm,
            accuracy=final.accuracy,
            duration=self._elapsed_seconds,
            timestamp=time.time(),
        )
        logger.info(
            "Session for text %s finished: %s WPM, %s%% accuracy, %ss",
            self._text_id,
            final.wpm,
            final.accuracy,
            self._elapsed_seconds,
        )
        self._changed()
        if self._on_finish is not None:
            self._on_finish(self._result)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()


def start_session(
    practice_string: str,
    text_id: str,
    *,
    scheduler=None,
    on_finish: Optional[Callable[[PracticeResult], None]] = None,
    on_change: Optional[Callable[[], None]] = None,
) -> PracticeSession:
    """Create an idle session for a confirmed practice string."""
    return PracticeSession(
        build_target_text(practice_string),
        text_id,
        scheduler=scheduler,
        on_finish=on_finish,
        on_change=on_change,
    )

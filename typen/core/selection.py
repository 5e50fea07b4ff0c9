from __future__ import annotations

from typing import List, Optional, Set


class SelectionModel:
    """Paragraph picker behind the selection screen.

    Every gesture unions into the current selection (except a plain toggle on
    an already selected paragraph), so several non-contiguous picks can be
    combined.  ``confirm`` always joins paragraphs in document order, no
    matter in which order they were clicked.
    """

    def __init__(self, paragraphs: List[str]) -> None:
        self._paragraphs = list(paragraphs)
        self._selected: Set[int] = set()
        self._last_touched: Optional[int] = None

    @property
    def paragraphs(self) -> List[str]:
        return list(self._paragraphs)

    @property
    def selected(self) -> List[int]:
        """Selected paragraph indices in ascending order."""
        return sorted(self._selected)

    @property
    def last_touched(self) -> Optional[int]:
        """Anchor index for the next range gesture, or None."""
        return self._last_touched

    @property
    def can_confirm(self) -> bool:
        return bool(self._selected)

    def is_selected(self, index: int) -> bool:
        return index in self._selected

    def toggle(self, index: int, range_gesture: bool = False) -> None:
        """Flip *index*, or with *range_gesture* add everything from the anchor to it."""
        if not 0 <= index < len(self._paragraphs):
            raise IndexError(f"paragraph index out of range: {index}")
        if range_gesture and self._last_touched is not None:
            start = min(self._last_touched, index)
            end = max(self._last_touched, index)
            self._selected.update(range(start, end + 1))
        elif index in self._selected:
            self._selected.discard(index)
        else:
            self._selected.add(index)
        self._last_touched = index

    def apply_range(self, first: int, last: int) -> None:
        """Add the 1-indexed inclusive range between *first* and *last*.

        Both bounds are clamped into ``[1, len(paragraphs)]`` and may be given
        in either order.
        """
        count = len(self._paragraphs)
        if count == 0:
            return
        start = max(1, min(first, count))
        end = max(1, min(last, count))
        if start > end:
            start, end = end, start
        self._selected.update(range(start - 1, end))

    def select_all(self) -> None:
        self._selected = set(range(len(self._paragraphs)))

    def clear(self) -> None:
        self._selected.clear()
        self._last_touched = None

    def confirm(self) -> Optional[str]:
        """Return the selected paragraphs joined by spaces and reset the selection.

        Returns None (and changes nothing) when nothing is selected.
        """
        if not self._selected:
            return None
        content = " ".join(self._paragraphs[i] for i in sorted(self._selected))
        self.clear()
        return content

"""Tests for typen.core.selection – paragraph selection gestures."""

from __future__ import annotations

import pytest

from typen.core.selection import SelectionModel

PARAGRAPHS = ["zero", "one", "two", "three", "four", "five"]


@pytest.fixture()
def model() -> SelectionModel:
    return SelectionModel(PARAGRAPHS)


# ---------------------------------------------------------------------------
# toggle
# ---------------------------------------------------------------------------

class TestToggle:
    def test_plain_toggle_selects(self, model: SelectionModel):
        model.toggle(2)
        assert model.selected == [2]
        assert model.last_touched == 2

    def test_plain_toggle_twice_deselects(self, model: SelectionModel):
        model.toggle(2)
        model.toggle(2)
        assert model.selected == []
        assert model.last_touched == 2

    def test_range_gesture_from_anchor(self, model: SelectionModel):
        model.toggle(1)
        model.toggle(4, range_gesture=True)
        assert model.selected == [1, 2, 3, 4]
        assert model.last_touched == 4

    def test_plain_toggle_after_range_removes_single(self, model: SelectionModel):
        model.toggle(1)
        model.toggle(4, range_gesture=True)
        model.toggle(2)
        assert model.selected == [1, 3, 4]

    def test_range_gesture_backwards(self, model: SelectionModel):
        model.toggle(4)
        model.toggle(1, range_gesture=True)
        assert model.selected == [1, 2, 3, 4]

    def test_range_gesture_without_anchor_acts_as_toggle(self, model: SelectionModel):
        model.toggle(3, range_gesture=True)
        assert model.selected == [3]
        assert model.last_touched == 3

    def test_range_gesture_unions_with_existing(self, model: SelectionModel):
        model.toggle(5)
        model.toggle(0)
        model.toggle(2, range_gesture=True)
        assert model.selected == [0, 1, 2, 5]

    def test_range_gesture_never_deselects(self, model: SelectionModel):
        model.toggle(2)
        model.toggle(2, range_gesture=True)
        assert model.selected == [2]

    @pytest.mark.parametrize("index", [-1, 6, 100])
    def test_out_of_range_index(self, model: SelectionModel, index: int):
        with pytest.raises(IndexError):
            model.toggle(index)
        assert model.selected == []


# ---------------------------------------------------------------------------
# apply_range
# ---------------------------------------------------------------------------

class TestApplyRange:
    def test_one_indexed_inclusive(self, model: SelectionModel):
        model.apply_range(2, 5)
        assert model.selected == [1, 2, 3, 4]

    def test_order_independent(self):
        a = SelectionModel(PARAGRAPHS)
        b = SelectionModel(PARAGRAPHS)
        a.apply_range(5, 2)
        b.apply_range(2, 5)
        assert a.selected == b.selected

    def test_clamped_high(self, model: SelectionModel):
        model.apply_range(5, 99)
        assert model.selected == [4, 5]

    def test_clamped_low(self, model: SelectionModel):
        model.apply_range(-3, 0)
        assert model.selected == [0]

    def test_unions_with_existing(self, model: SelectionModel):
        model.toggle(5)
        model.apply_range(1, 2)
        assert model.selected == [0, 1, 5]

    def test_does_not_move_anchor(self, model: SelectionModel):
        model.toggle(3)
        model.apply_range(1, 1)
        assert model.last_touched == 3

    def test_empty_paragraphs_noop(self):
        m = SelectionModel([])
        m.apply_range(1, 3)
        assert m.selected == []


# ---------------------------------------------------------------------------
# select_all / clear
# ---------------------------------------------------------------------------

class TestSelectAllClear:
    def test_select_all(self, model: SelectionModel):
        model.select_all()
        assert model.selected == list(range(len(PARAGRAPHS)))

    def test_clear_resets_anchor(self, model: SelectionModel):
        model.toggle(1)
        model.clear()
        assert model.selected == []
        assert model.last_touched is None

    def test_range_gesture_after_clear_has_no_anchor(self, model: SelectionModel):
        model.toggle(1)
        model.clear()
        model.toggle(4, range_gesture=True)
        assert model.selected == [4]


# ---------------------------------------------------------------------------
# confirm
# ---------------------------------------------------------------------------

class TestConfirm:
    def test_empty_selection_returns_none(self, model: SelectionModel):
        assert model.can_confirm is False
        assert model.confirm() is None

    def test_joins_in_document_order(self, model: SelectionModel):
        model.toggle(2)
        model.toggle(0)
        model.toggle(1)
        assert model.confirm() == "zero one two"

    def test_non_contiguous(self, model: SelectionModel):
        model.toggle(5)
        model.toggle(1)
        assert model.confirm() == "one five"

    def test_selection_discarded_after_confirm(self, model: SelectionModel):
        model.toggle(3)
        model.confirm()
        assert model.selected == []
        assert model.last_touched is None
        assert model.can_confirm is False

    def test_can_confirm(self, model: SelectionModel):
        model.toggle(0)
        assert model.can_confirm is True

    def test_paragraphs_copy(self, model: SelectionModel):
        paragraphs = model.paragraphs
        paragraphs.append("extra")
        assert model.paragraphs == PARAGRAPHS

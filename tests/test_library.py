"""Tests for typen.core.library – text records and library persistence."""

from __future__ import annotations

import json
import time
from pathlib import Path

import pytest

from typen.core.errors import EmptyContentError
from typen.core.library import LibraryStore, SourceText, create_text_record
from typen.core.session import PracticeResult


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def library_file(tmp_path: Path) -> Path:
    """Library path in a not-yet-existing subdirectory so tests don't touch ~/.typen."""
    return tmp_path / "data" / "library.json"


@pytest.fixture()
def store(library_file: Path) -> LibraryStore:
    return LibraryStore(library_file)


def make_result(text_id: str, wpm: int = 40, accuracy: int = 95, result_id: str = "r1") -> PracticeResult:
    return PracticeResult(
        id=result_id,
        text_id=text_id,
        wpm=wpm,
        accuracy=accuracy,
        duration=30,
        timestamp=1_700_000_000.0,
    )


# ---------------------------------------------------------------------------
# create_text_record
# ---------------------------------------------------------------------------

class TestCreateTextRecord:
    def test_cleans_content(self):
        text = create_text_record("Notes", "• First line here\n• Second line", min_length=5)
        assert text.title == "Notes"
        assert text.content == "First line here\n\nSecond line"
        assert text.id

    def test_default_title(self):
        text = create_text_record("   ", "Some practice content", min_length=5)
        assert text.title.startswith("Session ")

    def test_title_stripped(self):
        text = create_text_record("  Essay  ", "Some practice content", min_length=5)
        assert text.title == "Essay"

    def test_too_short_after_cleaning(self):
        with pytest.raises(EmptyContentError):
            create_text_record("x", "•• hi ©", min_length=10)

    def test_min_length_boundary(self):
        assert create_text_record("x", "hello world", min_length=11).content == "hello world"
        with pytest.raises(EmptyContentError):
            create_text_record("x", "hello world", min_length=12)

    def test_empty_content(self):
        with pytest.raises(EmptyContentError):
            create_text_record("x", "", min_length=1)

    def test_unique_ids(self):
        a = create_text_record("a", "content one here", min_length=5)
        b = create_text_record("a", "content one here", min_length=5)
        assert a.id != b.id

    def test_created_at(self):
        before = time.time()
        text = create_text_record("a", "content one here", min_length=5)
        assert before <= text.created_at <= time.time()


# ---------------------------------------------------------------------------
# LibraryStore – fresh state
# ---------------------------------------------------------------------------

class TestLibraryStoreFresh:
    def test_no_file_is_empty(self, store: LibraryStore):
        assert store.all() == []
        assert store.is_empty()
        assert store.is_new

    def test_unknown_text(self, store: LibraryStore):
        assert store.get("nope") is None
        assert store.results_for("nope") == []
        assert store.best_result("nope") is None

    def test_remove_unknown(self, store: LibraryStore):
        assert store.remove("nope") is False


# ---------------------------------------------------------------------------
# LibraryStore – texts
# ---------------------------------------------------------------------------

class TestLibraryStoreTexts:
    def test_add_creates_file(self, store: LibraryStore, library_file: Path):
        store.add(SourceText.create("A", "alpha text"))
        assert library_file.exists()

    def test_newest_first(self, store: LibraryStore):
        first = SourceText.create("First", "first text")
        second = SourceText.create("Second", "second text")
        store.add(first)
        store.add(second)
        assert [t.id for t in store.all()] == [second.id, first.id]

    def test_get(self, store: LibraryStore):
        text = SourceText.create("A", "alpha text")
        store.add(text)
        assert store.get(text.id) == text

    def test_all_returns_copy(self, store: LibraryStore):
        store.add(SourceText.create("A", "alpha text"))
        store.all().clear()
        assert len(store.all()) == 1

    def test_remove_drops_text_and_results(self, store: LibraryStore):
        keep = SourceText.create("Keep", "keep text")
        drop = SourceText.create("Drop", "drop text")
        store.add(keep)
        store.add(drop)
        store.record_result(make_result(drop.id, result_id="r1"))
        store.record_result(make_result(keep.id, result_id="r2"))
        assert store.remove(drop.id) is True
        assert store.get(drop.id) is None
        assert store.results_for(drop.id) == []
        assert len(store.results_for(keep.id)) == 1


# ---------------------------------------------------------------------------
# LibraryStore – results
# ---------------------------------------------------------------------------

class TestLibraryStoreResults:
    def test_record_and_list(self, store: LibraryStore):
        r = make_result("t1")
        store.record_result(r)
        assert store.results_for("t1") == [r]

    def test_best_by_wpm_then_accuracy(self, store: LibraryStore):
        store.record_result(make_result("t1", wpm=30, accuracy=100, result_id="a"))
        store.record_result(make_result("t1", wpm=45, accuracy=90, result_id="b"))
        store.record_result(make_result("t1", wpm=45, accuracy=97, result_id="c"))
        assert store.best_result("t1").id == "c"


# ---------------------------------------------------------------------------
# LibraryStore – persistence
# ---------------------------------------------------------------------------

class TestLibraryStorePersistence:
    def test_round_trip(self, library_file: Path):
        store = LibraryStore(library_file)
        text = SourceText.create("A", "alpha text")
        store.add(text)
        store.record_result(make_result(text.id))

        reloaded = LibraryStore(library_file)
        assert reloaded.all() == [text]
        assert reloaded.results_for(text.id) == [make_result(text.id)]
        assert not reloaded.is_new

    def test_file_format(self, store: LibraryStore, library_file: Path):
        store.add(SourceText("id1", "A", "alpha", 1.0))
        data = json.loads(library_file.read_text(encoding="utf-8"))
        assert data == {
            "texts": [{"id": "id1", "title": "A", "content": "alpha", "created_at": 1.0}],
            "results": [],
        }

    def test_corrupted_json(self, library_file: Path, caplog: pytest.LogCaptureFixture):
        library_file.parent.mkdir(parents=True)
        library_file.write_text("{not json", encoding="utf-8")
        store = LibraryStore(library_file)
        assert store.all() == []
        assert "Could not load library" in caplog.text

    def test_non_dict_payload(self, library_file: Path):
        library_file.parent.mkdir(parents=True)
        library_file.write_text("[1, 2, 3]", encoding="utf-8")
        assert LibraryStore(library_file).all() == []

    def test_malformed_records_skipped(self, library_file: Path):
        library_file.parent.mkdir(parents=True)
        library_file.write_text(
            json.dumps(
                {
                    "texts": [
                        {"id": "ok", "title": "Fine", "content": "fine text", "created_at": 2.0},
                        {"title": "missing id"},
                    ],
                    "results": [
                        {"id": "r", "text_id": "ok", "wpm": "fast"},
                    ],
                }
            ),
            encoding="utf-8",
        )
        store = LibraryStore(library_file)
        assert [t.id for t in store.all()] == ["ok"]
        assert store.results_for("ok") == []

    def test_missing_created_at_defaults(self, library_file: Path):
        library_file.parent.mkdir(parents=True)
        library_file.write_text(
            json.dumps({"texts": [{"id": "x", "title": "X", "content": "xx"}]}),
            encoding="utf-8",
        )
        assert LibraryStore(library_file).get("x").created_at == 0.0

    def test_save_writes_current_state(self, store: LibraryStore, library_file: Path):
        store.save()
        assert json.loads(library_file.read_text(encoding="utf-8")) == {"texts": [], "results": []}

from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from typen.core.normalizer import clean_typing_text, ensure_practiceable
from typen.core.session import PracticeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceText:
    id: str
    title: str
    content: str
    created_at: float

    @classmethod
    def create(cls, title: str, content: str) -> "SourceText":
        return cls(id=uuid.uuid4().hex, title=title, content=content, created_at=time.time())


def create_text_record(title: str, raw_content: str, *, min_length: int) -> SourceText:
    """Clean pasted content into a library record, or raise EmptyContentError."""
    content = clean_typing_text(raw_content.strip() if raw_content else "")
    ensure_practiceable(content, min_length)
    title = title.strip() if title else ""
    if not title:
        title = f"Session {time.strftime('%H:%M')}"
    return SourceText.create(title, content)


class LibraryStore:
    """Ordered list of practice texts plus the results practiced on them.

    Persists to a single JSON file (``~/.typen/library.json`` by default).
    Texts are kept newest first.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._existed = file_path.exists()
        self._texts, self._results = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def is_new(self) -> bool:
        """True if there was no library file when the store was opened."""
        return not self._existed

    def all(self) -> List[SourceText]:
        return list(self._texts)

    def is_empty(self) -> bool:
        return not self._texts

    def get(self, text_id: str) -> Optional[SourceText]:
        for text in self._texts:
            if text.id == text_id:
                return text
        return None

    def add(self, text: SourceText) -> None:
        self._texts.insert(0, text)
        self._save()

    def remove(self, text_id: str) -> bool:
        """Delete a text and its results. Returns False if the id is unknown."""
        before = len(self._texts)
        self._texts = [t for t in self._texts if t.id != text_id]
        if len(self._texts) == before:
            return False
        self._results = [r for r in self._results if r.text_id != text_id]
        self._save()
        return True

    def record_result(self, result: PracticeResult) -> None:
        self._results.append(result)
        self._save()

    def results_for(self, text_id: str) -> List[PracticeResult]:
        return [r for r in self._results if r.text_id == text_id]

    def best_result(self, text_id: str) -> Optional[PracticeResult]:
        results = self.results_for(text_id)
        if not results:
            return None
        return max(results, key=lambda r: (r.wpm, r.accuracy))

    def save(self) -> None:
        """Persist current state to disk (e.g. on app exit)."""
        self._save()

    def _load(self) -> Tuple[List[SourceText], List[PracticeResult]]:
        texts: List[SourceText] = []
        results: List[PracticeResult] = []
        if not self._file_path.exists():
            return texts, results
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load library from %s: %s", self._file_path, e)
            return texts, results
        if not isinstance(payload, dict):
            logger.warning("Ignoring library file %s: unexpected format", self._file_path)
            return texts, results

        for item in payload.get("texts", []):
            try:
                texts.append(
                    SourceText(
                        id=str(item["id"]),
                        title=str(item["title"]),
                        content=str(item["content"]),
                        created_at=float(item.get("created_at", 0.0)),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed text record in %s: %s", self._file_path, e)
        for item in payload.get("results", []):
            try:
                results.append(_result_from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed result record in %s: %s", self._file_path, e)
        return texts, results

    def _save(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload: Dict[str, list] = {
            "texts": [asdict(t) for t in self._texts],
            "results": [asdict(r) for r in self._results],
        }
        try:
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save library to %s: %s", self._file_path, e)


def _result_from_dict(item: dict) -> PracticeResult:
    return PracticeResult(
        id=str(item["id"]),
        text_id=str(item["text_id"]),
        wpm=int(item["wpm"]),
        accuracy=int(item["accuracy"]),
        duration=int(item["duration"]),
        timestamp=float(item["timestamp"]),
    )

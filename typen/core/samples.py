from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import yaml

from typen.core.library import LibraryStore, SourceText
from typen.core.normalizer import clean_typing_text

logger = logging.getLogger(__name__)

SAMPLES_DIR = Path(__file__).resolve().parent.parent / "data" / "samples"


@dataclass(frozen=True)
class SampleText:
    key: str
    title: str
    content: str


def _sort_key(p: Path) -> tuple[int, str]:
    m = re.match(r"^sample(\d+)$", p.stem)
    if m:
        return (int(m.group(1)), p.stem)
    return (10**9, p.stem)


def load_samples(base_dir: Optional[Path] = None) -> List[SampleText]:
    """Load the bundled ``sample*.yaml`` texts in numeric order."""
    base_dir = base_dir or SAMPLES_DIR
    if not base_dir.exists():
        raise FileNotFoundError(f"Samples directory not found: {base_dir}")

    samples: List[SampleText] = []
    for sample_path in sorted(base_dir.glob("sample*.yaml"), key=_sort_key):
        raw = yaml.safe_load(sample_path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{sample_path.name}: expected YAML with 'title' and 'content'")
        title = raw.get("title")
        content = raw.get("content")
        if not title or not isinstance(title, str):
            raise ValueError(f"{sample_path.name}: missing or invalid 'title'")
        if content is None:
            raise ValueError(f"{sample_path.name}: missing 'content'")
        if isinstance(content, list):
            text = "\n".join(str(item) for item in content)
        else:
            text = str(content)
        cleaned = clean_typing_text(text)
        if not cleaned:
            raise ValueError(f"{sample_path.name}: 'content' has no paragraphs")
        samples.append(SampleText(key=sample_path.stem, title=title.strip(), content=cleaned))
    return samples


def seed_library(store: LibraryStore, base_dir: Optional[Path] = None) -> int:
    """Add the bundled samples to a freshly created library. Returns how many were added."""
    if not store.is_new or not store.is_empty():
        return 0
    samples = load_samples(base_dir)
    # add() prepends, so insert in reverse to keep sample1 on top.
    for sample in reversed(samples):
        store.add(SourceText.create(sample.title, sample.content))
    logger.info("Seeded library with %d sample texts", len(samples))
    return len(samples)

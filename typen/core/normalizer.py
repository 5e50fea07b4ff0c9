"""Text normalization: raw pasted or extracted content to practice paragraphs."""

from __future__ import annotations

import re
from typing import List

from typen.core.errors import EmptyContentError

# Decorative bullets that Word/WPS exports leave behind.
_DECORATIVE_RE = re.compile("[\u00B7\u2022\u25CF\u25AA\u2023\u2043\u2027\u25E6\u25AB\u25AC]")
# Anything that is not plain alphanumeric text or typing punctuation.
_DISALLOWED_RE = re.compile(r"[^a-zA-Z0-9\s.,:;!?'\"()\-\n]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(raw: str) -> List[str]:
    """Split *raw* into trimmed, whitespace-collapsed, non-empty paragraphs."""
    if not raw:
        return []
    paragraphs: List[str] = []
    for line in raw.splitlines():
        cleaned = _WHITESPACE_RE.sub(" ", line.strip())
        if cleaned:
            paragraphs.append(cleaned)
    return paragraphs


def clean_typing_text(raw: str) -> str:
    """Strip symbols that cannot be typed and lay paragraphs out one per block."""
    if not raw or not isinstance(raw, str):
        return ""
    text = _DECORATIVE_RE.sub("", raw)
    text = _DISALLOWED_RE.sub("", text)
    return "\n\n".join(normalize(text))


def build_target_text(practice_string: str) -> str:
    """Return the exact character sequence a session asks the user to type."""
    return "\n".join(normalize(practice_string))


def ensure_practiceable(text: str, min_length: int) -> List[str]:
    """Return the paragraphs of *text* or raise EmptyContentError."""
    paragraphs = normalize(text)
    if not paragraphs or len(text.strip()) < min_length:
        raise EmptyContentError("Text content is too short or unsupported.")
    return paragraphs


def word_count(paragraph: str) -> int:
    return len(paragraph.split())

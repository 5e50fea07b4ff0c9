"""Plain-text extraction from PDF/Word documents via the Gemini API."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from typen.core.config import AppConfig
from typen.core.errors import EmptyContentError, ExtractionError
from typen.core.normalizer import clean_typing_text, ensure_practiceable

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = (
    "Extract English text for typing practice. Rules: "
    "1. Keep standard punctuation (. , : ; ! ? ' \" ( ) -). "
    "2. Remove bullets and decorative symbols. "
    "3. Return ONLY the text, maintain paragraphs."
)

_MIME_BY_SUFFIX = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".doc": "application/msword",
}


def mime_type_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in _MIME_BY_SUFFIX:
        return _MIME_BY_SUFFIX[suffix]
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/pdf"


class GeminiExtractor:
    """Turns a document into cleaned practice text, or raises ExtractionError."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        temperature: float,
        min_length: int,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._min_length = min_length

    @classmethod
    def from_config(cls, config: AppConfig) -> "GeminiExtractor":
        return cls(
            config.api_key,
            model=config.extraction_model,
            temperature=config.extraction_temperature,
            min_length=config.min_content_length,
        )

    def extract(self, path: Path) -> str:
        if not self._api_key:
            raise ExtractionError(
                "Gemini API Key is missing. Set GEMINI_API_KEY or add api_key to config.yaml."
            )
        try:
            data = path.read_bytes()
        except OSError as e:
            raise ExtractionError(f"Failed to read the file: {e.strerror or e}") from e

        client = genai.Client(api_key=self._api_key)
        try:
            response = client.models.generate_content(
                model=self._model,
                contents=[
                    types.Part.from_bytes(data=data, mime_type=mime_type_for(path)),
                    EXTRACTION_PROMPT,
                ],
                config=types.GenerateContentConfig(temperature=self._temperature),
            )
        except genai_errors.APIError as e:
            logger.error("Gemini extraction failed for %s: %s", path.name, e)
            raise ExtractionError(e.message or "Failed to parse document content.") from e
        except httpx.HTTPError as e:
            logger.error("Could not reach Gemini for %s: %s", path.name, e)
            raise ExtractionError("Failed to parse document content.") from e

        cleaned = clean_typing_text(response.text or "")
        try:
            ensure_practiceable(cleaned, self._min_length)
        except EmptyContentError as e:
            raise ExtractionError("Document content is too brief for practice.") from e
        logger.info("Extracted %d characters from %s", len(cleaned), path.name)
        return cleaned

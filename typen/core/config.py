from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".typen"
# Shortest cleaned text (in characters) accepted into the library.
DEFAULT_MIN_CONTENT_LENGTH = 10
DEFAULT_EXTRACTION_MODEL = "gemini-3-flash-preview"
DEFAULT_EXTRACTION_TEMPERATURE = 0.1


@dataclass
class AppConfig:
    data_dir: Path = field(default_factory=lambda: DEFAULT_DATA_DIR)
    min_content_length: int = DEFAULT_MIN_CONTENT_LENGTH
    extraction_model: str = DEFAULT_EXTRACTION_MODEL
    extraction_temperature: float = DEFAULT_EXTRACTION_TEMPERATURE
    api_key: str = ""

    @property
    def library_path(self) -> Path:
        return self.data_dir / "library.json"


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Build the configuration from ``config.yaml`` (if any) and the environment.

    Environment variables win over the file: ``TYPEN_DATA_DIR``,
    ``TYPEN_MIN_CONTENT_LENGTH`` and ``GEMINI_API_KEY`` (or ``API_KEY``).
    """
    config = AppConfig()
    if path is None:
        path = Path(os.environ.get("TYPEN_DATA_DIR", DEFAULT_DATA_DIR)) / "config.yaml"
    if path.exists():
        _apply_file(config, path)

    data_dir = os.environ.get("TYPEN_DATA_DIR")
    if data_dir:
        config.data_dir = Path(data_dir).expanduser()
    min_length = os.environ.get("TYPEN_MIN_CONTENT_LENGTH")
    if min_length:
        try:
            config.min_content_length = int(min_length)
        except ValueError:
            raise ValueError(f"TYPEN_MIN_CONTENT_LENGTH must be an integer, got {min_length!r}")
    api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
    if api_key:
        config.api_key = api_key
    return config


def _apply_file(config: AppConfig, path: Path) -> None:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    if "data_dir" in raw:
        if not isinstance(raw["data_dir"], str):
            raise ValueError(f"{path.name}: 'data_dir' must be a string")
        config.data_dir = Path(raw["data_dir"]).expanduser()
    if "min_content_length" in raw:
        value = raw["min_content_length"]
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            raise ValueError(f"{path.name}: 'min_content_length' must be a positive integer")
        config.min_content_length = value
    if "extraction_model" in raw:
        if not isinstance(raw["extraction_model"], str) or not raw["extraction_model"].strip():
            raise ValueError(f"{path.name}: 'extraction_model' must be a non-empty string")
        config.extraction_model = raw["extraction_model"].strip()
    if "extraction_temperature" in raw:
        value = raw["extraction_temperature"]
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ValueError(f"{path.name}: 'extraction_temperature' must be a number")
        config.extraction_temperature = float(value)
    if "api_key" in raw:
        config.api_key = str(raw["api_key"] or "")
    logger.info("Loaded configuration from %s", path)

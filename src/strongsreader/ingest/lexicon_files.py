"""Lexicon JSON file loading.

Reads the Greek and Hebrew Strong's dictionaries from static JSON files
(code -> entry objects) and wires them into a ``LexiconStore``. Files that
need repair are loaded through ``sanitize_json`` with a warning.

Fail fast if:
- A lexicon file is missing
- A file is not valid JSON even after repair
- The top-level value is not an object
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from strongsreader.config import Settings
from strongsreader.ingest.sanitize import JSONRepairError, loads_lenient
from strongsreader.lexicon.store import DictionaryLoader, LexiconStore

logger = logging.getLogger(__name__)


class LexiconLoadError(Exception):
    """Raised when a lexicon dictionary cannot be loaded."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load lexicon {path}: {reason}")


class MissingLexiconError(LexiconLoadError):
    """Raised when a lexicon file does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, "file not found")


def load_lexicon_file(path: Path) -> dict[str, dict[str, Any]]:
    """Read one raw lexicon dictionary.

    Args:
        path: JSON file mapping reference codes to raw entries

    Returns:
        The raw dictionary, keys as they appear in the file

    Raises:
        MissingLexiconError: If the file does not exist
        LexiconLoadError: If the content cannot be parsed into an object
    """
    path = Path(path)
    if not path.is_file():
        raise MissingLexiconError(path)

    raw = path.read_text(encoding="utf-8")
    try:
        data, repaired = loads_lenient(raw)
    except (json.JSONDecodeError, JSONRepairError) as e:
        raise LexiconLoadError(path, f"invalid JSON ({e})") from e

    if repaired:
        logger.warning(f"Lexicon file {path.name} needed JSON repair")

    if not isinstance(data, dict):
        raise LexiconLoadError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )

    return data


def file_loader(path: Path) -> DictionaryLoader:
    """Build a store loader that reads ``path`` when first called."""

    def load() -> dict[str, dict[str, Any]]:
        return load_lexicon_file(path)

    return load


def store_from_settings(settings: Settings) -> LexiconStore:
    """Create a store backed by the lexicon files named in ``settings``."""
    return LexiconStore(
        greek=file_loader(settings.greek_lexicon_path),
        hebrew=file_loader(settings.hebrew_lexicon_path),
    )

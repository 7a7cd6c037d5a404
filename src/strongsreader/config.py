"""Configuration settings for the Strong's reader."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path


@dataclass
class Settings:
    """Application settings."""

    # Data locations
    data_dir: Path = field(default_factory=lambda: Path.home() / ".strongsreader")
    greek_lexicon_file: str = "strongs-greek.json"
    hebrew_lexicon_file: str = "strongs-hebrew.json"

    # Verse building
    default_translation: str = "KJV"

    @property
    def greek_lexicon_path(self) -> Path:
        return self.data_dir / self.greek_lexicon_file

    @property
    def hebrew_lexicon_path(self) -> Path:
        return self.data_dir / self.hebrew_lexicon_file

    def with_data_dir(self, data_dir: str | Path | None) -> "Settings":
        """Return a copy rooted at another data directory (None keeps this one)."""
        if data_dir is None:
            return self
        return replace(self, data_dir=Path(data_dir))


# Reference code prefixes, one per language family
GREEK_PREFIX = "G"
HEBREW_PREFIX = "H"
REFERENCE_PREFIXES = (GREEK_PREFIX, HEBREW_PREFIX)

LANGUAGE_NAMES = {
    GREEK_PREFIX: "greek",
    HEBREW_PREFIX: "hebrew",
}

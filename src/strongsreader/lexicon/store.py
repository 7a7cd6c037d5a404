"""Raw lexicon dictionary holder.

A ``LexiconStore`` owns the two raw dictionaries (Greek and Hebrew) for
its lifetime. Each dictionary is produced by an injected loader the first
time it is needed and is never reloaded or mutated afterwards. Concurrent
first lookups wait on the same load instead of starting their own.

Loader failures propagate unchanged and leave the dictionary unloaded.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Callable, Mapping

from strongsreader.config import GREEK_PREFIX, HEBREW_PREFIX, LANGUAGE_NAMES
from strongsreader.lexicon.codes import normalize_code

logger = logging.getLogger(__name__)

RawEntry = Mapping[str, Any]
RawDictionary = Mapping[str, RawEntry]
DictionaryLoader = Callable[[], RawDictionary]


def index_dictionary(raw: RawDictionary) -> Mapping[str, RawEntry]:
    """Re-key a raw dictionary by normalized code.

    The first entry wins when two raw keys normalize to the same code.
    """
    index: dict[str, RawEntry] = {}
    for key, entry in raw.items():
        code = normalize_code(key)
        if code in index:
            logger.debug(f"Duplicate lexicon key {key!r} ignored (normalizes to {code})")
            continue
        index[code] = entry
    return MappingProxyType(index)


class LexiconStore:
    """Load-once holder for the Greek and Hebrew raw dictionaries."""

    def __init__(self, greek: DictionaryLoader, hebrew: DictionaryLoader):
        """Initialize with one loader per language.

        Args:
            greek: Returns the raw Greek dictionary (code -> entry)
            hebrew: Returns the raw Hebrew dictionary (code -> entry)
        """
        self._loaders: dict[str, DictionaryLoader] = {
            GREEK_PREFIX: greek,
            HEBREW_PREFIX: hebrew,
        }
        self._loaded: dict[str, Mapping[str, RawEntry]] = {}
        self._locks = {prefix: threading.Lock() for prefix in self._loaders}
        self._load_counts = {prefix: 0 for prefix in self._loaders}

    @classmethod
    def from_mappings(
        cls,
        greek: RawDictionary | None = None,
        hebrew: RawDictionary | None = None,
    ) -> "LexiconStore":
        """Wrap dictionaries that are already in memory."""
        greek_data = greek if greek is not None else {}
        hebrew_data = hebrew if hebrew is not None else {}
        return cls(greek=lambda: greek_data, hebrew=lambda: hebrew_data)

    def dictionary(self, prefix: str) -> Mapping[str, RawEntry]:
        """Return the dictionary for a language prefix, loading it if needed.

        Raises:
            KeyError: If the prefix names no known language
        """
        loaded = self._loaded.get(prefix)
        if loaded is not None:
            return loaded

        lock = self._locks[prefix]
        with lock:
            loaded = self._loaded.get(prefix)
            if loaded is not None:
                return loaded

            language = LANGUAGE_NAMES[prefix]
            logger.debug(f"Loading {language} lexicon")
            self._load_counts[prefix] += 1
            raw = self._loaders[prefix]()
            loaded = index_dictionary(raw)
            self._loaded[prefix] = loaded
            logger.info(f"Loaded {language} lexicon: {len(loaded)} entries")
            return loaded

    def lookup(self, code: str) -> RawEntry | None:
        """Return the raw entry for a normalized code, or None.

        The code's first character picks the dictionary; only that one
        is loaded or consulted.
        """
        if not code or code[0] not in self._loaders:
            return None
        return self.dictionary(code[0]).get(code)

    def is_loaded(self, prefix: str) -> bool:
        return prefix in self._loaded

    def load_count(self, prefix: str) -> int:
        """Number of times the loader for ``prefix`` has been invoked."""
        return self._load_counts[prefix]

    def preload(self) -> None:
        """Load both dictionaries now instead of on first lookup."""
        for prefix in self._loaders:
            self.dictionary(prefix)

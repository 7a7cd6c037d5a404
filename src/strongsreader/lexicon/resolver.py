"""Strong's number resolution.

Maps a reference code to a ``NormalizedDefinition`` using the raw entry
held by a ``LexiconStore``. Unknown prefixes, empty codes and missing
entries all come back as None; those are ordinary outcomes, not errors.
Only failures raised while the store loads a dictionary escape.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from strongsreader.lexicon.codes import code_prefix, normalize_code
from strongsreader.lexicon.models import (
    DefinitionSelection,
    NormalizedDefinition,
    SelectionOutcome,
)
from strongsreader.lexicon.store import LexiconStore

# Public field -> raw keys, first present wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "lemma": ("lemma",),
    "transliteration": ("translit", "xlit", "transliteration"),
    "pronunciation": ("pronunciation", "pron", "pronounce"),
    "part_of_speech": ("pos", "part", "partOfSpeech"),
    "definition": ("strongs_def", "definition"),
    "usage": ("kjv_def", "usage"),
    "derivation": ("derivation", "strongs_derivation"),
}


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def map_raw_entry(number: str, raw: Mapping[str, Any]) -> NormalizedDefinition:
    """Rename raw entry fields to the public definition shape.

    Absent fields stay None; nothing is filled in from other fields.
    """
    values = {name: _first_present(raw, keys) for name, keys in FIELD_ALIASES.items()}
    return NormalizedDefinition(number=number, **values)


class LexiconResolver:
    """Resolves reference codes against a ``LexiconStore``."""

    def __init__(self, store: LexiconStore):
        self._store = store

    @property
    def store(self) -> LexiconStore:
        return self._store

    def resolve(self, code: str) -> NormalizedDefinition | None:
        """Look up a reference code.

        Args:
            code: Code such as ``"G1615"``; surrounding whitespace and
                case are ignored

        Returns:
            NormalizedDefinition, or None when the code is empty, has an
            unknown prefix, or is absent from its dictionary
        """
        number = normalize_code(code)
        prefix = code_prefix(number)
        if prefix is None:
            return None

        raw = self._store.lookup(number)
        if raw is None:
            return None
        return map_raw_entry(number, raw)

    def filter_resolvable(self, codes: Iterable[str]) -> list[str]:
        """Return the codes that resolve, in input order."""
        return [code for code in codes if self.resolve(code) is not None]

    def select(self, codes: Iterable[str], requested: str) -> DefinitionSelection:
        """Pick the definition to show when a token carries several codes.

        The requested code wins when it resolves. Otherwise the first
        resolvable code in attachment order is shown instead, and the
        selection says so. When nothing resolves the outcome is
        UNAVAILABLE.
        """
        requested_number = normalize_code(requested)

        definition = self.resolve(requested_number)
        if definition is not None:
            return DefinitionSelection(
                requested=requested_number,
                outcome=SelectionOutcome.EXACT,
                shown_code=requested_number,
                definition=definition,
            )

        for code in codes:
            number = normalize_code(code)
            if number == requested_number:
                continue
            definition = self.resolve(number)
            if definition is not None:
                return DefinitionSelection(
                    requested=requested_number,
                    outcome=SelectionOutcome.SUBSTITUTED,
                    shown_code=number,
                    definition=definition,
                )

        return DefinitionSelection(
            requested=requested_number,
            outcome=SelectionOutcome.UNAVAILABLE,
        )

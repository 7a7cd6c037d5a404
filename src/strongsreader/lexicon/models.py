"""Lexicon result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class NormalizedDefinition:
    """A lexicon entry under stable public field names.

    Only ``number`` is guaranteed. Any other field is None when the raw
    entry did not carry it.
    """

    number: str
    """The queried reference code, trimmed and uppercased."""

    lemma: str | None = None
    transliteration: str | None = None
    pronunciation: str | None = None
    part_of_speech: str | None = None
    definition: str | None = None
    usage: str | None = None
    derivation: str | None = None

    def to_dict(self) -> dict:
        """Serialize for JSON output, omitting absent fields."""
        fields = {
            "number": self.number,
            "lemma": self.lemma,
            "transliteration": self.transliteration,
            "pronunciation": self.pronunciation,
            "partOfSpeech": self.part_of_speech,
            "definition": self.definition,
            "usage": self.usage,
            "derivation": self.derivation,
        }
        return {k: v for k, v in fields.items() if v is not None}


class SelectionOutcome(str, Enum):
    """How a definition request on a multi-code token was satisfied."""

    EXACT = "exact"
    SUBSTITUTED = "substituted"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class DefinitionSelection:
    """Result of picking one code among the codes attached to a token."""

    requested: str
    outcome: SelectionOutcome
    shown_code: str | None = None
    definition: NormalizedDefinition | None = None

    @property
    def substituted(self) -> bool:
        return self.outcome is SelectionOutcome.SUBSTITUTED

    @property
    def available(self) -> bool:
        return self.outcome is not SelectionOutcome.UNAVAILABLE

    def to_dict(self) -> dict:
        return {
            "requested": self.requested,
            "outcome": self.outcome.value,
            "shownCode": self.shown_code,
            "definition": self.definition.to_dict() if self.definition else None,
        }

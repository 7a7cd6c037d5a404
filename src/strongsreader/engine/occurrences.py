"""Strong's number occurrence search.

Scans verse records for tokens carrying a given reference code, the way
the reader's concordance panel lists every place a word appears.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from strongsreader.ingest.verses import VerseRecord, tokens_for_verse
from strongsreader.lexicon.codes import normalize_code
from strongsreader.parsing import Token


@dataclass(frozen=True)
class Occurrence:
    """One token carrying the searched code."""

    verse_id: str
    reference: str
    verse_text: str
    match_text: str
    book: str
    chapter: int
    verse: int

    def to_dict(self) -> dict:
        return {
            "verseId": self.verse_id,
            "reference": self.reference,
            "verseText": self.verse_text,
            "matchText": self.match_text,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
        }


def token_has_code(token: Token, code: str) -> bool:
    """Check a token for a code, ignoring case and surrounding whitespace."""
    wanted = normalize_code(code)
    return any(normalize_code(c) == wanted for c in token.reference_codes)


def find_occurrences(records: Iterable[VerseRecord], code: str) -> list[Occurrence]:
    """List every token carrying ``code``, in verse then token order."""
    occurrences = []
    for record in records:
        for token in tokens_for_verse(record):
            if token_has_code(token, code):
                occurrences.append(
                    Occurrence(
                        verse_id=record.id,
                        reference=record.reference,
                        verse_text=record.text,
                        match_text=token.text,
                        book=record.book,
                        chapter=record.chapter,
                        verse=record.verse,
                    )
                )
    return occurrences

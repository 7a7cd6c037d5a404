"""Verse records built from tagged scripture text.

A verse record keeps the clean display text next to the tokens produced
from the tagged source, so readers can render word by word without
re-parsing. Tagged KJV book dumps use this layout:

    {"Gen": {"Gen|1": {"Gen|1|1": {"en": "In the beginning[H7225] ..."}}}}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

from strongsreader.ingest.sanitize import loads_lenient
from strongsreader.parsing import Token, extract_reference_codes, strip_tags, tokenize

logger = logging.getLogger(__name__)


class VerseFileError(Exception):
    """Raised when a book dump or verse file cannot be read into records."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read verses from {path}: {reason}")

BOOK_CODES = {
    "Gen": "Genesis",
    "Exo": "Exodus",
    "Lev": "Leviticus",
    "Num": "Numbers",
    "Deu": "Deuteronomy",
    "Jos": "Joshua",
    "Jdg": "Judges",
    "Rut": "Ruth",
    "1Sa": "1 Samuel",
    "2Sa": "2 Samuel",
    "1Ki": "1 Kings",
    "2Ki": "2 Kings",
    "1Ch": "1 Chronicles",
    "2Ch": "2 Chronicles",
    "Ezr": "Ezra",
    "Neh": "Nehemiah",
    "Est": "Esther",
    "Job": "Job",
    "Psa": "Psalms",
    "Pro": "Proverbs",
    "Ecc": "Ecclesiastes",
    "Sng": "Song of Solomon",
    "Isa": "Isaiah",
    "Jer": "Jeremiah",
    "Lam": "Lamentations",
    "Eze": "Ezekiel",
    "Dan": "Daniel",
    "Hos": "Hosea",
    "Jol": "Joel",
    "Amo": "Amos",
    "Oba": "Obadiah",
    "Jon": "Jonah",
    "Mic": "Micah",
    "Nah": "Nahum",
    "Hab": "Habakkuk",
    "Zep": "Zephaniah",
    "Hag": "Haggai",
    "Zec": "Zechariah",
    "Mal": "Malachi",
    "Mat": "Matthew",
    "Mrk": "Mark",
    "Luk": "Luke",
    "Jhn": "John",
    "Act": "Acts",
    "Rom": "Romans",
    "1Co": "1 Corinthians",
    "2Co": "2 Corinthians",
    "Gal": "Galatians",
    "Eph": "Ephesians",
    "Php": "Philippians",
    "Col": "Colossians",
    "1Th": "1 Thessalonians",
    "2Th": "2 Thessalonians",
    "1Ti": "1 Timothy",
    "2Ti": "2 Timothy",
    "Tit": "Titus",
    "Phm": "Philemon",
    "Heb": "Hebrews",
    "Jas": "James",
    "1Pe": "1 Peter",
    "2Pe": "2 Peter",
    "1Jo": "1 John",
    "2Jo": "2 John",
    "3Jo": "3 John",
    "Jde": "Jude",
    "Rev": "Revelation",
}


@dataclass
class VerseRecord:
    """A single verse with optional token-level annotation."""

    id: str  # "john-3-16-kjv"
    book: str
    chapter: int
    verse: int
    text: str  # clean display text, tags removed
    translation: str = "KJV"
    reference_codes: list[str] = field(default_factory=list)
    tokens: list[Token] = field(default_factory=list)

    @property
    def reference(self) -> str:
        return f"{self.book} {self.chapter}:{self.verse}"

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        result: dict[str, Any] = {
            "id": self.id,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text,
            "translation": self.translation,
        }
        if self.reference_codes:
            result["strongsNumbers"] = list(self.reference_codes)
        if self.tokens:
            result["tokens"] = [t.to_dict() for t in self.tokens]
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VerseRecord":
        """Create from a serialized verse (either token shape accepted)."""
        return cls(
            id=data["id"],
            book=data["book"],
            chapter=int(data["chapter"]),
            verse=int(data["verse"]),
            text=data.get("text", ""),
            translation=data.get("translation", "KJV"),
            reference_codes=list(data.get("strongsNumbers") or []),
            tokens=[Token.from_dict(t) for t in data.get("tokens") or []],
        )


def slugify(name: str) -> str:
    return "-".join(name.lower().split())


def make_verse_id(book: str, chapter: int, verse: int, translation: str = "KJV") -> str:
    """Build the verse id used by the reader (``"1 John", 3, 16`` -> ``1-john-3-16-kjv``)."""
    return f"{slugify(book)}-{chapter}-{verse}-{translation.lower()}"


def clean_verse_text(tagged: str) -> str:
    """Remove tags and collapse whitespace runs to single spaces."""
    return " ".join(strip_tags(tagged).split())


def build_verse_record(
    book: str,
    chapter: int,
    verse: int,
    tagged_text: str,
    translation: str = "KJV",
) -> VerseRecord:
    """Build a record from tagged source text.

    Tokens and reference codes are only attached when the verse carries
    at least one tag; untagged verses are tokenized on demand instead.
    """
    codes = extract_reference_codes(tagged_text)
    record = VerseRecord(
        id=make_verse_id(book, chapter, verse, translation),
        book=book,
        chapter=chapter,
        verse=verse,
        text=clean_verse_text(tagged_text),
        translation=translation,
    )
    if codes:
        record.reference_codes = codes
        record.tokens = tokenize(tagged_text)
    return record


def _key_number(key: str, index: int) -> int | None:
    parts = key.split("|")
    if len(parts) <= index:
        return None
    try:
        return int(parts[index])
    except ValueError:
        return None


def parse_tagged_book(
    data: Mapping[str, Any],
    display_name: str | None = None,
    translation: str = "KJV",
) -> list[VerseRecord]:
    """Convert a tagged book dump into verse records.

    Args:
        data: Parsed book JSON keyed by book code, then ``"Gen|1"``
            chapter keys, then ``"Gen|1|1"`` verse keys
        display_name: Book name to use; defaults to the BOOK_CODES entry
            for the book code
        translation: Translation label for ids and records

    Returns:
        Records in file order

    Raises:
        ValueError: If the layout is not a book object of chapter objects
    """
    if not data:
        return []
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a book object, got {type(data).__name__}")

    book_code = next(iter(data))
    book = display_name or BOOK_CODES.get(book_code, book_code)
    chapters = data[book_code]
    if not isinstance(chapters, Mapping):
        raise ValueError(f"book {book_code!r} holds no chapters")

    records: list[VerseRecord] = []
    for chapter_key, verses in chapters.items():
        if chapter_key == book_code:
            continue
        chapter = _key_number(chapter_key, 1)
        if chapter is None or not isinstance(verses, Mapping):
            logger.warning(f"Skipping malformed chapter key {chapter_key!r} in {book}")
            continue

        for verse_key, verse_data in verses.items():
            verse = _key_number(verse_key, 2)
            if verse is None:
                logger.warning(f"Skipping malformed verse key {verse_key!r} in {book}")
                continue
            tagged = verse_data.get("en", "") if isinstance(verse_data, Mapping) else ""
            records.append(
                build_verse_record(book, chapter, verse, tagged, translation)
            )

    tagged_count = sum(1 for r in records if r.reference_codes)
    logger.info(f"{book}: {tagged_count}/{len(records)} verses carry Strong's tags")
    return records


def load_tagged_book_file(
    path: Path, display_name: str | None = None, translation: str = "KJV"
) -> list[VerseRecord]:
    """Read a tagged book dump from disk, repairing malformed JSON.

    Raises:
        VerseFileError: If the file is not a readable book dump
    """
    path = Path(path)
    try:
        data, repaired = loads_lenient(path.read_text(encoding="utf-8"))
        if repaired:
            logger.warning(f"Book file {path.name} needed JSON repair")
        return parse_tagged_book(
            data, display_name=display_name, translation=translation
        )
    except ValueError as e:
        raise VerseFileError(path, str(e)) from e


def load_verse_file(path: Path) -> list[VerseRecord]:
    """Read a JSON list of serialized verse records.

    Raises:
        VerseFileError: If the file is not a list of verse objects
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as e:
        raise VerseFileError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise VerseFileError(
            path, f"expected a list of verses, got {type(data).__name__}"
        )

    records = []
    for index, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise VerseFileError(path, f"entry {index} is not an object")
        try:
            records.append(VerseRecord.from_dict(item))
        except KeyError as e:
            raise VerseFileError(path, f"entry {index} is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise VerseFileError(path, f"entry {index}: {e}") from e
    return records


def dump_verse_file(records: Iterable[VerseRecord], path: Path) -> None:
    """Write verse records as a JSON list."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [r.to_dict() for r in records]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


def tokens_for_verse(record: VerseRecord) -> list[Token]:
    """Return a verse's tokens, tokenizing the plain text when none are stored."""
    if record.tokens:
        return list(record.tokens)
    return tokenize(record.text)

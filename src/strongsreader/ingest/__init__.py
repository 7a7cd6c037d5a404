"""Loading of lexicon and verse data produced by the acquisition scripts."""

from strongsreader.ingest.lexicon_files import (
    LexiconLoadError,
    MissingLexiconError,
    file_loader,
    load_lexicon_file,
    store_from_settings,
)
from strongsreader.ingest.sanitize import JSONRepairError, loads_lenient, sanitize_json
from strongsreader.ingest.verses import (
    BOOK_CODES,
    VerseFileError,
    VerseRecord,
    build_verse_record,
    clean_verse_text,
    load_tagged_book_file,
    load_verse_file,
    make_verse_id,
    parse_tagged_book,
    tokens_for_verse,
)

__all__ = [
    "BOOK_CODES",
    "JSONRepairError",
    "LexiconLoadError",
    "MissingLexiconError",
    "VerseFileError",
    "VerseRecord",
    "build_verse_record",
    "clean_verse_text",
    "file_loader",
    "load_lexicon_file",
    "load_tagged_book_file",
    "load_verse_file",
    "loads_lenient",
    "make_verse_id",
    "parse_tagged_book",
    "sanitize_json",
    "store_from_settings",
    "tokens_for_verse",
]

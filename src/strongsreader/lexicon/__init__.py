"""Strong's lexicon lookup.

Provides:
- LexiconStore: load-once holder for the raw Greek and Hebrew dictionaries
- LexiconResolver: code -> NormalizedDefinition, plus sibling fallback
- normalize_code: shared trim/uppercase rule for reference codes
"""

from strongsreader.lexicon.codes import code_prefix, normalize_code
from strongsreader.lexicon.models import (
    DefinitionSelection,
    NormalizedDefinition,
    SelectionOutcome,
)
from strongsreader.lexicon.resolver import LexiconResolver, map_raw_entry
from strongsreader.lexicon.store import LexiconStore

__all__ = [
    "DefinitionSelection",
    "LexiconResolver",
    "LexiconStore",
    "NormalizedDefinition",
    "SelectionOutcome",
    "code_prefix",
    "map_raw_entry",
    "normalize_code",
]

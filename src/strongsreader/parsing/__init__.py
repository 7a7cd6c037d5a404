"""Tagged scripture text parsing."""

from strongsreader.parsing.tags import (
    TAG_PATTERN,
    extract_reference_codes,
    has_tags,
    strip_tags,
)
from strongsreader.parsing.tokens import (
    Token,
    as_code_tuple,
    split_zones,
    tokenize,
    tokenize_part,
)

__all__ = [
    "TAG_PATTERN",
    "Token",
    "as_code_tuple",
    "extract_reference_codes",
    "has_tags",
    "split_zones",
    "strip_tags",
    "tokenize",
    "tokenize_part",
]

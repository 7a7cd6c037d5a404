"""Verse tokenizer.

Turns a line of tagged scripture text into word and punctuation tokens.
Reference codes collected from a whitespace-delimited part attach to the
core word of that part only, never to the punctuation split off around it.

Example:
    >>> [t.text for t in tokenize("love[G25][G26] one another,")]
    ['love', 'one', 'another', ',']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from strongsreader.parsing.tags import extract_reference_codes, strip_tags

WORD_EXTRA_CHARS = frozenset("'")


@dataclass(frozen=True)
class Token:
    """A word or punctuation run with the reference codes attached to it."""

    text: str
    reference_codes: tuple[str, ...] = field(default_factory=tuple)
    original: str | None = None
    """Original-language text for interlinear display (pre-tokenized data only)."""

    @property
    def is_tagged(self) -> bool:
        return bool(self.reference_codes)

    def to_dict(self) -> dict:
        """Serialize for JSON output."""
        result: dict[str, Any] = {
            "text": self.text,
            "referenceCodes": list(self.reference_codes),
        }
        if self.original is not None:
            result["original"] = self.original
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Token":
        """Create from either the reader's own shape or acquisition output.

        Acquisition output uses ``english`` for the text and ``strongs`` for
        the codes, where ``strongs`` may be a single string or a list.
        """
        text = data.get("text")
        if text is None:
            text = data.get("english", "")

        codes = data.get("referenceCodes")
        if codes is None:
            codes = data.get("strongs")

        return cls(
            text=text,
            reference_codes=as_code_tuple(codes),
            original=data.get("original"),
        )


def as_code_tuple(codes: str | Iterable[str] | None) -> tuple[str, ...]:
    """Normalize a scalar-or-list reference value to a tuple."""
    if codes is None:
        return ()
    if isinstance(codes, str):
        return (codes,) if codes else ()
    return tuple(codes)


def is_word_char(char: str) -> bool:
    """Letters, digits and apostrophes make up words."""
    return char.isalnum() or char in WORD_EXTRA_CHARS


def split_zones(word: str) -> tuple[str, str, str] | None:
    """Split ``word`` into (leading, core, trailing).

    ``leading`` and ``trailing`` are non-word runs, ``core`` is the single
    run of word characters between them. Returns None when there is no
    core or when word characters appear again after the first non-word
    run following the core (``well-known``); callers then keep the part
    whole.
    """
    length = len(word)

    start = 0
    while start < length and not is_word_char(word[start]):
        start += 1
    if start == length:
        return None

    end = start
    while end < length and is_word_char(word[end]):
        end += 1

    trailing = word[end:]
    if any(is_word_char(c) for c in trailing):
        return None

    return word[:start], word[start:end], trailing


def tokenize_part(part: str) -> list[Token]:
    """Tokenize a single whitespace-free part."""
    codes = tuple(extract_reference_codes(part))
    clean = strip_tags(part)
    if not clean:
        return []

    zones = split_zones(clean)
    if zones is None:
        return [Token(text=clean, reference_codes=codes)]

    leading, core, trailing = zones
    tokens = []
    if leading:
        tokens.append(Token(text=leading))
    tokens.append(Token(text=core, reference_codes=codes))
    if trailing:
        tokens.append(Token(text=trailing))
    return tokens


def tokenize(text: str) -> list[Token]:
    """Tokenize a line of tagged text.

    Whitespace only separates parts and is never emitted. Tags are
    removed from token text; malformed tags are left as literal text.

    Args:
        text: Source text such as ``"In[G1722] the beginning[G746] was"``

    Returns:
        Tokens in source order
    """
    tokens: list[Token] = []
    for part in text.split():
        tokens.extend(tokenize_part(part))
    return tokens

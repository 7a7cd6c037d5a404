"""Inline lexicon tag handling.

Source text marks words with Strong's numbers in brackets directly after
the word, e.g. ``love[G25][G26]``. Only single-letter prefixes from
``REFERENCE_PREFIXES`` followed by digits count as tags; anything else in
brackets is ordinary text.
"""

from __future__ import annotations

import re

from strongsreader.config import REFERENCE_PREFIXES

TAG_PATTERN = re.compile(r"\[([" + "".join(REFERENCE_PREFIXES) + r"][0-9]+)\]")


def extract_reference_codes(text: str) -> list[str]:
    """Return every tagged code in ``text``, in order, duplicates kept."""
    return TAG_PATTERN.findall(text)


def strip_tags(text: str) -> str:
    """Remove all tags from ``text`` and leave everything else untouched."""
    return TAG_PATTERN.sub("", text)


def has_tags(text: str) -> bool:
    return TAG_PATTERN.search(text) is not None

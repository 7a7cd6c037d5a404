"""Reference code normalization."""

from __future__ import annotations

from strongsreader.config import REFERENCE_PREFIXES


def normalize_code(code: str) -> str:
    """Trim and uppercase a reference code (``" g1615 "`` -> ``"G1615"``)."""
    return code.strip().upper()


def code_prefix(code: str) -> str | None:
    """Return the language prefix of a normalized code, or None if unknown."""
    if code and code[0] in REFERENCE_PREFIXES:
        return code[0]
    return None

"""Repair for almost-valid JSON exports.

Some third-party scripture and lexicon dumps ship with a BOM, raw control
characters inside strings, or trailing commas. ``sanitize_json`` fixes
exactly those defects and nothing else; the result still goes through
``json.loads``.
"""

from __future__ import annotations

import json
from typing import Any

STRING_WHITESPACE = {"\n", "\r", "\t"}
CLOSING_BRACKETS = {"}", "]"}


class JSONRepairError(ValueError):
    """Raised when no JSON object can be located in the input."""

    pass


def _repair(data: str) -> str:
    """Drop control characters and trailing commas.

    String and escape state is tracked so that only structural commas are
    considered; a comma inside a string value is never touched.
    """
    out: list[str] = []
    in_string = False
    escaped = False
    pending_comma: int | None = None  # index in ``out`` of the last structural comma

    for char in data:
        if in_string:
            if escaped:
                out.append(char)
                escaped = False
            elif char == "\\":
                escaped = True
                out.append(char)
            elif char == '"':
                in_string = False
                out.append(char)
            elif char in STRING_WHITESPACE:
                out.append(" ")
            elif ord(char) >= 32:
                out.append(char)
            continue

        if char in STRING_WHITESPACE or char == " ":
            out.append(char)
            continue
        if ord(char) < 32:
            continue

        if char in CLOSING_BRACKETS and pending_comma is not None:
            del out[pending_comma]
        pending_comma = None

        if char == '"':
            in_string = True
        elif char == ",":
            pending_comma = len(out)
        out.append(char)

    return "".join(out)


def sanitize_json(raw: str) -> str:
    """Return a repaired copy of ``raw`` suitable for ``json.loads``.

    Raises:
        JSONRepairError: If the input holds no ``{...}`` span
    """
    data = raw.lstrip("\ufeff").strip()

    start = data.find("{")
    end = data.rfind("}")
    if start == -1 or end == -1 or start >= end:
        raise JSONRepairError("No JSON object found in data")

    return _repair(data[start : end + 1])


def loads_lenient(raw: str) -> tuple[Any, bool]:
    """Parse JSON, falling back to ``sanitize_json`` on failure.

    Returns:
        (parsed value, whether repair was needed)

    Raises:
        json.JSONDecodeError: If the repaired text is still invalid
        JSONRepairError: If the input holds no JSON object at all
    """
    try:
        return json.loads(raw), False
    except json.JSONDecodeError:
        return json.loads(sanitize_json(raw)), True

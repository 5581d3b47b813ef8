"""Kebab-case normalization for classname values.

Words are split on camelCase humps, whitespace, underscores and any other
punctuation. Digits stay attached to the letters next to them so CSS
lengths survive intact::

    fontSize      -> font-size
    XLarge        -> x-large
    large 24px    -> large-24px
    2em           -> 2em
"""

from __future__ import annotations

import re
from typing import Any

__all__ = ["to_kebab_case"]

# Runs of letters and digits; everything else is a word break.
_CHUNK_RE = re.compile(r"[^\W_]+")

# Boundaries inside a chunk: "fooBar" and "HTMLParser" style humps.
_LOWER_UPPER_RE = re.compile(r"(?<=[^\W_A-Z])(?=[A-Z])")
_ACRONYM_RE = re.compile(r"(?<=[A-Z])(?=[A-Z][a-z])")


def _split_chunk(chunk: str) -> list[str]:
    chunk = _LOWER_UPPER_RE.sub(" ", chunk)
    chunk = _ACRONYM_RE.sub(" ", chunk)
    return chunk.split()


def to_kebab_case(value: Any) -> str:
    """Return *value* as a lowercase, hyphen-separated token."""
    text = str(value).replace("'", "")
    words: list[str] = []
    for chunk in _CHUNK_RE.findall(text):
        words.extend(_split_chunk(chunk))
    return "-".join(words).lower()

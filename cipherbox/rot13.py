"""ROT13 letter rotation for ASCII text."""

from __future__ import annotations

import string

_UPPER = string.ascii_uppercase
_LOWER = string.ascii_lowercase
_TABLE = str.maketrans(
    _UPPER + _LOWER,
    _UPPER[13:] + _UPPER[:13] + _LOWER[13:] + _LOWER[:13],
)


def rot13(text: str) -> str:
    """Rotate every ASCII letter by 13 places, keeping its case."""
    return text.translate(_TABLE)
"""Shared definitions for the alphabet-based classical ciphers."""

from __future__ import annotations

import string
from enum import IntEnum

DEFAULT_ALPHABET = string.ascii_uppercase
MAX_LENGTH = 127
# Characters outside an alphabet are stored as negative codes by this offset.
NON_LETTER_OFFSET = -128


class Mode(IntEnum):
    """Direction of a cipher operation; the value is the sign of the shift."""

    ENCRYPT = 1
    DECRYPT = -1


def validate_alphabet(alphabet: str) -> str:
    """Return ``alphabet`` if it is a usable alphabet, else raise ValueError."""
    if not isinstance(alphabet, str):
        raise TypeError(f"alphabet must be a string, got {type(alphabet).__name__}")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if len(alphabet) >= MAX_LENGTH:
        raise ValueError(
            f"alphabet must be shorter than {MAX_LENGTH} characters, got {len(alphabet)}"
        )
    return alphabet
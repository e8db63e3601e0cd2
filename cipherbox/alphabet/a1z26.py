"""The A1Z26 cipher: capital letters become their positions 1 to 26."""

from __future__ import annotations

from collections.abc import Iterable

from cipherbox.alphabet.common import NON_LETTER_OFFSET

_FIRST = ord("A")
_LETTERS = 26


def encode(text: str) -> list[int]:
    """Map A-Z to 1-26; other ASCII characters become negative codes."""
    codes = []
    for char in text:
        if "A" <= char <= "Z":
            codes.append(ord(char) - _FIRST + 1)
        elif ord(char) < -NON_LETTER_OFFSET:
            codes.append(ord(char) + NON_LETTER_OFFSET)
        else:
            raise ValueError(f"cannot encode non-ASCII character {char!r}")
    return codes


def decode(numbers: Iterable[int]) -> str:
    """Turn codes made by :func:`encode` back into text."""
    chars = []
    for number in numbers:
        if 1 <= number <= _LETTERS:
            chars.append(chr(number + _FIRST - 1))
        elif NON_LETTER_OFFSET <= number < 0:
            chars.append(chr(number - NON_LETTER_OFFSET))
        else:
            raise ValueError(f"not a valid A1Z26 code: {number!r}")
    return "".join(chars)
"""Bacon-style cipher writing each letter index as eight two-symbol marks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from cipherbox.alphabet.common import DEFAULT_ALPHABET, NON_LETTER_OFFSET, validate_alphabet

_BITS = 8
_MARK_ONE = "B"


def encode(text: str, alphabet: str = DEFAULT_ALPHABET) -> list[int]:
    """Replace characters by their alphabet index; others become negative codes."""
    validate_alphabet(alphabet)
    codes = []
    for char in text:
        position = alphabet.find(char)
        if position >= 0:
            codes.append(position)
        elif ord(char) < -NON_LETTER_OFFSET:
            codes.append(ord(char) + NON_LETTER_OFFSET)
        else:
            raise ValueError(f"cannot encode character {char!r}")
    return codes


def decode(codes: Iterable[int], alphabet: str = DEFAULT_ALPHABET) -> str:
    """Turn codes made by :func:`encode` back into text."""
    validate_alphabet(alphabet)
    chars = []
    for code in codes:
        if NON_LETTER_OFFSET <= code < 0:
            chars.append(chr(code - NON_LETTER_OFFSET))
        elif 0 <= code < len(alphabet):
            chars.append(alphabet[code])
        else:
            raise ValueError(f"code {code!r} is outside the alphabet")
    return "".join(chars)


def render(codes: Iterable[int], chars: Sequence[str] = ("A", "B")) -> str:
    """Write each code as eight marks, most significant bit first."""
    zero, one = chars
    pieces = []
    for code in codes:
        if NON_LETTER_OFFSET <= code < 0:
            pieces.append(chr(code - NON_LETTER_OFFSET))
        elif 0 <= code < 1 << _BITS:
            pieces.append(
                "".join(one if bit == "1" else zero for bit in format(code, "08b"))
            )
        else:
            raise ValueError(f"code {code!r} does not fit in {_BITS} bits")
    return "".join(pieces)


def codes_from_marks(marks: str) -> list[int]:
    """Read groups of eight marks, where 'B' is a one bit, as numbers."""
    if len(marks) % _BITS:
        raise ValueError(f"mark count must be a multiple of {_BITS}, got {len(marks)}")
    return [
        sum(1 << (_BITS - 1 - offset)
            for offset, mark in enumerate(marks[start:start + _BITS])
            if mark == _MARK_ONE)
        for start in range(0, len(marks), _BITS)
    ]


def letters_from_marks(marks: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Read groups of eight marks as alphabet indices and return the letters."""
    validate_alphabet(alphabet)
    letters = []
    for code in codes_from_marks(marks):
        if code >= len(alphabet):
            raise ValueError(f"code {code} is outside the alphabet")
        letters.append(alphabet[code])
    return "".join(letters)
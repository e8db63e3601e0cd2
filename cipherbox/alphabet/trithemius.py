"""Trithemius cipher whose shift grows with a quadratic in the position."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, Mode, validate_alphabet


def key_for(index: int) -> int:
    """Shift applied to the character at ``index``: 2i^2 + 5i + 3."""
    if index < 0:
        raise ValueError("index must not be negative")
    return 2 * index * index + 5 * index + 3


def trithemius(
    text: str,
    mode: Mode | int = Mode.ENCRYPT,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Shift each alphabet character by the key for its position in ``text``."""
    mode = Mode(mode)
    validate_alphabet(alphabet)
    size = len(alphabet)

    def move(index: int, char: str) -> str:
        position = alphabet.find(char)
        if position < 0:
            return char
        return alphabet[(position + mode * (key_for(index) % size)) % size]

    return "".join(move(index, char) for index, char in enumerate(text))
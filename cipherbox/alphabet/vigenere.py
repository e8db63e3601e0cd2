"""The Vigenere cipher over a configurable alphabet."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, Mode, validate_alphabet


def vigenere(
    text: str,
    key: str,
    mode: Mode | int = Mode.ENCRYPT,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Shift each character by the matching key character, key repeated."""
    mode = Mode(mode)
    validate_alphabet(alphabet)
    if not key:
        raise ValueError("key must not be empty")
    size = len(alphabet)

    def move(index: int, char: str) -> str:
        position = alphabet.find(char)
        shift = alphabet.find(key[index % len(key)])
        if position < 0 or shift < 0:
            return char
        return alphabet[(position + mode * shift) % size]

    return "".join(move(index, char) for index, char in enumerate(text))
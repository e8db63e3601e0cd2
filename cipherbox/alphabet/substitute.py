"""Simple substitution between an alphabet and a vector of replacements."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, Mode, validate_alphabet

DEFAULT_VECTOR = "~!@#$%^&*()_+=-0123456789`"


def substitute(
    text: str,
    mode: Mode | int = Mode.ENCRYPT,
    alphabet: str = DEFAULT_ALPHABET,
    vector: str = DEFAULT_VECTOR,
) -> str:
    """Swap alphabet characters for vector characters, or back when decrypting."""
    mode = Mode(mode)
    validate_alphabet(alphabet)
    validate_alphabet(vector)
    if len(alphabet) != len(vector):
        raise ValueError("alphabet and vector must have the same length")
    source, target = (alphabet, vector) if mode is Mode.ENCRYPT else (vector, alphabet)

    def replace(char: str) -> str:
        position = source.find(char)
        return char if position < 0 else target[position]

    return "".join(replace(char) for char in text)
"""The Caesar cipher over a configurable alphabet."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, Mode, validate_alphabet


def caesar(
    text: str,
    key: int,
    mode: Mode | int = Mode.ENCRYPT,
    alphabet: str = DEFAULT_ALPHABET,
) -> str:
    """Shift every character found in ``alphabet`` by ``key`` places."""
    mode = Mode(mode)
    validate_alphabet(alphabet)
    size = len(alphabet)
    shift = (key % size) * mode

    def move(char: str) -> str:
        position = alphabet.find(char)
        return char if position < 0 else alphabet[(position + shift) % size]

    return "".join(move(char) for char in text)
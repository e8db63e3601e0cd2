"""The Atbash cipher: each letter is replaced by its mirror in the alphabet."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, validate_alphabet


def atbash(text: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Mirror every character of ``text`` found in ``alphabet``."""
    validate_alphabet(alphabet)
    last = len(alphabet) - 1

    def mirror(char: str) -> str:
        position = alphabet.find(char)
        return char if position < 0 else alphabet[last - position]

    return "".join(mirror(char) for char in text)
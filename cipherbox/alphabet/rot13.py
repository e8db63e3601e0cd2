"""ROT13 computed from the character range spanned by an alphabet."""

from __future__ import annotations

from cipherbox.alphabet.common import DEFAULT_ALPHABET, validate_alphabet


def rot13(text: str, alphabet: str = DEFAULT_ALPHABET) -> str:
    """Rotate characters between the alphabet's first and last character."""
    validate_alphabet(alphabet)
    size = len(alphabet)
    first, last = alphabet[0], alphabet[-1]
    base = ord(first)
    return "".join(
        chr(ord(char) % size + base) if first <= char <= last else char
        for char in text
    )
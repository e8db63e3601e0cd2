"""Extended Hamming (7,4) code with an overall parity bit."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

CODE_LENGTH = 8
MESSAGE_DOUBLE_ERROR = "2 errors"
MESSAGE_PARITY_BIT = "last bit error"
MESSAGE_CORRECTED = "error in Hamming code"


def _checked(bits: Iterable[int]) -> tuple[int, ...]:
    word = tuple(bits)
    if len(word) != CODE_LENGTH:
        raise ValueError(f"expected {CODE_LENGTH} bits, got {len(word)}")
    if any(bit not in (0, 1) for bit in word):
        raise ValueError("bits must be 0 or 1")
    return word


def parse_bits(text: str) -> tuple[int, ...]:
    """Read the first eight characters of ``text`` as binary digits."""
    head = text[:CODE_LENGTH]
    if len(head) < CODE_LENGTH:
        raise ValueError(f"expected {CODE_LENGTH} binary digits")
    if any(char not in "01" for char in head):
        raise ValueError(f"not a binary digit string: {head!r}")
    return tuple(int(char) for char in head)


def encode(bits: Iterable[int]) -> tuple[int, ...]:
    """Encode four data bits into an 8-bit code word with even parity."""
    data = tuple(bits)
    if len(data) != 4 or any(bit not in (0, 1) for bit in data):
        raise ValueError("expected four bits")
    d0, d1, d2, d3 = data
    checks = (d1 ^ d2 ^ d3, d0 ^ d2 ^ d3, d0 ^ d1 ^ d3)
    parity = sum(data + checks) % 2
    return data + checks + (parity,)


def check_code(bits: Iterable[int]) -> bool:
    """Whether the three check bits agree with the data bits."""
    d = _checked(bits)
    return (
        d[4] == d[1] ^ d[2] ^ d[3]
        and d[5] == d[0] ^ d[2] ^ d[3]
        and d[6] == d[0] ^ d[1] ^ d[3]
    )


def has_even_parity(bits: Iterable[int]) -> bool:
    """Whether the word holds an even number of ones."""
    return sum(_checked(bits)) % 2 == 0


def syndrome(bits: Iterable[int]) -> int:
    """Position of the bit that :func:`correct` flips for a single error."""
    d0, d1, d2, d3 = _checked(bits)[:4]
    return 4 * (d0 ^ d1 ^ d3) + 2 * (d0 ^ d2 ^ d3) + (d1 ^ d2 ^ d3)


def correct(bits: Iterable[int]) -> tuple[tuple[int, ...], str | None]:
    """Diagnose and repair a code word; return it with a message or None."""
    word = list(_checked(bits))
    if has_even_parity(word):
        return tuple(word), None if check_code(word) else MESSAGE_DOUBLE_ERROR
    if check_code(word):
        word[7] ^= 1
        return tuple(word), MESSAGE_PARITY_BIT
    word[syndrome(word)] ^= 1
    return tuple(word), MESSAGE_CORRECTED


def main(argv: list[str] | None = None) -> int:
    """Read eight binary digits from standard input and repair them."""
    argparse.ArgumentParser(
        description="Check and correct an 8-bit Hamming code word read from standard input."
    ).parse_args(argv)
    try:
        word = parse_bits(sys.stdin.read(CODE_LENGTH))
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    fixed, message = correct(word)
    if message:
        sys.stdout.write(message + "\n")
    sys.stdout.write("".join(map(str, fixed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
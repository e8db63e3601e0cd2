"""The Blowfish block cipher in ECB mode with zero padding."""

from __future__ import annotations

import argparse
import sys
from functools import lru_cache
from itertools import cycle, islice

from cipherbox.bits import U32_MASK, bytes_to_u64, join_words, split_u64, u64_to_bytes

BLOCK_SIZE = 8
MAX_KEY_SIZE = 56
DEFAULT_KEY = b"This is a crypto blowfish 448 bits key and 64 bits text!"
_LINE_LIMIT = 1023
_ROUNDS = 16
_P_WORDS = _ROUNDS + 2
_SBOX_COUNT = 4
_SBOX_WORDS = 256
_GUARD_BITS = 64


def _arctan_inverse(x: int, one: int) -> int:
    """Return arctan(1/x) in fixed point with ``one`` as unity."""
    power = one // x
    total = power
    square = x * x
    divisor = 1
    sign = -1
    while True:
        power //= square
        divisor += 2
        term = power // divisor
        if not term:
            return total
        total += sign * term
        sign = -sign


@lru_cache(maxsize=None)
def _initial_tables() -> tuple[tuple[int, ...], tuple[tuple[int, ...], ...]]:
    """Build the initial P-array and S-boxes from the fractional hex digits of pi."""
    word_count = _P_WORDS + _SBOX_COUNT * _SBOX_WORDS
    bits = word_count * 32
    one = 1 << (bits + _GUARD_BITS)
    pi = 4 * (4 * _arctan_inverse(5, one) - _arctan_inverse(239, one))
    fraction = (pi - 3 * one) >> _GUARD_BITS
    words = [
        (fraction >> (32 * (word_count - 1 - index))) & U32_MASK
        for index in range(word_count)
    ]
    p_array = tuple(words[:_P_WORDS])
    boxes = tuple(
        tuple(words[_P_WORDS + box * _SBOX_WORDS:_P_WORDS + (box + 1) * _SBOX_WORDS])
        for box in range(_SBOX_COUNT)
    )
    return p_array, boxes


class Blowfish:
    """A Blowfish cipher keyed once and used for any number of messages."""

    def __init__(self, key: bytes | str) -> None:
        key = key.encode() if isinstance(key, str) else bytes(key)
        if not 1 <= len(key) <= MAX_KEY_SIZE:
            raise ValueError(
                f"Blowfish key must be 1 to {MAX_KEY_SIZE} bytes, got {len(key)}"
            )
        p_init, sbox_init = _initial_tables()
        self._p = list(p_init)
        self._s = [list(box) for box in sbox_init]

        key_bytes = cycle(key)
        for index in range(len(self._p)):
            word = int.from_bytes(bytes(islice(key_bytes, 4)), "big")
            self._p[index] ^= word

        left = right = 0
        for index in range(0, len(self._p), 2):
            left, right = self._encrypt_words(left, right)
            self._p[index], self._p[index + 1] = left, right
        for box in self._s:
            for index in range(0, len(box), 2):
                left, right = self._encrypt_words(left, right)
                box[index], box[index + 1] = left, right

    def _f(self, value: int) -> int:
        s0, s1, s2, s3 = self._s
        result = (s0[value >> 24] + s1[(value >> 16) & 0xFF]) & U32_MASK
        result ^= s2[(value >> 8) & 0xFF]
        return (result + s3[value & 0xFF]) & U32_MASK

    def _run_rounds(self, left: int, right: int, subkeys) -> tuple[int, int]:
        for subkey in subkeys:
            left ^= subkey
            left, right = self._f(left) ^ right, left
        return right, left

    def _encrypt_words(self, left: int, right: int) -> tuple[int, int]:
        left, right = self._run_rounds(left, right, self._p[:_ROUNDS])
        return left ^ self._p[17], right ^ self._p[16]

    def _decrypt_words(self, left: int, right: int) -> tuple[int, int]:
        left, right = self._run_rounds(left, right, reversed(self._p[2:]))
        return left ^ self._p[0], right ^ self._p[1]

    def _crypt(self, data: bytes, transform) -> bytes:
        data = bytes(data)
        remainder = len(data) % BLOCK_SIZE
        if remainder:
            data += bytes(BLOCK_SIZE - remainder)
        blocks = []
        for start in range(0, len(data), BLOCK_SIZE):
            left, right = split_u64(bytes_to_u64(data[start:start + BLOCK_SIZE]))
            left, right = transform(left, right)
            blocks.append(u64_to_bytes(join_words(right, left)))
        return b"".join(blocks)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt ``data`` block by block, zero-padding it to whole blocks."""
        return self._crypt(data, self._encrypt_words)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ``data`` block by block; padding is kept in the result."""
        return self._crypt(data, self._decrypt_words)


def _format_bytes(data: bytes) -> str:
    return "[ " + "".join(f"{byte} " for byte in data) + "]"


def main(argv: list[str] | None = None) -> int:
    """Encrypt and decrypt one line from standard input, printing each stage."""
    argparse.ArgumentParser(
        description="Encrypt a line from standard input with Blowfish and decrypt it again."
    ).parse_args(argv)
    line = sys.stdin.buffer.readline().split(b"\n", 1)[0][:_LINE_LIMIT]
    print(_format_bytes(line))
    cipher = Blowfish(DEFAULT_KEY)
    encrypted = cipher.encrypt(line)
    print(_format_bytes(encrypted))
    print(_format_bytes(cipher.decrypt(encrypted)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
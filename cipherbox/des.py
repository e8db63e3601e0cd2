"""DES block cipher in ECB mode with zero padding."""

from __future__ import annotations

import argparse
import sys

from cipherbox.bits import bytes_to_u64, join_words, split_u64, u64_to_bytes

BLOCK_SIZE = 8
DEFAULT_KEY = b"DESkey56"
_LINE_LIMIT = 1023

_SBOX = (
    (
        (14, 4, 13, 1, 2, 15, 11, 8, 3, 10, 6, 12, 5, 9, 0, 7),
        (0, 15, 7, 4, 14, 2, 13, 1, 10, 6, 12, 11, 9, 5, 3, 8),
        (4, 1, 14, 8, 13, 6, 2, 11, 15, 12, 9, 7, 3, 10, 5, 0),
        (15, 12, 8, 2, 4, 9, 1, 7, 5, 11, 3, 14, 10, 0, 6, 13),
    ),
    (
        (15, 1, 8, 14, 6, 11, 3, 4, 9, 7, 2, 13, 12, 0, 5, 10),
        (3, 13, 4, 7, 15, 2, 8, 14, 12, 0, 1, 10, 6, 9, 11, 5),
        (0, 14, 7, 11, 10, 4, 13, 1, 5, 8, 12, 6, 9, 3, 2, 15),
        (13, 8, 10, 1, 3, 15, 4, 2, 11, 6, 7, 12, 0, 5, 14, 9),
    ),
    (
        (10, 0, 9, 14, 6, 3, 15, 5, 1, 13, 12, 7, 11, 4, 2, 8),
        (13, 7, 0, 9, 3, 4, 6, 10, 2, 8, 5, 14, 12, 11, 15, 1),
        (13, 6, 4, 9, 8, 15, 3, 0, 11, 1, 2, 12, 5, 10, 14, 7),
        (1, 10, 13, 0, 6, 9, 8, 7, 4, 15, 14, 3, 11, 5, 2, 12),
    ),
    (
        (7, 13, 14, 3, 0, 6, 9, 10, 1, 2, 8, 5, 11, 12, 4, 15),
        (13, 8, 11, 5, 6, 15, 0, 3, 4, 7, 2, 12, 1, 10, 14, 9),
        (10, 6, 9, 0, 12, 11, 7, 13, 15, 1, 3, 14, 5, 2, 8, 4),
        (3, 15, 0, 6, 10, 1, 13, 8, 9, 4, 5, 11, 12, 7, 2, 14),
    ),
    (
        (2, 12, 4, 1, 7, 10, 11, 6, 8, 5, 3, 15, 13, 0, 14, 9),
        (14, 11, 2, 12, 4, 7, 13, 1, 5, 0, 15, 10, 3, 9, 8, 6),
        (4, 2, 1, 11, 10, 13, 7, 8, 15, 9, 12, 5, 6, 3, 0, 14),
        (11, 8, 12, 7, 1, 14, 2, 13, 6, 15, 0, 9, 10, 4, 5, 3),
    ),
    (
        (12, 1, 10, 15, 9, 2, 6, 8, 0, 13, 3, 4, 14, 7, 5, 11),
        (10, 15, 4, 2, 7, 12, 9, 5, 6, 1, 13, 14, 0, 11, 3, 8),
        (9, 14, 15, 5, 2, 8, 12, 3, 7, 0, 4, 10, 1, 13, 11, 6),
        (4, 3, 2, 12, 9, 5, 15, 10, 11, 14, 1, 7, 6, 0, 8, 13),
    ),
    (
        (4, 11, 2, 14, 15, 0, 8, 13, 3, 12, 9, 7, 5, 10, 6, 1),
        (13, 0, 11, 7, 4, 9, 1, 10, 14, 3, 5, 12, 2, 15, 8, 6),
        (1, 4, 11, 13, 12, 3, 7, 14, 10, 15, 6, 8, 0, 5, 9, 2),
        (6, 11, 13, 8, 1, 4, 10, 7, 9, 5, 0, 15, 14, 2, 3, 12),
    ),
    (
        (13, 2, 8, 4, 6, 15, 11, 1, 10, 9, 3, 14, 5, 0, 12, 7),
        (1, 15, 13, 8, 10, 3, 7, 4, 12, 5, 6, 11, 0, 14, 9, 2),
        (7, 11, 4, 1, 9, 12, 14, 2, 0, 6, 10, 13, 15, 3, 5, 8),
        (2, 1, 14, 7, 4, 10, 8, 13, 15, 12, 9, 0, 3, 5, 6, 11),
    ),
)

_IP = (
    58, 50, 42, 34, 26, 18, 10, 2, 60, 52, 44, 36, 28, 20, 12, 4,
    62, 54, 46, 38, 30, 22, 14, 6, 64, 56, 48, 40, 32, 24, 16, 8,
    57, 49, 41, 33, 25, 17, 9, 1, 59, 51, 43, 35, 27, 19, 11, 3,
    61, 53, 45, 37, 29, 21, 13, 5, 63, 55, 47, 39, 31, 23, 15, 7,
)

_FP = (
    40, 8, 48, 16, 56, 24, 64, 32, 39, 7, 47, 15, 55, 23, 63, 31,
    38, 6, 46, 14, 54, 22, 62, 30, 37, 5, 45, 13, 53, 21, 61, 29,
    36, 4, 44, 12, 52, 20, 60, 28, 35, 3, 43, 11, 51, 19, 59, 27,
    34, 2, 42, 10, 50, 18, 58, 26, 33, 1, 41, 9, 49, 17, 57, 25,
)

_PC1_LEFT = (
    57, 49, 41, 33, 25, 17, 9, 1, 58, 50, 42, 34, 26, 18,
    10, 2, 59, 51, 43, 35, 27, 19, 11, 3, 60, 52, 44, 36,
)

_PC1_RIGHT = (
    63, 55, 47, 39, 31, 23, 15, 7, 62, 54, 46, 38, 30, 22,
    14, 6, 61, 53, 45, 37, 29, 21, 13, 5, 28, 20, 12, 4,
)

_PC2 = (
    14, 17, 11, 24, 1, 5, 3, 28, 15, 6, 21, 10,
    23, 19, 12, 4, 26, 8, 16, 7, 27, 20, 13, 2,
    41, 52, 31, 37, 47, 55, 30, 40, 51, 45, 33, 48,
    44, 49, 39, 56, 34, 53, 46, 42, 50, 36, 29, 32,
)

_EXPANSION = (
    32, 1, 2, 3, 4, 5, 4, 5, 6, 7, 8, 9,
    8, 9, 10, 11, 12, 13, 12, 13, 14, 15, 16, 17,
    16, 17, 18, 19, 20, 21, 20, 21, 22, 23, 24, 25,
    24, 25, 26, 27, 28, 29, 28, 29, 30, 31, 32, 1,
)

_P = (
    16, 7, 20, 21, 29, 12, 28, 17, 1, 15, 23, 26, 5, 18, 31, 10,
    2, 8, 24, 14, 32, 27, 3, 9, 19, 13, 30, 6, 22, 11, 4, 25,
)

_SHIFTS = tuple(1 if number in (0, 1, 8, 15) else 2 for number in range(16))
_MASK28 = (1 << 28) - 1


def _permute(value: int, table: tuple[int, ...], width: int) -> int:
    result = 0
    for position in table:
        result = (result << 1) | ((value >> (width - position)) & 1)
    return result


def _rotate28(value: int, count: int) -> int:
    return ((value << count) | (value >> (28 - count))) & _MASK28


def expand_key(key: bytes) -> list[int]:
    """Derive the sixteen 48-bit round keys from an 8-byte key."""
    key = bytes(key)
    if len(key) != BLOCK_SIZE:
        raise ValueError(f"DES key must be {BLOCK_SIZE} bytes, got {len(key)}")
    key64 = bytes_to_u64(key)
    left = _permute(key64, _PC1_LEFT, 64)
    right = _permute(key64, _PC1_RIGHT, 64)
    subkeys = []
    for count in _SHIFTS:
        left = _rotate28(left, count)
        right = _rotate28(right, count)
        subkeys.append(_permute((left << 28) | right, _PC2, 56))
    return subkeys


def _round_function(half: int, subkey: int) -> int:
    mixed = _permute(half, _EXPANSION, 32) ^ subkey
    result = 0
    for box, offset in zip(_SBOX, range(42, -1, -6)):
        six = (mixed >> offset) & 0x3F
        row = ((six >> 4) & 0b10) | (six & 1)
        column = (six >> 1) & 0xF
        result = (result << 4) | box[row][column]
    return _permute(result, _P, 32)


def _crypt_block(block: bytes, subkeys: list[int]) -> bytes:
    left, right = split_u64(_permute(bytes_to_u64(block), _IP, 64))
    for subkey in subkeys:
        left, right = right, _round_function(right, subkey) ^ left
    return u64_to_bytes(_permute(join_words(left, right), _FP, 64))


def _crypt(data: bytes, subkeys: list[int]) -> bytes:
    data = bytes(data)
    remainder = len(data) % BLOCK_SIZE
    if remainder:
        data += bytes(BLOCK_SIZE - remainder)
    return b"".join(
        _crypt_block(data[start:start + BLOCK_SIZE], subkeys)
        for start in range(0, len(data), BLOCK_SIZE)
    )


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt ``data`` block by block, zero-padding it to whole blocks."""
    return _crypt(data, expand_key(key))


def decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt ``data`` block by block; padding is kept in the result."""
    return _crypt(data, expand_key(key)[::-1])


def _format_bytes(data: bytes) -> str:
    return "[ " + "".join(f"{byte} " for byte in data) + "]"


def main(argv: list[str] | None = None) -> int:
    """Encrypt and decrypt one line from standard input, printing each stage."""
    argparse.ArgumentParser(
        description="Encrypt a line from standard input with DES and decrypt it again."
    ).parse_args(argv)
    line = sys.stdin.buffer.readline().split(b"\n", 1)[0][:_LINE_LIMIT]
    print(_format_bytes(line))
    encrypted = encrypt(line, DEFAULT_KEY)
    print(_format_bytes(encrypted))
    print(_format_bytes(decrypt(encrypted, DEFAULT_KEY)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
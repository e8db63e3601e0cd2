"""The MD5 message digest."""

from __future__ import annotations

import struct

BLOCK_SIZE = 64
DIGEST_SIZE = 16
_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

_K = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee, 0xf57c0faf, 0x4787c62a,
    0xa8304613, 0xfd469501, 0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa, 0xd62f105d, 0x02441453,
    0xd8a1e681, 0xe7d3fbc8, 0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c, 0xa4beea44, 0x4bdecfa9,
    0xf6bb4b60, 0xbebfbc70, 0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039, 0x655b59c3, 0x8f0ccc92,
    0xffeff47d, 0x85845dd1, 0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

_SHIFTS = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode()
    return bytes(memoryview(data))


def _rotate_left(value: int, count: int) -> int:
    return ((value << count) | (value >> (32 - count))) & _MASK


class MD5:
    """Incremental MD5 hasher with a hashlib-like interface."""

    name = "md5"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes | str = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        self.update(data)

    def _transform(self, block: bytes) -> None:
        words = struct.unpack("<16I", block)
        a, b, c, d = self._state
        for step in range(64):
            if step < 16:
                mixed = (b & c) | (~b & d)
                index = step
            elif step < 32:
                mixed = (b & d) | (c & ~d)
                index = (5 * step + 1) % 16
            elif step < 48:
                mixed = b ^ c ^ d
                index = (3 * step + 5) % 16
            else:
                mixed = c ^ (b | ~d)
                index = (7 * step) % 16
            total = (a + (mixed & _MASK) + _K[step] + words[index]) & _MASK
            a, d, c, b = d, c, b, (b + _rotate_left(total, _SHIFTS[step])) & _MASK
        self._state = tuple(
            (old + new) & _MASK for old, new in zip(self._state, (a, b, c, d))
        )

    def update(self, data: bytes | str) -> None:
        """Feed more message bytes into the hash."""
        data = _as_bytes(data)
        self._length += len(data)
        data = self._buffer + data
        whole = len(data) - len(data) % BLOCK_SIZE
        for start in range(0, whole, BLOCK_SIZE):
            self._transform(data[start:start + BLOCK_SIZE])
        self._buffer = data[whole:]

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the hasher stays usable."""
        final = MD5()
        final._state = self._state
        bit_length = (self._length * 8) & 0xFFFFFFFFFFFFFFFF
        padding = b"\x80" + bytes((55 - len(self._buffer)) % BLOCK_SIZE)
        tail = self._buffer + padding + struct.pack("<Q", bit_length)
        for start in range(0, len(tail), BLOCK_SIZE):
            final._transform(tail[start:start + BLOCK_SIZE])
        return struct.pack("<4I", *final._state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md5(data: bytes | str) -> bytes:
    """Return the MD5 digest of ``data``."""
    return MD5(data).digest()
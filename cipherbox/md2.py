"""The MD2 message digest."""

from __future__ import annotations

import argparse
import sys

BLOCK_SIZE = 16
DIGEST_SIZE = 16

_S = (
    41, 46, 67, 201, 162, 216, 124, 1, 61, 54, 84, 161, 236, 240, 6,
    19, 98, 167, 5, 243, 192, 199, 115, 140, 152, 147, 43, 217, 188,
    76, 130, 202, 30, 155, 87, 60, 253, 212, 224, 22, 103, 66, 111, 24,
    138, 23, 229, 18, 190, 78, 196, 214, 218, 158, 222, 73, 160, 251,
    245, 142, 187, 47, 238, 122, 169, 104, 121, 145, 21, 178, 7, 63,
    148, 194, 16, 137, 11, 34, 95, 33, 128, 127, 93, 154, 90, 144, 50,
    39, 53, 62, 204, 231, 191, 247, 151, 3, 255, 25, 48, 179, 72, 165,
    181, 209, 215, 94, 146, 42, 172, 86, 170, 198, 79, 184, 56, 210,
    150, 164, 125, 182, 118, 252, 107, 226, 156, 116, 4, 241, 69, 157,
    112, 89, 100, 113, 135, 32, 134, 91, 207, 101, 230, 45, 168, 2, 27,
    96, 37, 173, 174, 176, 185, 246, 28, 70, 97, 105, 52, 64, 126, 15,
    85, 71, 163, 35, 221, 81, 175, 58, 195, 92, 249, 206, 186, 197,
    234, 38, 44, 83, 13, 110, 133, 40, 132, 9, 211, 223, 205, 244, 65,
    129, 77, 82, 106, 220, 55, 200, 108, 193, 171, 250, 36, 225, 123,
    8, 12, 189, 177, 74, 120, 136, 149, 139, 227, 99, 232, 109, 233,
    203, 213, 254, 59, 0, 29, 57, 242, 239, 183, 14, 102, 88, 208, 228,
    166, 119, 114, 248, 235, 117, 75, 10, 49, 68, 80, 180, 143, 237,
    31, 26, 219, 153, 141, 51, 159, 17, 131, 20,
)


def _as_bytes(data: bytes | str) -> bytes:
    if isinstance(data, str):
        return data.encode()
    return bytes(memoryview(data))


class MD2:
    """Incremental MD2 hasher with a hashlib-like interface."""

    name = "md2"
    block_size = BLOCK_SIZE
    digest_size = DIGEST_SIZE

    def __init__(self, data: bytes | str = b"") -> None:
        self._state = bytearray(48)
        self._checksum = bytearray(16)
        self._buffer = b""
        self.update(data)

    def _transform(self, block: bytes) -> None:
        state = self._state
        state[16:32] = block
        state[32:48] = bytes(a ^ b for a, b in zip(block, state[:16]))
        t = 0
        for round_number in range(18):
            for k in range(48):
                state[k] ^= _S[t]
                t = state[k]
            t = (t + round_number) & 0xFF
        checksum = self._checksum
        t = checksum[15]
        for j, byte in enumerate(block):
            checksum[j] ^= _S[byte ^ t]
            t = checksum[j]

    def update(self, data: bytes | str) -> None:
        """Feed more message bytes into the hash."""
        data = self._buffer + _as_bytes(data)
        whole = len(data) - len(data) % BLOCK_SIZE
        for start in range(0, whole, BLOCK_SIZE):
            self._transform(data[start:start + BLOCK_SIZE])
        self._buffer = data[whole:]

    def _clone(self) -> MD2:
        other = MD2()
        other._state = bytearray(self._state)
        other._checksum = bytearray(self._checksum)
        other._buffer = self._buffer
        return other

    def digest(self) -> bytes:
        """Return the digest of everything fed so far; the hasher stays usable."""
        final = self._clone()
        pad = BLOCK_SIZE - len(final._buffer)
        final._transform(final._buffer + bytes([pad]) * pad)
        final._transform(bytes(final._checksum))
        return bytes(final._state[:DIGEST_SIZE])

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def md2(data: bytes | str) -> bytes:
    """Return the MD2 digest of ``data``."""
    return MD2(data).digest()


def _format_bytes(data: bytes) -> str:
    return "[ " + "".join(f"{byte} " for byte in data) + "]"


def main(argv: list[str] | None = None) -> int:
    """Hash one line from standard input and print its bytes and digest."""
    argparse.ArgumentParser(
        description="Print the MD2 digest of a line read from standard input."
    ).parse_args(argv)
    line = sys.stdin.buffer.readline().split(b"\n", 1)[0]
    print(_format_bytes(line))
    print(_format_bytes(md2(line.split(b"\0", 1)[0])))
    return 0


if __name__ == "__main__":
    sys.exit(main())
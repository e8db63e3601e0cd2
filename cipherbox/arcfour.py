"""The RC4 (arcfour) stream cipher."""

from __future__ import annotations

import argparse
import sys

DEFAULT_KEY = b"key for cipher"
_STATE_SIZE = 256


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode() if isinstance(value, str) else bytes(value)


def key_schedule(key: bytes | str) -> list[int]:
    """Build the initial 256-entry permutation from ``key``."""
    key = _as_bytes(key)
    if not key:
        raise ValueError("key must not be empty")
    state = list(range(_STATE_SIZE))
    j = 0
    for i in range(_STATE_SIZE):
        j = (j + state[i] + key[i % len(key)]) % _STATE_SIZE
        state[i], state[j] = state[j], state[i]
    return state


def keystream(state: list[int], length: int) -> bytes:
    """Generate ``length`` keystream bytes from a copy of ``state``."""
    if length < 0:
        raise ValueError("length must not be negative")
    state = list(state)
    if len(state) != _STATE_SIZE:
        raise ValueError(f"state must hold {_STATE_SIZE} entries")
    out = bytearray()
    i = j = 0
    for _ in range(length):
        i = (i + 1) % _STATE_SIZE
        j = (j + state[i]) % _STATE_SIZE
        state[i], state[j] = state[j], state[i]
        out.append(state[(state[i] + state[j]) % _STATE_SIZE])
    return bytes(out)


def arcfour(data: bytes | str, key: bytes | str) -> bytes:
    """Encrypt or decrypt ``data``; the operation is its own inverse."""
    data = _as_bytes(data)
    stream = keystream(key_schedule(key), len(data))
    return bytes(a ^ b for a, b in zip(data, stream))


def _format_bytes(data: bytes) -> str:
    return "[ " + "".join(f"{byte} " for byte in data) + "]"


def main(argv: list[str] | None = None) -> int:
    """Encrypt and decrypt one line from standard input, printing each stage."""
    argparse.ArgumentParser(
        description="Encrypt a line from standard input with RC4 and decrypt it again."
    ).parse_args(argv)
    line = sys.stdin.buffer.readline().split(b"\n", 1)[0]
    print(_format_bytes(line))
    encrypted = arcfour(line, DEFAULT_KEY)
    print(_format_bytes(encrypted))
    print(_format_bytes(arcfour(encrypted, DEFAULT_KEY)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
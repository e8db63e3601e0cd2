"""Conversions between byte strings and big-endian machine words."""

from __future__ import annotations

import struct

U32_MASK = 0xFFFFFFFF
U64_MASK = 0xFFFFFFFFFFFFFFFF


def _exact(data: bytes, size: int) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    return data


def split_256_to_words(block: bytes) -> tuple[int, ...]:
    """Split a 32-byte block into eight big-endian 32-bit words."""
    return struct.unpack(">8I", _exact(block, 32))


def split_u64(value: int) -> tuple[int, int]:
    """Split a 64-bit value into its (high, low) 32-bit halves."""
    value &= U64_MASK
    return value >> 32, value & U32_MASK


def u64_to_bytes(value: int) -> bytes:
    """Return the low 64 bits of ``value`` as eight big-endian bytes."""
    return (value & U64_MASK).to_bytes(8, "big")


def u32_to_bytes(value: int) -> bytes:
    """Return the low 32 bits of ``value`` as four big-endian bytes."""
    return (value & U32_MASK).to_bytes(4, "big")


def join_words(low: int, high: int) -> int:
    """Join two 32-bit words into one 64-bit value."""
    return ((high & U32_MASK) << 32) | (low & U32_MASK)


def bytes_to_u64(data: bytes) -> int:
    """Read exactly eight bytes as a big-endian 64-bit value."""
    return int.from_bytes(_exact(data, 8), "big")


def bytes_to_u32(data: bytes) -> int:
    """Read exactly four bytes as a big-endian 32-bit value."""
    return int.from_bytes(_exact(data, 4), "big")
"""Single-byte XOR cipher."""

from __future__ import annotations


def _key_value(key: int | str) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError("key must be a single character")
        key = ord(key)
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must be in 0..255, got {key!r}")
    return key


def xor(data: bytes | str, key: int | str) -> bytes | str:
    """XOR every byte or character of ``data`` with ``key``; its own inverse."""
    value = _key_value(key)
    if isinstance(data, str):
        return "".join(chr(ord(char) ^ value) for char in data)
    return bytes(byte ^ value for byte in bytes(data))
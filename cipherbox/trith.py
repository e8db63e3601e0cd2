"""Byte-wise progressive shift cipher with a polynomial key."""

from __future__ import annotations

_MODULUS = 255


def shift(index: int) -> int:
    """Key byte applied at ``index``; positions repeat every 256 bytes."""
    if index < 0:
        raise ValueError("index must not be negative")
    position = index & 0xFF
    return (position + position * position) & 0xFF


def _truncated_mod(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def trith(data: bytes, mode: str) -> bytes:
    """Encrypt (``'E'``) or decrypt (``'D'``) ``data`` byte by byte."""
    if mode == "E":
        sign = 1
    elif mode == "D":
        sign = -1
    else:
        raise ValueError(f"mode must be 'E' or 'D', got {mode!r}")
    return bytes(
        _truncated_mod(byte + sign * shift(index), _MODULUS) & 0xFF
        for index, byte in enumerate(bytes(data))
    )
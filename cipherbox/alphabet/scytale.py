"""The scytale transposition cipher."""

from __future__ import annotations

from cipherbox.alphabet.common import Mode

DEFAULT_FILL = "Z"


def _check_strings(strings: int) -> None:
    if strings < 1:
        raise ValueError(f"strings must be at least 1, got {strings}")


def _columns(length: int, strings: int) -> int:
    return (length - 1) // strings + 1


def scytale(text: str, strings: int, mode: Mode | int = Mode.ENCRYPT) -> str:
    """Read ``text`` column-wise around a rod wound ``strings`` times."""
    _check_strings(strings)
    mode = Mode(mode)
    step = _columns(len(text), strings) if mode is Mode.ENCRYPT else strings
    return "".join(text[start::step] for start in range(step))


def pad(text: str, strings: int, fill: str = DEFAULT_FILL) -> str:
    """Extend ``text`` with ``fill`` so it fills the rod's grid exactly."""
    _check_strings(strings)
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return text.ljust(strings * _columns(len(text), strings), fill)
"""Fixed transposition of an 8x8 grid of characters."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from itertools import chain

SIZE = 8

_KEYS = (
    (2, 3, 6, 10, 12, 15, 16, 21, 33, 35, 39, 43, 44, 46, 49, 63),
    (5, 9, 11, 22, 23, 26, 27, 31, 34, 38, 45, 50, 55, 56, 59, 62),
    (0, 14, 17, 19, 20, 24, 28, 30, 42, 47, 48, 51, 53, 57, 60, 61),
    (1, 4, 7, 8, 13, 18, 25, 29, 32, 36, 37, 40, 41, 52, 54, 58),
)
_ORDER = tuple(chain.from_iterable(_KEYS))


def transpose(grid: str | Iterable[str]) -> list[str]:
    """Rearrange 64 non-blank characters and return the eight output rows."""
    cells = "".join("".join(grid).split())
    if len(cells) != SIZE * SIZE:
        raise ValueError(f"expected {SIZE * SIZE} characters, got {len(cells)}")
    shuffled = "".join(cells[index] for index in _ORDER)
    return [shuffled[start:start + SIZE] for start in range(0, SIZE * SIZE, SIZE)]


def main(argv: list[str] | None = None) -> int:
    """Read a grid from standard input and print it rearranged."""
    argparse.ArgumentParser(
        description="Rearrange 64 characters read from standard input."
    ).parse_args(argv)
    cells = "".join(sys.stdin.read().split())[: SIZE * SIZE]
    try:
        rows = transpose(cells)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    for row in rows:
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())
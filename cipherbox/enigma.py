"""A three-rotor Enigma-style letter machine."""

from __future__ import annotations

import argparse
import string
import sys

ALPHABET = string.ascii_uppercase
_SIZE = len(ALPHABET)
_LINE_LIMIT = 1023

_ROTORS = (
    (4, 10, 12, 5, 11, 6, 3, 16, 21, 25, 13, 19, 14, 22, 24, 7, 23, 20, 18, 15, 0, 8, 1, 17, 2, 9),
    (0, 9, 3, 10, 18, 8, 17, 20, 23, 1, 11, 7, 22, 19, 12, 2, 16, 6, 25, 13, 15, 24, 5, 21, 14, 4),
    (1, 3, 5, 7, 9, 11, 2, 15, 17, 19, 23, 21, 25, 13, 24, 4, 8, 22, 6, 0, 10, 12, 20, 18, 16, 14),
    (4, 18, 14, 21, 15, 25, 9, 0, 24, 16, 20, 8, 17, 7, 23, 11, 13, 5, 19, 6, 10, 3, 2, 12, 22, 1),
    (21, 25, 1, 17, 6, 8, 19, 24, 20, 15, 18, 3, 13, 7, 11, 23, 0, 22, 12, 9, 16, 14, 5, 4, 2, 10),
)

_REFLECTORS = (
    (24, 17, 20, 7, 16, 18, 11, 3, 15, 23, 13, 6, 14, 10, 12, 8, 4, 1, 5, 25, 2, 22, 21, 9, 0, 19),
    (24, 17, 20, 7, 16, 18, 11, 3, 15, 23, 13, 6, 14, 10, 12, 8, 4, 1, 5, 25, 2, 22, 21, 9, 0, 19),
)

_INVERSE = tuple(tuple(rotor.index(value) for value in range(_SIZE)) for rotor in _ROTORS)

# Position of the rotor to its left that makes the next rotor step.
_NOTCHES = {0: 17, 1: 5, 2: 22}

DEFAULT_ROTORS = (2, 1, 0)
DEFAULT_REFLECTOR = 1


def _check_position(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value < _SIZE:
        raise ValueError(f"{name} position must be in 0..{_SIZE - 1}, got {value!r}")
    return value


def _check_setup(rotor1: int, rotor2: int, rotor3: int, reflector: int) -> None:
    for name, rotor in (("rotor1", rotor1), ("rotor2", rotor2), ("rotor3", rotor3)):
        if not isinstance(rotor, int) or not 0 <= rotor < len(_ROTORS):
            raise ValueError(f"{name} must be in 0..{len(_ROTORS) - 1}, got {rotor!r}")
    if not isinstance(reflector, int) or not 0 <= reflector < len(_REFLECTORS):
        raise ValueError(
            f"reflector must be in 0..{len(_REFLECTORS) - 1}, got {reflector!r}"
        )


class Enigma:
    """Rotor machine whose positions advance with every letter pressed."""

    def __init__(self, left: int = 2, middle: int = 20, right: int = 16) -> None:
        self.left = _check_position("left", left)
        self.middle = _check_position("middle", middle)
        self.right = _check_position("right", right)

    def _step(self, rotor2: int, rotor3: int) -> None:
        self.right = (self.right + 1) % _SIZE
        if _NOTCHES.get(rotor3) == self.right:
            self.middle = (self.middle + 1) % _SIZE
        if _NOTCHES.get(rotor2) == self.middle:
            self.left = (self.left + 1) % _SIZE

    def _signal(self, index: int, rotor1: int, rotor2: int, rotor3: int, reflector: int) -> int:
        left, middle, right = self.left, self.middle, self.right
        out = _ROTORS[rotor3][(index + right) % _SIZE]
        out = _ROTORS[rotor2][(out + middle - right) % _SIZE]
        out = _ROTORS[rotor1][(out + left - middle) % _SIZE]
        out = (_REFLECTORS[reflector][(out - left) % _SIZE] + left) % _SIZE
        out = (_INVERSE[rotor1][out] - (left - middle)) % _SIZE
        out = (_INVERSE[rotor2][out] - (middle - right)) % _SIZE
        return (_INVERSE[rotor3][out] - right) % _SIZE

    def press(
        self,
        letter: int | str,
        rotor1: int = DEFAULT_ROTORS[0],
        rotor2: int = DEFAULT_ROTORS[1],
        rotor3: int = DEFAULT_ROTORS[2],
        reflector: int = DEFAULT_REFLECTOR,
    ) -> int | str:
        """Press one key; a letter gives a letter, an index 0..25 an index."""
        _check_setup(rotor1, rotor2, rotor3, reflector)
        if isinstance(letter, str):
            if len(letter) != 1 or letter not in ALPHABET:
                raise ValueError(f"expected one letter A-Z, got {letter!r}")
            index = ALPHABET.index(letter)
        elif isinstance(letter, int) and 0 <= letter < _SIZE:
            index = letter
        else:
            raise ValueError(f"letter index must be in 0..{_SIZE - 1}, got {letter!r}")
        self._step(rotor2, rotor3)
        out = self._signal(index, rotor1, rotor2, rotor3, reflector)
        return ALPHABET[out] if isinstance(letter, str) else out

    def encrypt(
        self,
        text: str,
        rotor1: int = DEFAULT_ROTORS[0],
        rotor2: int = DEFAULT_ROTORS[1],
        rotor3: int = DEFAULT_ROTORS[2],
        reflector: int = DEFAULT_REFLECTOR,
    ) -> str:
        """Encipher capital letters of ``text``; other characters pass unchanged."""
        _check_setup(rotor1, rotor2, rotor3, reflector)
        return "".join(
            self.press(char, rotor1, rotor2, rotor3, reflector) if char in ALPHABET else char
            for char in text
        )


def main(argv: list[str] | None = None) -> int:
    """Encipher one line from standard input and write the result."""
    argparse.ArgumentParser(
        description="Encipher a line of capital letters read from standard input."
    ).parse_args(argv)
    line = sys.stdin.readline().split("\n", 1)[0][:_LINE_LIMIT]
    sys.stdout.write(Enigma().encrypt(line, *DEFAULT_ROTORS, DEFAULT_REFLECTOR))
    return 0


if __name__ == "__main__":
    sys.exit(main())
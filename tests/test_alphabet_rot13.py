import string

import pytest

from cipherbox.alphabet.rot13 import rot13


def test_known_word():
    assert rot13("HELLO") == "URYYB"


@pytest.mark.parametrize("text", ["HELLO WORLD", string.ascii_uppercase, ""])
def test_rot13_is_an_involution(text):
    assert rot13(rot13(text)) == text


def test_lower_case_and_digits_are_kept():
    assert rot13("abc 123") == "abc 123"


def test_every_letter_moves():
    rotated = rot13(string.ascii_uppercase)
    assert sorted(rotated) == list(string.ascii_uppercase)
    assert all(a != b for a, b in zip(rotated, string.ascii_uppercase))


def test_empty_alphabet_is_rejected():
    with pytest.raises(ValueError):
        rot13("A", "")
import pytest

from cipherbox.alphabet.caesar import caesar
from cipherbox.alphabet.common import Mode


def test_shift_by_three():
    assert caesar("ABC", 3) == "DEF"


def test_shift_wraps_around():
    assert caesar("XYZ", 3) == "ABC"


@pytest.mark.parametrize("key", [1, 3, 13, 25, 26, 100, -1, -27])
def test_round_trip(key):
    text = "THE QUICK BROWN FOX"
    assert caesar(caesar(text, key), key, Mode.DECRYPT) == text


def test_negative_key_equals_complement():
    assert caesar("HELLO", -1) == caesar("HELLO", 25)


def test_full_turn_is_identity():
    assert caesar("HELLO", 26) == "HELLO"


def test_characters_outside_alphabet_are_kept():
    assert caesar("abc 123", 5) == "abc 123"


def test_custom_alphabet_round_trip():
    alphabet = "0123456789"
    assert caesar(caesar("2024", 7, alphabet=alphabet), 7, -1, alphabet) == "2024"


def test_invalid_mode_is_rejected():
    with pytest.raises(ValueError):
        caesar("ABC", 1, 0)
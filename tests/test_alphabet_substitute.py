import pytest

from cipherbox.alphabet.common import Mode
from cipherbox.alphabet.substitute import substitute


def test_default_vector_replaces_letters():
    assert substitute("ABC") == "~!@"


@pytest.mark.parametrize("text", ["HELLO WORLD", "ZEBRA", "lower"])
def test_round_trip(text):
    assert substitute(substitute(text), Mode.DECRYPT) == text


def test_custom_tables():
    assert substitute("abcx", Mode.ENCRYPT, "abc", "xyz") == "xyzx"
    assert substitute("xyz", Mode.DECRYPT, "abc", "xyz") == "abc"


def test_mismatched_lengths_are_rejected():
    with pytest.raises(ValueError):
        substitute("A", Mode.ENCRYPT, "AB", "X")


def test_invalid_mode_is_rejected():
    with pytest.raises(ValueError):
        substitute("A", 2)
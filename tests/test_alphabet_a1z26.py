import pytest

from cipherbox.alphabet.a1z26 import decode, encode


def test_letters_map_to_positions():
    assert encode("ABC") == [1, 2, 3]


def test_last_letter_is_26():
    assert encode("Z") == [26]


def test_non_letters_become_negative():
    assert all(code < 0 for code in encode(" ,!abc"))


@pytest.mark.parametrize("text", ["HELLO, WORLD!", "lower case", "", "A1Z26"])
def test_round_trip(text):
    assert decode(encode(text)) == text


def test_non_ascii_is_rejected():
    with pytest.raises(ValueError):
        encode("\u00e9")


@pytest.mark.parametrize("code", [0, 27, -129])
def test_invalid_codes_are_rejected(code):
    with pytest.raises(ValueError):
        decode([code])
import pytest

from cipherbox.alphabet.caesar import caesar
from cipherbox.alphabet.common import Mode
from cipherbox.alphabet.trithemius import key_for, trithemius


def test_first_key():
    assert key_for(0) == 3


def test_keys_grow():
    keys = [key_for(index) for index in range(10)]
    assert keys == sorted(keys)
    assert len(set(keys)) == 10


def test_negative_index_is_rejected():
    with pytest.raises(ValueError):
        key_for(-1)


def test_each_position_is_a_caesar_shift():
    text = "A" * 12
    encrypted = trithemius(text)
    assert all(
        char == caesar("A", key_for(index)) for index, char in enumerate(encrypted)
    )


@pytest.mark.parametrize("text", ["HELLO WORLD", "ATTACK AT DAWN", "abc XYZ"])
def test_round_trip(text):
    assert trithemius(trithemius(text), Mode.DECRYPT) == text


def test_characters_outside_alphabet_are_kept():
    assert trithemius("1 2 3") == "1 2 3"


def test_invalid_mode_is_rejected():
    with pytest.raises(ValueError):
        trithemius("ABC", 0)
import pytest

from cipherbox.alphabet.common import Mode
from cipherbox.alphabet.vigenere import vigenere


def test_worked_example():
    assert vigenere("HELLO", "ASK") == "HWVLG"


@pytest.mark.parametrize("key", ["ASK", "LEMON", "Z", "KEYWORD"])
def test_round_trip(key):
    text = "ATTACK AT DAWN"
    assert vigenere(vigenere(text, key), key, Mode.DECRYPT) == text


def test_key_a_is_identity():
    assert vigenere("HELLO", "A") == "HELLO"


def test_key_outside_alphabet_leaves_character():
    assert vigenere("HELLO", "a") == "HELLO"


def test_empty_key_is_rejected():
    with pytest.raises(ValueError):
        vigenere("HELLO", "")


def test_invalid_mode_is_rejected():
    with pytest.raises(ValueError):
        vigenere("HELLO", "KEY", 5)
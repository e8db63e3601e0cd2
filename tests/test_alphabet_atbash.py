import pytest

from cipherbox.alphabet.atbash import atbash


def test_default_alphabet_mirrors_letters():
    assert atbash("ABC") == "ZYX"


@pytest.mark.parametrize("text", ["HELLO WORLD", "ATTACK AT DAWN", "mixed Case 123"])
def test_atbash_is_an_involution(text):
    assert atbash(atbash(text)) == text


def test_characters_outside_alphabet_are_kept():
    assert atbash("123 abc!") == "123 abc!"


def test_custom_alphabet():
    assert atbash("abcd", "abc") == "cbad"


def test_too_long_alphabet_is_rejected():
    with pytest.raises(ValueError):
        atbash("A", "x" * 200)
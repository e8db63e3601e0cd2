import string

from cipherbox.rot13 import rot13


def test_known_word():
    assert rot13("Hello") == "Uryyb"


def test_involution():
    text = "The Quick Brown Fox, 123!"
    assert rot13(rot13(text)) == text


def test_non_letters_unchanged():
    text = "0123 !?-_ \u00e9\u00df"
    assert rot13(text) == text


def test_alphabet_halves_swap():
    assert rot13(string.ascii_uppercase) == string.ascii_uppercase[13:] + string.ascii_uppercase[:13]
    assert rot13(string.ascii_lowercase) == string.ascii_lowercase[13:] + string.ascii_lowercase[:13]
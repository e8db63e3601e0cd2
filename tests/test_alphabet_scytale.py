import pytest

from cipherbox.alphabet.common import Mode
from cipherbox.alphabet.scytale import pad, scytale


def test_worked_example():
    assert scytale("HELLOWORLD", 2) == "HWEOLRLLOD"


@pytest.mark.parametrize("strings", [1, 2, 3, 4, 7])
def test_round_trip_with_padding(strings):
    text = pad("ATTACKATDAWN", strings)
    assert scytale(scytale(text, strings), strings, Mode.DECRYPT) == text


def test_encryption_is_a_permutation():
    text = "SPARTAN RODS"
    assert sorted(scytale(text, 3)) == sorted(text)


def test_pad_fills_grid():
    padded = pad("HELLO", 3)
    assert len(padded) % 3 == 0
    assert padded.startswith("HELLO")
    assert set(padded[5:]) == {"Z"}


def test_pad_with_custom_fill():
    assert pad("AB", 3, "x") == "ABx"


def test_empty_text():
    assert scytale("", 3) == ""


@pytest.mark.parametrize("strings", [0, -1])
def test_invalid_strings_are_rejected(strings):
    with pytest.raises(ValueError):
        scytale("TEXT", strings)


def test_invalid_mode_is_rejected():
    with pytest.raises(ValueError):
        scytale("TEXT", 2, 3)
import pytest

from cipherbox.alphabet.common import MAX_LENGTH, Mode, validate_alphabet


def test_valid_alphabet_is_returned_unchanged():
    assert validate_alphabet("QWERTY") == "QWERTY"


def test_longest_allowed_alphabet_is_accepted():
    alphabet = "x" * (MAX_LENGTH - 1)
    assert validate_alphabet(alphabet) == alphabet


def test_alphabet_at_limit_is_rejected():
    with pytest.raises(ValueError):
        validate_alphabet("x" * MAX_LENGTH)


def test_empty_alphabet_is_rejected():
    with pytest.raises(ValueError):
        validate_alphabet("")


def test_non_string_alphabet_is_rejected():
    with pytest.raises(TypeError):
        validate_alphabet(["A", "B"])


def test_modes_are_opposite_signs():
    assert Mode.ENCRYPT + Mode.DECRYPT == 0
    assert Mode(-Mode.ENCRYPT) is Mode.DECRYPT


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        Mode(0)
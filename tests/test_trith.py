import pytest

from cipherbox.trith import shift, trith


def test_shift_values():
    assert shift(0) == 0
    assert shift(1) == 2
    assert shift(16) == 16


def test_shift_repeats_every_256():
    assert all(shift(index) == shift(index + 256) for index in range(256))


def test_round_trip():
    message = b"Hello"
    assert trith(trith(message, "E"), "D") == message


def test_first_byte_unchanged():
    assert trith(b"Zoo", "E")[0] == ord("Z")


def test_encrypted_bytes_below_modulus():
    encrypted = trith(bytes(range(256)), "E")
    assert len(encrypted) == 256
    assert max(encrypted) < 255


def test_invalid_mode():
    with pytest.raises(ValueError):
        trith(b"abc", "X")


def test_negative_index():
    with pytest.raises(ValueError):
        shift(-1)
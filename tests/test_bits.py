import pytest

from cipherbox.bits import (
    bytes_to_u32,
    bytes_to_u64,
    join_words,
    split_256_to_words,
    split_u64,
    u32_to_bytes,
    u64_to_bytes,
)


def test_split_u64_round_trip_with_join():
    value = 0x0123456789ABCDEF
    high, low = split_u64(value)
    assert join_words(low, high) == value


def test_split_u64_halves():
    high, low = split_u64(0x0123456789ABCDEF)
    assert high == 0x01234567
    assert low == 0x89ABCDEF


def test_join_words_order():
    assert join_words(1, 2) == (2 << 32) | 1


def test_u64_bytes_round_trip():
    data = bytes(range(1, 9))
    assert u64_to_bytes(bytes_to_u64(data)) == data


def test_u32_bytes_round_trip():
    data = b"\xde\xad\xbe\xef"
    assert bytes_to_u32(data) == 0xDEADBEEF
    assert u32_to_bytes(0xDEADBEEF) == data


def test_u64_to_bytes_truncates():
    assert u64_to_bytes((1 << 64) | 5) == u64_to_bytes(5)


def test_split_256_to_words():
    block = bytes(range(32))
    words = split_256_to_words(block)
    assert len(words) == 8
    assert b"".join(u32_to_bytes(word) for word in words) == block


@pytest.mark.parametrize("size", [0, 7, 9])
def test_bytes_to_u64_rejects_wrong_length(size):
    with pytest.raises(ValueError):
        bytes_to_u64(bytes(size))


def test_bytes_to_u32_rejects_wrong_length():
    with pytest.raises(ValueError):
        bytes_to_u32(b"abc")


def test_split_256_rejects_wrong_length():
    with pytest.raises(ValueError):
        split_256_to_words(bytes(31))
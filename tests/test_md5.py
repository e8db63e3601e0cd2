import hashlib

import pytest

from cipherbox.md5 import MD5, md5


def test_abc_digest():
    assert md5(b"abc").hex() == "900150983cd24fb0d6963f7d28e17f72"


@pytest.mark.parametrize("size", [0, 1, 3, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_standard_library(size):
    message = bytes(i % 251 for i in range(size))
    assert md5(message) == hashlib.md5(message).digest()


def test_str_is_utf8_encoded():
    assert md5("héllo") == hashlib.md5("héllo".encode()).digest()


@pytest.mark.parametrize("split", [0, 1, 63, 64, 65, 100])
def test_incremental_matches_one_shot(split):
    message = bytes(range(200)) * 2
    hasher = MD5(message[:split])
    hasher.update(message[split:])
    assert hasher.digest() == md5(message)


def test_digest_does_not_finalize():
    hasher = MD5(b"abc")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"def")
    assert hasher.digest() == hashlib.md5(b"abcdef").digest()


def test_hexdigest_matches_digest():
    hasher = MD5(b"message digest")
    assert hasher.hexdigest() == hashlib.md5(b"message digest").hexdigest()


def test_digest_length():
    assert len(md5(b"x" * 300)) == 16


def test_rejects_non_bytes():
    with pytest.raises(TypeError):
        MD5().update(3.5)
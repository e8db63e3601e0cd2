import io
import sys

import pytest

from cipherbox.arcfour import DEFAULT_KEY, arcfour, key_schedule, keystream, main


def test_known_vector_plaintext():
    assert arcfour(b"Plaintext", b"Key") == bytes.fromhex("BBF316E8D940AF0AD3")


def test_known_vector_pedia():
    assert arcfour(b"pedia", b"Wiki") == bytes.fromhex("1021BF0420")


def test_round_trip():
    message = b"attack at dawn, with zeros \x00 inside"
    assert arcfour(arcfour(message, DEFAULT_KEY), DEFAULT_KEY) == message


def test_str_arguments_match_bytes():
    assert arcfour("hello", "abc") == arcfour(b"hello", b"abc")


def test_key_schedule_is_permutation():
    state = key_schedule(DEFAULT_KEY)
    assert sorted(state) == list(range(256))


def test_keystream_leaves_state_untouched():
    state = key_schedule(b"abc")
    snapshot = list(state)
    stream = keystream(state, 20)
    assert len(stream) == 20
    assert state == snapshot
    assert keystream(state, 20) == stream


def test_keystream_prefix_property():
    state = key_schedule(b"abc")
    assert keystream(state, 30)[:10] == keystream(state, 10)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        key_schedule(b"")


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        keystream(key_schedule(b"abc"), -1)


def test_main_round_trips(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"hi\n")))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "[ 104 105 ]"
    assert lines[2] == lines[0]
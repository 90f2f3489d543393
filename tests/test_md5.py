import hashlib

import pytest

from sidez.md5 import MD5


def _md5_of(data: bytes) -> MD5:
    m = MD5()
    m.append(data)
    m.finish()
    return m


def test_empty_message_vector():
    assert _md5_of(b"").hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


def test_abc_vector():
    assert _md5_of(b"abc").hexdigest() == "900150983cd24fb0d6963f7d28e17f72"


def test_quick_brown_fox_vector():
    data = b"The quick brown fox jumps over the lazy dog"
    assert _md5_of(data).hexdigest() == "9e107d9d372bb6826bd81d3542a419d6"


@pytest.mark.parametrize("length", [1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_standard_library(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert _md5_of(data).digest() == hashlib.md5(data).digest()


@pytest.mark.parametrize("chunk", [1, 3, 17, 63, 64, 100])
def test_incremental_append_equals_single_append(chunk):
    data = bytes(range(256)) * 3
    m = MD5()
    for start in range(0, len(data), chunk):
        m.append(data[start:start + chunk])
    m.finish()
    assert m.digest() == _md5_of(data).digest()


def test_digest_is_zero_before_finish():
    m = MD5()
    m.append(b"some data")
    assert m.digest() == bytes(16)


def test_empty_append_changes_nothing():
    m = MD5()
    m.append(b"abc")
    m.append(b"")
    m.finish()
    assert m.digest() == hashlib.md5(b"abc").digest()


def test_reset_restores_initial_state():
    m = MD5()
    m.append(b"garbage that should be forgotten")
    m.finish()
    m.reset()
    assert m.digest() == bytes(16)
    m.append(b"abc")
    m.finish()
    assert m.digest() == hashlib.md5(b"abc").digest()


def test_hexdigest_matches_digest():
    m = _md5_of(b"sid tune data")
    assert m.hexdigest() == m.digest().hex()
    assert len(m.hexdigest()) == 32


def test_accepts_bytearray_and_memoryview():
    data = b"hello world"
    assert _md5_of(bytearray(data)).digest() == _md5_of(memoryview(data)).digest()


def test_rejects_text():
    m = MD5()
    with pytest.raises(TypeError):
        m.append("text")
import pytest

from pushswap.libft.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    original = bytes(buf)
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert all(b == ord("x") for b in buf[:5])
    assert buf[5:] == original[5:]


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert list(buf) == [0x41] * 3


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abcdef", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == b"..."


def test_memcpy_zero_length_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"zzzz", 0)
    assert dest == b"keep"


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    original = bytes(buf)
    memmove(buf, 0, 2, 4)
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"banana"
    idx = memchr(data, ord("n"), len(data))
    assert data[idx] == ord("n")
    assert ord("n") not in data[:idx]


def test_memchr_respects_length():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_zero_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(0)


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_sign_and_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff\x10", b"\x00\x01\x20"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)
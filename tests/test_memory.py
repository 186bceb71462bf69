import pytest

from minishell.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_zeroes_prefix_only():
    buf = bytearray(b"salutf")
    result = bzero(buf, 5)
    assert result is buf
    assert buf[:5] == bytes(5)
    assert buf[5:] == b"f"


def test_bzero_beyond_length_raises():
    with pytest.raises(IndexError):
        bzero(bytearray(b"ab"), 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


@pytest.mark.parametrize("nmemb, size", [(0, 5), (5, 0)])
def test_calloc_zero_gives_empty(nmemb, size):
    assert calloc(nmemb, size) == bytearray()


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_match():
    data = b"saksokd"
    assert memchr(data, ord("k"), len(data)) == data.index(b"k")


def test_memchr_respects_count():
    data = b"saksokd"
    assert memchr(data, ord("d"), 5) is None


def test_memchr_masks_to_byte():
    data = b"xya"
    assert memchr(data, 256 + ord("a"), 3) == data.index(b"a")


def test_memchr_missing_returns_none():
    assert memchr(b"saksokd", ord("g"), 5) is None


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"hbbhgfshgfsh", b"hbbbb", 3) == 0


def test_memcmp_returns_byte_difference():
    a, b = b"hbbhgfshgfsh", b"hbbbb"
    result = memcmp(a, b, 4)
    assert result == a[3] - b[3]
    assert result > 0
    assert memcmp(b, a, 4) == -result


def test_memcmp_count_too_large_raises():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dest = bytearray(b"bonjour")
    result = memcpy(dest, b"salut", 3)
    assert result is dest
    assert dest[:3] == b"sal"
    assert dest[3:] == b"jour"


def test_memcpy_same_object_returns_it():
    buf = bytearray(b"abc")
    assert memcpy(buf, buf, 3) is buf
    assert buf == bytearray(b"abc")


@pytest.mark.parametrize("dst, src", [(2, 0), (0, 2)])
def test_memmove_overlapping(dst, src):
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, dst, src, 4)
    assert buf[dst:dst + 4] == original[src:src + 4]
    assert len(buf) == len(original)


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(b"abcd"), 2, 0, 3)


def test_memset_fills_prefix():
    buf = bytearray(b"abcdef")
    memset(buf, ord("z"), 4)
    assert buf == bytearray(b"zzzzef")


def test_memset_negative_count_raises():
    with pytest.raises(ValueError):
        memset(bytearray(b"abc"), 0, -1)
"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_count(n: int, available: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > available:
        raise IndexError(f"byte count {n} exceeds buffer length {available}")


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buf to zero, in place."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if SIZE_MAX // nmemb < size:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the addressable size")
    return bytearray(nmemb * size)


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check_count(n, len(data))
    target = c & 0xFF
    index = bytes(data[:n]).find(target)
    return None if index == -1 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, min(len(a), len(b)))
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: bytearray, src: BytesLike, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest and return dest."""
    if dest is src:
        return dest
    _check_count(n, min(len(dest), len(src)))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move n bytes inside buf from offset src to offset dst; regions may overlap."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - max(dst, src))
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c and return buf."""
    _check_count(n, len(buf))
    buf[:n] = bytes([c & 0xFF]) * n
    return buf
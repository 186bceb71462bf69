"""String search, comparison and bounded-copy helpers with C-string semantics."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, NamedTuple, Optional, Union

CharLike = Union[str, int]
NUL = "\0"


class SizedCopy(NamedTuple):
    """Result of a bounded copy: the text produced and the length it tried to create."""

    text: str
    length: int


def _char(c: CharLike) -> str:
    """Turn a one-character string or an integer code into a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _c_string(text: str) -> str:
    """Return the part of text before the first NUL, as a C string would see it."""
    return text.split(NUL, 1)[0]


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c, len(text) when c is NUL, or None."""
    text = _c_string(text)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.find(ch)
    return None if index == -1 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c, len(text) when c is NUL, or None."""
    text = _c_string(text)
    ch = _char(c)
    if ch == NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index == -1 else index


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most n characters; return the code difference of the first mismatch.

    A missing first string compares as -1, a missing second string as equal.
    """
    _check_size(n, "length")
    if s1 is None:
        return -1
    if s2 is None:
        return 0
    left = _c_string(s1)[:n]
    right = _c_string(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue=NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Index of little inside the first n characters of big, or None.

    An empty needle is found at index 0.
    """
    _check_size(n, "length")
    little = _c_string(little)
    if not little:
        return 0
    index = _c_string(big)[:n].find(little)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> SizedCopy:
    """Copy src into a buffer of size characters, NUL included.

    Returns the text that fits and the full length of src.
    """
    _check_size(size, "size")
    src = _c_string(src)
    copied = src[: size - 1] if size else ""
    return SizedCopy(copied, len(src))


def strlcat(dst: str, src: str, size: int) -> SizedCopy:
    """Append src to dst inside a buffer of size characters, NUL included.

    Returns the resulting text and the length the full concatenation would have;
    when size does not exceed len(dst), dst is left as is and size + len(src) is
    reported.
    """
    _check_size(size, "size")
    dst = _c_string(dst)
    src = _c_string(src)
    if size <= len(dst):
        return SizedCopy(dst, size + len(src))
    room = size - len(dst) - 1
    return SizedCopy(dst + src[:room], len(dst) + len(src))


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start; empty past the end."""
    _check_size(start, "start")
    _check_size(length, "length")
    text = _c_string(text)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if text is None or charset is None:
        raise TypeError("strtrim needs a text and a character set")
    return _c_string(text).strip(_c_string(charset))


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _c_string(first) + _c_string(second)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(_c_string(text)))


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Visit every character with func(index, char).

    func may return a replacement character, or None to keep the character;
    the string with all replacements made is returned.
    """
    result = []
    for index, ch in enumerate(_c_string(text)):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)
"""Conversions between decimal text and fixed-width integers."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1


def _wrap(value: int, bits: int) -> int:
    """Reduce value to a two's-complement signed integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    if value >= modulus >> 1:
        value -= modulus
    return value


def _parse(text: str) -> int:
    """Read optional leading whitespace, one optional sign and a run of digits."""
    if text is None:
        raise TypeError("cannot convert None to a number")
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def atoi(text: str) -> int:
    """Leading decimal number of text as a 32-bit signed int; 0 if there is none.

    Values outside the range wrap around as 32-bit arithmetic does.
    """
    return _wrap(_parse(text), 32)


def atoll(text: str) -> int:
    """Leading decimal number of text as a 64-bit signed int; 0 if there is none.

    Values outside the range wrap around as 64-bit arithmetic does.
    """
    return _wrap(_parse(text), 64)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def utoa(n: int) -> str:
    """Decimal text of a 32-bit unsigned integer."""
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")
    return str(n)
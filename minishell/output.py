"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

from minishell.convert import itoa


def put_char(c: str, out: TextIO) -> None:
    """Write a single character."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    out.write(c)


def put_str(text: str, out: TextIO) -> None:
    """Write a string."""
    if text is None:
        raise TypeError("cannot write None")
    out.write(text)


def put_endl(text: str, out: TextIO) -> None:
    """Write a string followed by a newline."""
    put_str(text, out)
    out.write("\n")


def put_nbr(n: int, out: TextIO) -> None:
    """Write a 32-bit signed integer in decimal."""
    out.write(itoa(n))
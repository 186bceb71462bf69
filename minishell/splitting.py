"""Splitting command lines into words, with and without quote awareness."""

from __future__ import annotations

from typing import Iterator, List

QUOTES = ("'", '"')


def _check_sep(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def count_words(text: str, sep: str) -> int:
    """Number of maximal runs of characters other than sep."""
    return len(split_words(text, sep))


def split_words(text: str, sep: str) -> List[str]:
    """Split text on sep, dropping empty words."""
    _check_sep(sep)
    if text is None:
        raise TypeError("cannot split None")
    return [word for word in text.split(sep) if word]


def count_words_with_quotes(text: str, sep: str) -> int:
    """Count words, treating separators inside single or double quotes as text."""
    _check_sep(sep)
    count = 0
    in_word = False
    quote = None
    for ch in text:
        if ch in QUOTES:
            if quote is None:
                quote = ch
                if not in_word:
                    in_word = True
                    count += 1
            elif quote == ch:
                quote = None
        elif ch == sep and quote is None:
            in_word = False
        elif not in_word:
            in_word = True
            count += 1
    return count


def _quoted_words(text: str, sep: str) -> Iterator[str]:
    start = None
    quote = None
    for index, ch in enumerate(text):
        if start is None:
            if ch == sep:
                continue
            start = index
        if ch in QUOTES and (quote is None or quote == ch):
            quote = ch if quote is None else None
        elif ch == sep and quote is None:
            yield text[start:index]
            start = None
    if start is not None:
        yield text[start:]


def split_with_quotes(text: str, sep: str) -> List[str]:
    """Split text on sep, keeping quoted stretches (quotes included) inside one word.

    An unclosed quote runs to the end of the text.
    """
    _check_sep(sep)
    if text is None:
        raise TypeError("cannot split None")
    return list(_quoted_words(text, sep))
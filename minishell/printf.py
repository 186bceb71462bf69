"""A small printf with the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

from typing import Any, Iterator, List, TextIO, Tuple

from minishell.convert import itoa, utoa

_UINT_MASK = 2**32 - 1
_ULONG_MASK = 2**64 - 1


def hex_digits(n: int, upper: bool) -> str:
    """Hexadecimal digits of a non-negative integer, without prefix."""
    if n < 0:
        raise ValueError(f"cannot render a negative number in hex: {n}")
    return f"{n:X}" if upper else f"{n:x}"


def address(n: int) -> str:
    """Render a pointer value: '(nil)' for zero, otherwise 0x and lower-case hex."""
    if n < 0:
        raise ValueError(f"an address cannot be negative: {n}")
    if n == 0:
        return "(nil)"
    return "0x" + hex_digits(n, False)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - 2**32 if value > 2**31 - 1 else value


def _next(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def _char_arg(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c needs a character or an integer, got {type(value).__name__}")


def _int_arg(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} needs an integer, got {type(value).__name__}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> Tuple[str, int]:
    """Render one conversion; return its text and the count it adds."""
    if spec == "%":
        return "%", 1
    if spec == "c":
        return _char_arg(_next(args, spec)), 1
    if spec == "s":
        value = _next(args, spec)
        if value is None:
            text = "(null)"
        elif isinstance(value, str):
            text = value.split("\0", 1)[0]
        else:
            raise TypeError(f"%s needs a string, got {type(value).__name__}")
        return text, len(text)
    if spec == "p":
        value = _next(args, spec)
        text = address(0 if value is None else _int_arg(value, spec) & _ULONG_MASK)
        return text, len(text)
    if spec in ("d", "i"):
        text = itoa(_to_int32(_int_arg(_next(args, spec), spec)))
        return text, len(text)
    if spec == "u":
        text = utoa(_int_arg(_next(args, spec), spec) & _UINT_MASK)
        return text, len(text)
    if spec in ("x", "X"):
        value = _int_arg(_next(args, spec), spec) & _UINT_MASK
        text = hex_digits(value, spec == "X")
        return text, len(text)
    # Unknown conversions print the character alone but count as two.
    return spec, 2


def _render(fmt: str, args: Tuple[Any, ...]) -> Tuple[str, int]:
    if fmt is None:
        raise TypeError("format string must not be None")
    parts: List[str] = []
    count = 0
    values = iter(args)
    chars = iter(fmt.split("\0", 1)[0])
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        text, added = _convert(spec, values)
        parts.append(text)
        count += added
    return "".join(parts), count


def format(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the rendered arguments."""
    return _render(fmt, args)[0]


def print_formatted(out: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to out and return the character count."""
    text, count = _render(fmt, args)
    out.write(text)
    return count
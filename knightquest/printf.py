"""Formatted output with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO, Union

CONVERSIONS = "cspdiuxX%"

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _to_int32(value: int) -> int:
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _to_uint32(value: int) -> int:
    return value & ((1 << _INT_BITS) - 1)


def _char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion: str, arg: Any) -> str:
    if conversion == "c":
        return _char(arg)
    if conversion == "s":
        return "(null)" if arg is None else str(arg)
    if conversion == "p":
        if not arg:
            return "(nil)"
        return "0x" + format(int(arg) & _POINTER_MASK, "x")
    if conversion in "di":
        return str(_to_int32(int(arg)))
    if conversion == "u":
        return str(_to_uint32(int(arg)))
    if conversion == "x":
        return format(_to_uint32(int(arg)), "x")
    return format(_to_uint32(int(arg)), "X")


def _render(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char != "%":
            yield char
            pos += 1
            continue
        if pos + 1 >= length:
            # A lone trailing '%' is consumed and produces nothing.
            pos += 1
            continue
        conversion = fmt[pos + 1]
        if conversion not in CONVERSIONS:
            yield char
            pos += 1
            continue
        pos += 2
        if conversion == "%":
            yield "%"
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        yield _convert(conversion, arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    A '%' followed by anything other than a known conversion is kept as is.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    _target(stream).write(text)
    return len(text)


def number_length(n: int) -> int:
    """Number of characters needed to print ``n`` in decimal, sign included."""
    digits = 1
    value = abs(n)
    while value >= 10:
        value //= 10
        digits += 1
    return digits + (1 if n < 0 else 0)


def unsigned_length(n: int) -> int:
    """Number of decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return number_length(n)


def hex_length(n: int) -> int:
    """Number of hexadecimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    digits = 1
    while n >= 16:
        n //= 16
        digits += 1
    return digits


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> int:
    """Write one character and return 1."""
    _target(stream).write(_char(c))
    return 1


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` (or "(null)" for None) and return its length."""
    if text is None:
        text = "(null)"
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline and return the characters written."""
    line = text + "\n"
    _target(stream).write(line)
    return len(line)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal and return the characters written."""
    text = str(n)
    _target(stream).write(text)
    return len(text)
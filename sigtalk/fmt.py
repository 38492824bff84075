"""A small printf-style formatter and helpers that write text to a stream."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from sigtalk.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_INT_MIN = -(1 << 31)
_PTR_MASK = (1 << 64) - 1

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


def _to_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    return (int(value) - _INT_MIN) % (1 << 32) + _INT_MIN


def _to_uint32(value: int) -> int:
    """Reduce ``value`` to an unsigned 32-bit integer."""
    return int(value) & _UINT_MASK


def _as_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _as_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _as_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address &= _PTR_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _as_char,
    "s": _as_str,
    "p": _as_pointer,
    "d": lambda value: itoa(_to_int32(value)),
    "i": lambda value: itoa(_to_int32(value)),
    "u": lambda value: str(_to_uint32(value)),
    "x": lambda value: format(_to_uint32(value), "x"),
    "X": lambda value: format(_to_uint32(value), "X"),
}


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Supported conversions are %c, %s, %p, %d, %i, %u, %x, %X and %%.
    Integers are taken as 32-bit values, signed for %d and %i and unsigned
    for %u, %x and %X. A None string prints as "(null)" and a null pointer
    as "(nil)". An unknown conversion prints nothing and consumes no
    argument; a lone '%' at the end is printed as is.
    """
    if fmt is None:
        raise TypeError("format string is required")
    values = iter(args)

    def expand(match: re.Match[str]) -> str:
        spec = match.group(1)
        if spec == "%":
            return "%"
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            return ""
        return convert(_next_arg(values))

    return _DIRECTIVE.sub(expand, fmt)


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _stream(file).write(text)
    return len(text)


def put_char(c: int | str, file: TextIO | None = None) -> None:
    """Write one character; an integer code is taken as a byte value."""
    _stream(file).write(_as_char(c))


def put_str(s: str | None, file: TextIO | None = None) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    _stream(file).write(s)


def put_endl(s: str | None, file: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _stream(file).write(s + "\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write ``n`` in decimal as a signed 32-bit integer."""
    _stream(file).write(itoa(_to_int32(n)))
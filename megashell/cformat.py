"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF
_SIGN_BIT = 0x80000000

_CONSUMING = frozenset("cspdiuxX")


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return NULL_STRING if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULONG_MASK
    if address == 0:
        return NULL_POINTER
    return f"0x{address:x}"


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in _CONSUMING:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    if spec == "x":
        return f"{int(value) & _UINT_MASK:x}"
    return f"{int(value) & _UINT_MASK:X}"


def cformat(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown conversions produce nothing and consume no argument.
    A lone ``%`` at the end of ``fmt`` produces nothing.
    """
    if fmt is None:
        raise TypeError("format string must not be None")
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        pieces.append(_convert(next(chars, ""), values))
    return "".join(pieces)


def print_format(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = cformat(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
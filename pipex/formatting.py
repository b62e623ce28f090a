"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"


def _to_int32(value: int) -> int:
    return ((int(value) + 2**31) % 2**32) - 2**31


def _to_uint32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def _unsigned(value: int, digits: str) -> str:
    base = len(digits)
    out = []
    while True:
        value, rem = divmod(value, base)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + _unsigned(int(value) & 0xFFFFFFFFFFFFFFFF, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_to_int32(value))
    if spec == "u":
        return _unsigned(_to_uint32(value), _DECIMAL)
    if spec == "x":
        return _unsigned(_to_uint32(value), _LOWER_HEX)
    return _unsigned(_to_uint32(value), _UPPER_HEX)


def format_string(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the result.

    Unknown conversions produce nothing; a trailing lone ``%`` is kept.
    """
    remaining = iter(args)
    pieces = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch == "%" and i + 1 < len(fmt):
            pieces.append(_convert(fmt[i + 1], remaining))
            i += 2
        else:
            pieces.append(ch)
            i += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered ``fmt`` to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)
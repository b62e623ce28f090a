"""String helpers used to parse command lines and environment values."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional

_WHITESPACE = " \t\n\v\f\r"
_TERMINATORS = ("", "\0")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    An optional single sign is accepted. Parsing stops at the first
    non-digit; a string with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) > 1:
        raise ValueError("separator must be a single character")
    if sep in _TERMINATORS:
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove any characters found in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def compare_prefix(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the first differing code points (a missing
    character counts as zero), or 0 when the prefixes are equal.
    """
    if n <= 0:
        return 0
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == "\0":
            return 0
    return 0


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def find_char(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; the terminator maps to the end."""
    if char in _TERMINATORS:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; the terminator maps to the end."""
    if char in _TERMINATORS:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index
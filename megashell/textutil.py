"""Small text helpers: integer parsing and formatting, splitting, trimming, searching."""

from __future__ import annotations

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _scan_number(text: str) -> tuple[int, int]:
    """Parse leading whitespace, an optional sign and digits.

    Returns the parsed value and the index just past the last digit.
    """
    pos = len(text) - len(text.lstrip(_SPACE))
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    value = int(digits) if digits else 0
    return sign * value, pos


def atoi(text: str) -> int:
    """Parse a leading integer, ignoring anything that follows it."""
    value, _ = _scan_number(text)
    return value


def atol(text: str) -> int:
    """Parse an integer that must be followed by nothing or a space.

    Any other trailing character makes the result 0.
    """
    value, end = _scan_number(text)
    if end < len(text) and text[end] != " ":
        return 0
    return value


def itoa(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, or None when there is none.
    An empty needle matches at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    if len(needle) > length:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]
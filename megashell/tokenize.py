"""Splitting of a command line into words, keeping double-quoted text whole."""

from __future__ import annotations

QUOTE = '"'


def string_split(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, treating double-quoted text as one word.

    A word that starts with a quote runs to the next quote, which is
    dropped; an unterminated quote runs to the end of the text. Quotes
    inside an unquoted word are kept as ordinary characters.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    tokens: list[str] = []
    pos = 0
    size = len(text)
    while pos < size:
        ch = text[pos]
        if ch == sep:
            pos += 1
        elif ch == QUOTE:
            end = text.find(QUOTE, pos + 1)
            if end < 0:
                end = size
            tokens.append(text[pos + 1:end])
            pos = end + 1
        else:
            end = text.find(sep, pos)
            if end < 0:
                end = size
            tokens.append(text[pos:end])
            pos = end
    return tokens
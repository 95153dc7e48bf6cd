"""Small string helpers used by the command-line parsing and path lookup."""

from __future__ import annotations

import re
from itertools import zip_longest

_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace and trailing junk.

    Text without a leading number yields 0.
    """
    match = _ATOI_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index == -1 else index


def strncmp(first: str | None, second: str | None, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, the end of
    a string counting as code 0. A missing string compares equal to anything.
    """
    if first is None or second is None or n <= 0:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0
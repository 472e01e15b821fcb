"""String helpers used to split command lines and search paths."""

from __future__ import annotations

from itertools import islice, takewhile, zip_longest

_WHITESPACE = " \t\n\v\f\r"


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on runs of ``separator``, dropping empty words."""
    return [word for word in text.split(separator) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring leading whitespace.

    Parsing stops at the first non-digit; text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: "0" <= ch <= "9", rest))
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return f"{number:d}"


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start beyond the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first occurrence that lies wholly inside that
    prefix, 0 for an empty needle, or None when there is no such occurrence.
    """
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters of two strings.

    Returns the code-point difference at the first mismatch, treating the
    end of a string as a NUL character, or 0 when they agree.
    """
    pairs = zip_longest(first, second, fillvalue="\0")
    for left, right in islice(pairs, max(count, 0)):
        if left != right:
            return ord(left) - ord(right)
    return 0
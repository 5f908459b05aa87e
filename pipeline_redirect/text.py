"""String helpers used to parse command lines, paths and arguments."""

from __future__ import annotations

from itertools import zip_longest

__all__ = [
    "split",
    "strcmp",
    "strncmp",
    "atoi",
    "itoa",
    "strtrim",
    "strnstr",
    "substr",
]

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_WHITESPACE = " \t\n\r\v\f"


def _wrap_int(value: int) -> int:
    """Reduce *value* to a signed 32-bit integer, wrapping on overflow."""
    value &= (1 << _INT_BITS) - 1
    if value > _INT_MAX:
        value -= 1 << _INT_BITS
    return value


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in s.split(sep) if field]


def strcmp(a: str, b: str) -> int:
    """Compare two strings by code point.

    Returns the difference between the first pair of differing characters,
    where the end of a string counts as code point 0, or 0 when equal.
    """
    for x, y in zip_longest(a, b, fillvalue="\0"):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most the first *n* characters of two strings."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    return strcmp(a[:n], b[:n])


def atoi(s: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and
    parsing stops at the first non-digit.  The result wraps to a signed
    32-bit integer.
    """
    rest = s.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer in decimal."""
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def strtrim(s: str, chars: str | None) -> str:
    """Remove every leading and trailing character of *s* found in *chars*."""
    if chars is None:
        return s
    return s.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find *needle* lying wholly within the first *length* characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* starting at *start*."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]
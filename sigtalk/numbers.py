"""Lenient integer parsing and formatting with C integer limits."""

from __future__ import annotations

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_WHITESPACE = " \t\n\v\f\r"


def parse_long(text: str) -> int:
    """Parse a leading decimal integer, saturating at the 64-bit limits.

    Leading whitespace is skipped, one optional sign is honoured, and parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    n = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digit = ord(ch) - ord("0")
        if n > (LONG_MAX - digit) // 10:
            return LONG_MAX if sign == 1 else LONG_MIN
        n = n * 10 + digit
    return n * sign


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def parse_int(text: str) -> int:
    """Parse like parse_long, then truncate to a signed 32-bit integer."""
    return _wrap_int32(parse_long(text))


def itoa(n: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit int")
    return str(n)
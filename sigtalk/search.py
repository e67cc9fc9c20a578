"""Searching and comparing NUL-terminated text.

A string ends at its first NUL character, if it has one; text after it is
never looked at. Search functions return an index, or None when nothing
is found.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[int, str]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def _terminated(s: str) -> str:
    end = s.find("\0")
    return s if end < 0 else s[:end]


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s.

    An integer c is reduced into the ASCII range modulo 128. Searching for
    NUL yields the index of the terminator.
    """
    code = _code(c) % 128
    text = _terminated(s)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s.

    An integer c is truncated to a byte. Searching for NUL yields the index
    of the terminator.
    """
    code = _code(c) & 0xFF
    text = _terminated(s)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters, stopping at the end of first.

    Returns the code difference of the first unequal pair, or 0.
    """
    a = _terminated(first)
    b = _terminated(second)
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of needle lying wholly within the first
    length characters of haystack, or None. An empty needle matches at 0."""
    pattern = _terminated(needle)
    if not pattern:
        return 0
    if length <= 0:
        return None
    window = _terminated(haystack)[:length]
    index = window.find(pattern)
    return None if index < 0 else index
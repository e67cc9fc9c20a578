"""Bounded copying, joining, slicing, trimming, splitting and mapping of text.

Like the search helpers, these treat a string as ending at its first NUL
character. Text after a NUL is ignored.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from sigtalk.search import strchr, strlen


def _text(s: str) -> str:
    return s[:strlen(s)]


def _single_char(value: object, what: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{what} must be a single character, got {value!r}")
    return value


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size characters, terminator included.

    Returns the text that fits (at most size - 1 characters) and the full
    length of src, so truncation shows as a length of size or more.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    text = _text(src)
    return text[:max(size - 1, 0)], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a destination of size characters.

    Returns the resulting text and the length it tried to create. When size
    does not exceed the length of dst, dst is left as it is and the length
    reported is size plus the length of src.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    head = _text(dst)
    tail = _text(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing operand is an error."""
    if first is None or second is None:
        raise TypeError("strjoin needs two strings")
    return _text(first) + _text(second)


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """Remove characters found in charset from both ends of s."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    text = _text(s)
    start, end = 0, len(text)
    while start < end and strchr(charset, text[start]) is not None:
        start += 1
    while end > start and strchr(charset, text[end - 1]) is not None:
        end -= 1
    return text[start:end]


def split(s: str, sep: str) -> List[str]:
    """Split s on the character sep, dropping empty pieces."""
    separator = _single_char(sep, "separator")
    text = _text(s)
    if separator == "\0":
        return [text] if text else []
    return [piece for piece in text.split(separator) if piece]


def strmapi(s: str, func: Optional[Callable[[int, str], str]]) -> str:
    """Build a new string from func(index, char) for each character of s."""
    text = _text(s)
    if not text:
        return ""
    if func is None:
        raise TypeError("strmapi needs a mapping function")
    return "".join(
        _single_char(func(index, ch), "mapped value")
        for index, ch in enumerate(text)
    )


def striteri(s: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) for each character of s.

    A character returned by func replaces the one it was given; None keeps
    it. The updated string is returned.
    """
    out = []
    for index, ch in enumerate(_text(s)):
        result = func(index, ch)
        out.append(ch if result is None else _single_char(result, "replacement"))
    return "".join(out)
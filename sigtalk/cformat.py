"""A small printf-style formatter supporting %d %i %s %c %% %u %x %X %p."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

from sigtalk.numbers import itoa

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_POINTER_MASK = 2**64 - 1


def _as_int32(value: int) -> int:
    value = int(value) & 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _as_uint32(value: int) -> int:
    return int(value) & 0xFFFFFFFF


def format_base(value: int, digits: str) -> str:
    """Render value, taken as an unsigned 32-bit integer, with the given digit set."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    n = _as_uint32(value)
    out = []
    while True:
        n, rem = divmod(n, base)
        out.append(digits[rem])
        if n == 0:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Render an address as 0x-prefixed lowercase hex, or "(nil)" for null."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _POINTER_MASK, "x")


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def cformat(template: str, *args: Any) -> str:
    """Expand the conversions in template with args and return the text.

    Unknown conversions are dropped together with their percent sign, and a
    lone trailing percent sign produces nothing. Surplus arguments are ignored.
    """
    values: Iterator[Any] = iter(args)

    def take() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise ValueError(
                f"not enough arguments for format {template!r}"
            ) from None

    pieces = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec in ("d", "i"):
            pieces.append(itoa(_as_int32(take())))
        elif spec == "s":
            value = take()
            pieces.append("(null)" if value is None else str(value))
        elif spec == "c":
            pieces.append(_format_char(take()))
        elif spec == "%":
            pieces.append("%")
        elif spec == "u":
            pieces.append(format_base(take(), _DECIMAL))
        elif spec == "x":
            pieces.append(format_base(take(), _HEX_LOWER))
        elif spec == "X":
            pieces.append(format_base(take(), _HEX_UPPER))
        elif spec == "p":
            pieces.append(format_pointer(take()))
    return "".join(pieces)


def cprintf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); return its length."""
    text = cformat(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)


def putendl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes only the newline."""
    out = stream if stream is not None else sys.stdout
    if text is not None:
        out.write(text)
    out.write("\n")
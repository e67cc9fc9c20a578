"""Byte-buffer primitives: filling, zeroing, copying, searching, comparing.

Buffers that are written to must be mutable (bytearray or memoryview).
Lengths that reach past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2**64 - 1


def _check_length(length: int, *buffers: BytesLike) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buffer in buffers:
        if length > len(buffer):
            raise ValueError(
                f"length {length} exceeds buffer of size {len(buffer)}"
            )


def _check_span(buffer: BytesLike, start: int, length: int) -> None:
    if start < 0 or start + length > len(buffer):
        raise ValueError(
            f"span [{start}, {start + length}) lies outside buffer "
            f"of size {len(buffer)}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first length bytes of buffer to value (as an unsigned byte)."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Zero the first length bytes of buffer."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes, at least one byte long.

    Raises OverflowError when the total would not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total == 0:
        total = 1
    elif total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes overflows size_t")
    return bytearray(total)


def memcpy(dst: bytearray, src: BytesLike, length: int) -> bytearray:
    """Copy length bytes from the start of src to the start of dst."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Move length bytes within buffer from offset src to offset dst.

    The regions may overlap; the result is as if the source were copied
    out first.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if length == 0 or dst == src:
        return buffer
    _check_span(buffer, src, length)
    _check_span(buffer, dst, length)
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memchr(data: BytesLike, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to value within the first
    length bytes, or None."""
    _check_length(length, data)
    target = value & 0xFF
    index = bytes(data[:length]).find(target)
    return None if index < 0 else index


def memcmp(first: BytesLike, second: BytesLike, length: int) -> int:
    """Compare the first length bytes; return the difference of the first
    unequal pair, or 0 if they match."""
    _check_length(length, first, second)
    for a, b in zip(bytes(first[:length]), bytes(second[:length])):
        if a != b:
            return a - b
    return 0
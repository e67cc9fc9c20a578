"""Bit-level wire format for messages carried one signal per bit.

Every value travels most significant bit first. A message is its bytes
followed by a newline byte. The extended protocol first sends the sender's
process id as 32 bits, so the receiver knows where to send acknowledgements
and the final delivery notice.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Union

PID_BITS = 32
CHAR_BITS = 8
TERMINATOR = ord("\n")

ByteLike = Union[int, str, bytes, bytearray]


class Bit(enum.IntEnum):
    """A single transmitted bit."""

    ZERO = 0
    ONE = 1


class EventKind(enum.Enum):
    """What a decoder has just completed."""

    BYTE = "byte"
    PID = "pid"
    END = "end"


@dataclass(frozen=True)
class Event:
    """A completed unit: a byte, a sender pid, or the end of a message.

    For END the value is the pid of the client whose message ended.
    """

    kind: EventKind
    value: int


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _byte_value(char: ByteLike) -> int:
    if isinstance(char, (bytes, bytearray)):
        if len(char) != 1:
            raise ValueError(f"expected a single byte, got {char!r}")
        return char[0]
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
        if code > 0xFF:
            raise ValueError(f"character {char!r} does not fit in one byte")
        return code
    code = int(char)
    if not -128 <= code <= 0xFF:
        raise ValueError(f"{code} does not fit in one byte")
    return code & 0xFF


def encode_bits(value: int, width: int) -> List[Bit]:
    """The low width bits of value, most significant first."""
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    return [Bit((value >> shift) & 1) for shift in range(width - 1, -1, -1)]


def encode_char(char: ByteLike) -> List[Bit]:
    """The eight bits of one byte, given as an int, a byte or a character."""
    return encode_bits(_byte_value(char), CHAR_BITS)


def encode_message(message: Union[str, bytes, bytearray]) -> List[Bit]:
    """All bits of message followed by the newline terminator.

    Text is encoded as UTF-8; the message ends at its first NUL byte.
    """
    if isinstance(message, str):
        data = message.encode("utf-8", errors="surrogateescape")
    else:
        data = bytes(message)
    data = data.split(b"\0", 1)[0]
    bits: List[Bit] = []
    for byte in data + bytes([TERMINATOR]):
        bits.extend(encode_char(byte))
    return bits


def encode_pid(pid: int) -> List[Bit]:
    """The 32 bits of a process id."""
    return encode_bits(pid, PID_BITS)


@dataclass
class CharDecoder:
    """Assembles bytes from a stream of bits."""

    current: int = 0
    bit_count: int = 0

    def feed(self, bit: Union[Bit, int]) -> Optional[Event]:
        """Take one bit; return a BYTE event when eight have arrived."""
        self.current = ((self.current << 1) | Bit(bit)) & 0xFF
        self.bit_count += 1
        if self.bit_count < CHAR_BITS:
            return None
        value = self.current
        self.current = 0
        self.bit_count = 0
        return Event(EventKind.BYTE, value)


@dataclass
class BonusDecoder:
    """Decodes a pid preamble and then message bytes up to the terminator.

    While client_pid is 0 the decoder collects pid bits; afterwards it
    collects bytes until a newline, which ends the session.
    """

    client_pid: int = 0
    current: int = 0
    bit_count: int = 0
    _pending_pid: int = field(default=0, init=False, repr=False)

    def feed(self, bit: Union[Bit, int]) -> Optional[Event]:
        """Take one bit; return a PID, BYTE or END event when one completes."""
        value = Bit(bit)
        self.bit_count += 1
        if self.client_pid == 0:
            self._pending_pid = ((self._pending_pid << 1) | value) & 0xFFFFFFFF
            if self.bit_count < PID_BITS:
                return None
            pid = _to_int32(self._pending_pid)
            self.client_pid = pid
            self._pending_pid = 0
            self.bit_count = 0
            return Event(EventKind.PID, pid)
        self.current = ((self.current << 1) | value) & 0xFF
        if self.bit_count < CHAR_BITS:
            return None
        byte = self.current
        self.current = 0
        self.bit_count = 0
        if byte == TERMINATOR:
            pid = self.client_pid
            self.client_pid = 0
            return Event(EventKind.END, pid)
        return Event(EventKind.BYTE, byte)
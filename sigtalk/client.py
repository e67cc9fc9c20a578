"""Sends a message to a server one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Union

from sigtalk.cformat import cprintf
from sigtalk.numbers import parse_int
from sigtalk.protocol import Bit, ByteLike, encode_char, encode_message, encode_pid

KillFunc = Callable[[int, int], None]

_PROG = "sigtalk-client"
_POLL_SECONDS = 0.00005


class Client:
    """Sends bits as SIGUSR1 (0) and SIGUSR2 (1), waiting for an ack after each.

    In bonus mode the message is preceded by this process's pid, bit acks
    arrive as SIGUSR2 and the delivery notice as SIGUSR1.
    """

    def __init__(
        self,
        server_pid: int,
        bonus: bool = False,
        kill: Optional[KillFunc] = None,
        wait_ack: Optional[Callable[[], None]] = None,
    ) -> None:
        if server_pid <= 0:
            raise ValueError(f"invalid server pid {server_pid}")
        self.server_pid = server_pid
        self.bonus = bonus
        self.delivered = False
        self._kill = kill if kill is not None else os.kill
        self._wait_ack = wait_ack if wait_ack is not None else self._wait_for_ack
        self._acked = False

    def _wait_for_ack(self) -> None:
        while not self._acked:
            time.sleep(_POLL_SECONDS)

    def _wait_for_delivery(self) -> None:
        while not self.delivered:
            time.sleep(_POLL_SECONDS)

    def _on_bit_ack(self, signum: int, frame: object) -> None:
        self._acked = True

    def _on_final_ack(self, signum: int, frame: object) -> None:
        if signum == signal.SIGUSR1:
            self.delivered = True

    @contextmanager
    def _listening(self) -> Iterator[None]:
        if self.bonus:
            handlers = {
                signal.SIGUSR2: self._on_bit_ack,
                signal.SIGUSR1: self._on_final_ack,
            }
        else:
            handlers = {signal.SIGUSR1: self._on_bit_ack}
        previous = {sig: signal.signal(sig, h) for sig, h in handlers.items()}
        try:
            yield
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)

    def send_bit(self, bit: Union[Bit, int]) -> None:
        """Send one bit and wait until it is acknowledged."""
        value = Bit(bit)
        self._acked = False
        sig = signal.SIGUSR2 if value is Bit.ONE else signal.SIGUSR1
        self._kill(self.server_pid, sig)
        self._wait_ack()

    def send_char(self, char: ByteLike) -> None:
        """Send the eight bits of one byte."""
        for bit in encode_char(char):
            self.send_bit(bit)

    def send_pid(self, pid: int) -> None:
        """Send a process id as 32 bits."""
        for bit in encode_pid(pid):
            self.send_bit(bit)

    def send_message(self, message: Union[str, bytes]) -> None:
        """Send message and its newline terminator.

        In bonus mode this process's pid is sent first.
        """
        if self.bonus:
            self.send_pid(os.getpid())
        for bit in encode_message(message):
            self.send_bit(bit)


def main(argv: Optional[List[str]] = None) -> int:
    """Send one message: [--bonus] <server_pid> <message>."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = args[:1] == ["--bonus"]
    if bonus:
        args = args[1:]
    if len(args) != 2:
        cprintf("Error: Invalid arguments\n")
        cprintf("Usage: %s [--bonus] <server_pid> <message>\n", _PROG)
        if bonus:
            cprintf('Example: %s --bonus 12345 "Hello World"\n', _PROG)
        return 1
    server_pid = parse_int(args[0])
    if server_pid <= 0:
        cprintf("Error: Invalid PID\n")
        return 1
    client = Client(server_pid, bonus=bonus)
    try:
        with client._listening():
            client.send_message(args[1])
            if bonus:
                client._wait_for_delivery()
    except OSError as exc:
        cprintf("Error: %s\n", str(exc))
        return 1
    if client.delivered:
        cprintf("Message received by server!\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
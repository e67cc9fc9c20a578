"""Receives messages sent one signal per bit and writes them out."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Callable, List, Optional

from sigtalk.cformat import cprintf
from sigtalk.protocol import Bit, BonusDecoder, CharDecoder, EventKind

KillFunc = Callable[[int, int], None]


class Server:
    """Decodes SIGUSR1 (bit 0) and SIGUSR2 (bit 1) into output bytes.

    In the plain mode every bit is acknowledged with SIGUSR1 to its sender.
    In the bonus mode each message starts with the client's pid, every bit
    is acknowledged with SIGUSR2, and the end of a message is confirmed with
    SIGUSR1 to the client.
    """

    def __init__(
        self,
        bonus: bool = False,
        output: Optional[BinaryIO] = None,
        kill: Optional[KillFunc] = None,
    ) -> None:
        self.bonus = bonus
        self._output = output if output is not None else sys.stdout.buffer
        self._kill = kill if kill is not None else os.kill
        self._plain = CharDecoder()
        self._session = BonusDecoder()
        self.client_pid = 0

    def _write(self, data: bytes) -> None:
        self._output.write(data)
        self._output.flush()

    @staticmethod
    def _bit_for(sig: int) -> Bit:
        return Bit.ZERO if sig == signal.SIGUSR1 else Bit.ONE

    def handle(self, sig: int, sender_pid: int) -> None:
        """Process one received signal from sender_pid."""
        bit = self._bit_for(sig)
        if not self.bonus:
            self.client_pid = sender_pid
            event = self._plain.feed(bit)
            if event is not None:
                self._write(bytes([event.value]))
            self._kill(sender_pid, signal.SIGUSR1)
            return

        known = self._session.client_pid
        target = sender_pid if known == 0 else known
        event = self._session.feed(bit)
        self._kill(target, signal.SIGUSR2)
        self.client_pid = self._session.client_pid
        if event is None:
            return
        if event.kind is EventKind.PID:
            self._write(b"PID OK\n")
        elif event.kind is EventKind.BYTE:
            self._write(bytes([event.value]))
        else:
            self._write(b"\n")
            self._kill(event.value, signal.SIGUSR1)

    def serve(self) -> None:
        """Wait for signals forever, handling each with its sender's pid."""
        if not hasattr(signal, "sigwaitinfo"):
            raise RuntimeError("this platform cannot report a signal's sender")
        signals = {signal.SIGUSR1, signal.SIGUSR2}
        previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.handle(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def main(argv: Optional[List[str]] = None) -> int:
    """Print this process id, then receive messages until interrupted."""
    parser = argparse.ArgumentParser(
        prog="sigtalk-server",
        description="Receive text sent bit by bit with SIGUSR1 and SIGUSR2.",
    )
    parser.add_argument(
        "--bonus",
        action="store_true",
        help="expect a pid preamble and confirm each delivered message",
    )
    args = parser.parse_args(argv)
    server = Server(bonus=args.bonus)
    cprintf("%d\n", os.getpid())
    sys.stdout.flush()
    try:
        server.serve()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
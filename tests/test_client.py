import io
import os
import signal

import pytest

from sigtalk.client import Client, main
from sigtalk.protocol import BonusDecoder, CharDecoder, EventKind
from sigtalk.server import Server


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, sig):
        self.calls.append((pid, sig))


def bits_of(calls):
    return [1 if sig == signal.SIGUSR2 else 0 for _, sig in calls]


def linked(bonus):
    out = io.BytesIO()
    server_kills = Recorder()
    server = Server(bonus=bonus, output=out, kill=server_kills)
    targets = []
    acks = []

    def deliver(pid, sig):
        targets.append(pid)
        server.handle(sig, 555)

    client = Client(4242, bonus=bonus, kill=deliver, wait_ack=lambda: acks.append(1))
    return client, out, server_kills, targets, acks


@pytest.mark.parametrize("pid", [0, -3])
def test_rejects_non_positive_server_pid(pid):
    with pytest.raises(ValueError):
        Client(pid)


def test_send_bit_rejects_invalid_bit():
    client = Client(1, kill=Recorder(), wait_ack=lambda: None)
    with pytest.raises(ValueError):
        client.send_bit(2)


def test_send_bit_waits_for_ack_after_each_signal():
    kills = Recorder()
    order = []
    client = Client(9, kill=lambda p, s: (kills(p, s), order.append("kill")),
                    wait_ack=lambda: order.append("wait"))
    client.send_bit(1)
    client.send_bit(0)
    assert kills.calls == [(9, signal.SIGUSR2), (9, signal.SIGUSR1)]
    assert order == ["kill", "wait", "kill", "wait"]


def test_send_char_decodes_back():
    kills = Recorder()
    client = Client(9, kill=kills, wait_ack=lambda: None)
    client.send_char("Z")
    decoder = CharDecoder()
    events = [e for e in map(decoder.feed, bits_of(kills.calls)) if e]
    assert [e.value for e in events] == [ord("Z")]


def test_send_pid_decodes_back():
    kills = Recorder()
    client = Client(9, kill=kills, wait_ack=lambda: None)
    client.send_pid(31337)
    decoder = BonusDecoder()
    events = [e for e in map(decoder.feed, bits_of(kills.calls)) if e]
    assert len(events) == 1
    assert events[0].kind is EventKind.PID
    assert events[0].value == 31337


def test_plain_round_trip_through_server():
    client, out, server_kills, targets, acks = linked(bonus=False)
    client.send_message("hello")
    assert out.getvalue() == b"hello\n"
    assert set(targets) == {4242}
    assert len(acks) == len(targets) == len(server_kills.calls)


def test_bonus_round_trip_through_server():
    client, out, server_kills, targets, acks = linked(bonus=True)
    client.send_message("hi")
    assert out.getvalue() == b"PID OK\nhi\n"
    assert server_kills.calls[-1] == (os.getpid(), signal.SIGUSR1)
    assert len(acks) == len(targets)


def test_main_wrong_argument_count(capsys):
    assert main(["123"]) == 1
    assert "Error: Invalid arguments" in capsys.readouterr().out


def test_main_bonus_wrong_argument_count(capsys):
    assert main(["--bonus", "only"]) == 1
    assert "Error: Invalid arguments" in capsys.readouterr().out


@pytest.mark.parametrize("pid_text", ["0", "-7", "abc"])
def test_main_invalid_pid(capsys, pid_text):
    assert main([pid_text, "hi"]) == 1
    assert "Error: Invalid PID" in capsys.readouterr().out
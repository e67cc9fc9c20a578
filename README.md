# sigtalk

Send a text message from one process to another using nothing but the two
user signals. Every byte is sent as eight bits, most significant bit first:
`SIGUSR1` means 0 and `SIGUSR2` means 1. The receiver acknowledges each bit
before the sender sends the next one. Every message ends with a newline
byte; a message is cut off at its first NUL. Text is sent as UTF-8.

## Installing

```
pip install .
```

POSIX systems only. The server waits with `signal.sigwaitinfo` to learn
which process sent each signal; on a platform without it,
`Server.serve()` raises `RuntimeError`.

## Usage

Start the server. It prints its process id and then waits until it is
interrupted:

```
sigtalk-server
```

In another terminal, send it a message:

```
sigtalk-client <server_pid> "Hello World"
```

The server writes the message followed by a newline. The client exits with
status 1 and prints a usage message when it is not given exactly a PID and
a message, and prints `Error: Invalid PID` when the PID is not a positive
number.

### Confirmed delivery

Start the server with `--bonus`, and put `--bonus` first on the client's
command line:

```
sigtalk-server --bonus
sigtalk-client --bonus <server_pid> "Hello World"
```

In this mode the client first sends its own PID as 32 bits. The server
prints `PID OK`, acknowledges every bit with `SIGUSR2`, writes the message,
and on the closing newline sends `SIGUSR1` back to the client. The client
then prints `Message received by server!` and exits. Both sides must use
the same mode.

## Limits

The server decodes one stream of bits at a time. Two clients sending at the
same moment interleave their bits and the output is garbled; there is no
queueing or per-client separation.

## Library

The wire format works without signals:

```python
from sigtalk.protocol import CharDecoder, encode_message

bits = encode_message("hi")
decoder = CharDecoder()
events = (decoder.feed(bit) for bit in bits)
received = bytes(event.value for event in events if event is not None)
assert received == b"hi\n"
```

`BonusDecoder` decodes the confirmed-delivery stream and reports `Event`
values of kind `EventKind.PID`, `EventKind.BYTE` and `EventKind.END`:

```python
from sigtalk.protocol import BonusDecoder, EventKind, encode_message, encode_pid

decoder = BonusDecoder()
events = [e for bit in encode_pid(4242) + encode_message("ok")
          if (e := decoder.feed(bit)) is not None]
assert [e.kind for e in events] == [
    EventKind.PID, EventKind.BYTE, EventKind.BYTE, EventKind.END,
]
```

`encode_bits`, `encode_char`, `encode_pid` and `encode_message` return lists
of `Bit` values.

`sigtalk.server.Server` takes `bonus`, `output` (a binary stream) and
`kill` (a callable taking a pid and a signal number), so it can be driven
in-process with `Server.handle(sig, sender_pid)`. `sigtalk.client.Client`
takes `server_pid`, `bonus`, `kill` and `wait_ack`, and sends with
`send_bit`, `send_char`, `send_pid` and `send_message`.

The package also has small helpers:

- `sigtalk.chars`: ASCII classification and case conversion.
- `sigtalk.numbers`: `parse_long`, `parse_int` (lenient parsing with C
  integer limits) and `itoa`.
- `sigtalk.cformat`: `cformat` and `cprintf` for `%d %i %s %c %% %u %x %X %p`,
  plus `format_base`, `format_pointer` and `putendl`.
- `sigtalk.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on byte buffers.
- `sigtalk.search`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  returning indexes or `None`.
- `sigtalk.strings`: `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi`, `striteri`.
- `sigtalk.linkedlist`: `Node` and a singly linked `LinkedList` with
  `push_front`, `push_back`, `last`, `clear`, `for_each` and `map`.

## Running the tests

```
pip install .[test]
pytest
```
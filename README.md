# minitalk

minitalk is a small client and server that pass text between processes. They
use only two POSIX signals. Each byte of a message is sent as eight signals,
most significant bit first. `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a
1 bit.

You need a POSIX system with `SIGUSR1` and `SIGUSR2` to use it.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and then waits for signals until
you interrupt it:

```
$ minitalk-server
Server's pid is 4242
Waiting message...
```

In another terminal, send a message to that pid:

```
$ minitalk-client 4242 "hello there"
```

The client takes exactly two positional arguments: the server's pid and the
message. With any other number of arguments it prints a usage hint and exits
with status 1. It also exits with status 1 when the target process cannot be
signalled. The pid is parsed leniently, the way `minitalk.parsing.atoi` does:
leading whitespace, an optional sign, then digits.

## Modes

Both commands accept `--mode MODE` or `--mode=MODE`. On the server the mode
selects a `minitalk.server.Mode`. The client and the server should be run in
the same mode.

- `basic` (the default): the server writes out each byte as soon as its eight
  bits have arrived. The client ends the message with a newline.
- `byte-ack`: the same as `basic`, except that after each byte the server sends
  `SIGUSR1` back to the sender. The client prints
  `One byte sent successfully.` for every acknowledgement it receives.
- `message-ack`: the client ends the message with a NUL byte. The server
  collects bytes until that NUL arrives. A lead byte with its top bit set
  starts a multi-byte sequence, and the server takes that sequence whole. It
  then writes the message followed by a newline, and sends a single `SIGUSR1`
  back to the sender. The client prints
  `Message sent successfully to the server.`

Both acknowledging modes need the sender's pid. The server learns it only on
platforms that provide `signal.sigwaitinfo`, such as Linux. Where that call is
missing, the server still decodes and prints messages, but it sends no
acknowledgements.

## Library use

```python
from minitalk.protocol import encode_byte, decode_bytes, ByteAssembler, MessageAssembler
from minitalk.server import Server, Mode
from minitalk.client import bit_signal, send_byte, send_message
from minitalk.parsing import atoi, itoa
from minitalk.cfmt import format_basic, printf_basic
from minitalk.linereader import LineReader
```

- `encode_byte(byte)` returns the eight bits of a byte, most significant bit
  first.
- `ByteAssembler.feed(bit)` returns a byte once eight bits have been fed in.
- `MessageAssembler.feed(bit)` returns a complete message once a NUL byte
  arrives.
- `Server(mode, out).handle(signum, sender_pid)` processes one signal and
  returns the bytes it wrote, if any. You can use it to drive a server without
  delivering real signals. Any signal other than `SIGUSR1` or `SIGUSR2` raises
  `ValueError`.
- `send_message(pid, message, terminator, delay)` sends the message as UTF-8,
  cut at its first NUL, followed by the terminator. It returns the number of
  bytes it sent.
- `format_basic(fmt, *args)` implements a small printf subset:
  `%d %i %u %c %s %p %x %X %%`. `printf_basic` writes the same output to a
  stream.
- `LineReader(buffer_size).next_line(fd)` reads one newline-terminated line
  from a raw file descriptor. It returns `None` at end of input. The reader
  keeps a separate buffer for each descriptor. `lines(fd)` yields every
  remaining line.

## Limitations

The protocol has no retransmission and no flow control beyond a fixed pause
between signals, 100 microseconds by default. If signals arrive faster than the
server can handle them, bits may be lost and the output corrupted.

## Running the tests

```
pip install .[test]
pytest
```
# minitalk

A signal-based sender and a signal-catching receiver for POSIX systems, built on a
small toolkit of character, string, number and formatting helpers.

## The client

`minitalk.client.Client(server_pid, delay=50e-6)` sends bytes to another process with
signals. `SIGUSR1` stands for a 0 bit and `SIGUSR2` for a 1 bit. For each byte it
sends eight signals, and after each one it waits for the receiver to answer with
`SIGUSR2`. Then it sleeps for `delay` seconds and sends the next bit.

- `Client.send_byte(byte)` sends one byte.
- `Client.send(message)` sends a `str` (encoded as UTF-8) or `bytes` message up to its
  first NUL, then a NUL byte.
- `byte_bits(byte)` returns the eight bits sent for a byte. The byte is read as a
  signed char and bits 8 down to 1 are taken. So the top bit sent is the sign bit and
  bit 0 is never sent.
- `message_bits(message)` yields every bit sent for a message, the final NUL included.

```
minitalk-client <server pid> "hello there"
```

With anything other than two arguments the command prints
`Usage: ./client <server pid> <message>` and exits with status 1. The pid is parsed
with `atoi`.

## The server

`minitalk.server.Server(stream=None)` catches `SIGUSR1` and `SIGUSR2`:

- `install()` sets the handlers.
- `serve_forever()` waits for signals until the process is interrupted.

The number of every signal that arrives is appended to `Server.received`.

```
minitalk-server
```

The command first prints `Server PID: <pid>`. If it is given any arguments, it then
prints `Usage: ./server` and exits with status 1. Otherwise it waits forever.

## What it does not do

The server does not put received bits back together into bytes or messages. It does
not print what it receives, and it does not send acknowledgements. The client waits
for an acknowledgement after every bit, so against this server it blocks after the
first signal. Because bit 0 of each byte is never sent, the bits from `byte_bits`
are not enough on their own to rebuild the original bytes.

## The toolkit

- `minitalk.ctype`: ASCII character tests and case mapping on codes or one-character
  strings (`is_alpha`, `is_space`, `is_xdigit`, `to_upper`, `to_ascii`, ...).
- `minitalk.strings`: `split`, `trim`, `substring`, `join`, `map_indexed`,
  `iter_indexed`, `find_char`, `rfind_char`, `find_bounded`, and the comparisons
  `compare`, `compare_n`, `find_byte` and `compare_bytes`.
- `minitalk.conversions`: `atoi`, `atol` and `atos` parse text into 32-, 64- and
  16-bit integers, wrapping on overflow. `itoa`, `ltoa`, `stoa`, `uitoa`, `ultoa` and
  `ustoa`, with their `_o`, `_x` and `_base` forms, turn integers into text.
  `count_digits` counts digits.
- `minitalk.printf`: `printf(fmt, *args, stream=None)` and `format_string(fmt, *args)`
  handle `%c %s %d %i %u %x %X %p %%`. A trailing lone `%` or a missing argument
  raises `FormatError`. There are also the writers `put_char`, `put_str`, `put_endl`
  and `put_nbr`.
- `minitalk.lines`: `LineReader(stream, buffer_size=42)` reads a text or binary
  stream line by line. `get_next_line(stream, buffer_size=42)` keeps unread text
  between calls, separately for each stream.

```python
from minitalk.client import message_bits
from minitalk.conversions import atoi, itoa_x
from minitalk.printf import format_string
from minitalk.strings import split

split("  a b  c ", " ")      # ['a', 'b', 'c']
atoi("   -42abc")           # -42
itoa_x(255)                 # 'ff'
format_string("%d%%", 7)    # '7%'
list(message_bits("A"))     # the bits the client sends for "A" and the final NUL
```

```python
import io
from minitalk.lines import LineReader

for line in LineReader(io.StringIO("one\ntwo\n"), 4):
    print(line, end="")
```

## Installation and tests

```
pip install .
pip install .[test]
pytest
```
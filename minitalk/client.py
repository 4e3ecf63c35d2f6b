"""Sending a message to a server process one bit per signal.

Each byte is sent as eight signals, from bit 8 down to bit 1 of the byte
taken as a signed char. ``SIGUSR2`` stands for a one bit and ``SIGUSR1`` for
a zero bit. After each signal the client waits for the server to
acknowledge with ``SIGUSR2``. A NUL byte ends every message.
"""

from __future__ import annotations

import os
import signal
import sys
import threading
import time
from typing import Iterator, Optional, Sequence, Union

from minitalk.conversions import atoi
from minitalk.printf import printf

ONE_SIGNAL = signal.SIGUSR2
ZERO_SIGNAL = signal.SIGUSR1
ACK_SIGNAL = signal.SIGUSR2
DEFAULT_DELAY = 50e-6
USAGE = "Usage: ./client <server pid> <message>\n"

_ACK_POLL = 0.05


def byte_bits(byte: int) -> tuple[int, ...]:
    """The eight bits sent for ``byte``, most significant first.

    The byte is read as a signed char, and its bits 8 down to 1 are taken,
    so bit 8 is the sign and bit 0 is never sent.
    """
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected an integer byte, not {type(byte).__name__}")
    if not -128 <= byte <= 255:
        raise ValueError(f"byte out of range: {byte}")
    value = byte - 256 if byte > 127 else byte
    return tuple((value >> shift) & 1 for shift in range(8, 0, -1))


def message_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Every bit sent for ``message``, its terminating NUL byte included.

    The message ends at its first NUL character, as a C string would.
    """
    if isinstance(message, str):
        data = message.encode("utf-8", "surrogateescape")
    else:
        data = bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in data:
        yield from byte_bits(byte)
    yield from byte_bits(0)


class Client:
    """Sends bytes to the process ``server_pid``, waiting for each bit's ack."""

    def __init__(self, server_pid: int, delay: float = DEFAULT_DELAY) -> None:
        if server_pid <= 0:
            raise ValueError(f"server pid must be positive, got {server_pid}")
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.server_pid = server_pid
        self.delay = delay
        self._ack = threading.Event()
        self._installed = False

    def _on_ack(self, signum: int, frame: object) -> None:
        self._ack.set()

    def _install(self) -> None:
        if not self._installed:
            signal.signal(ACK_SIGNAL, self._on_ack)
            self._installed = True

    def _send_bit(self, bit: int) -> None:
        self._ack.clear()
        os.kill(self.server_pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
        while not self._ack.wait(_ACK_POLL):
            pass
        time.sleep(self.delay)

    def send_byte(self, byte: int) -> None:
        """Send the eight signals of one byte."""
        self._install()
        for bit in byte_bits(byte):
            self._send_bit(bit)

    def send(self, message: Union[str, bytes]) -> None:
        """Send ``message`` followed by a NUL byte."""
        self._install()
        for bit in message_bits(message):
            self._send_bit(bit)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send the message in ``argv`` to the server whose pid is given."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf(USAGE)
        return 1
    Client(atoi(args[0])).send(args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The receiving process: announces its pid and waits for signals."""

from __future__ import annotations

import os
import signal
import sys
from typing import NoReturn, Optional, Sequence, TextIO

from minitalk.printf import printf

USAGE = "Usage: ./server\n"
LISTENED_SIGNALS = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Catches ``SIGUSR1`` and ``SIGUSR2`` and records which arrived."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = sys.stdout if stream is None else stream
        self.received: list[int] = []
        self._installed = False

    def _on_signal(self, signum: int, frame: object) -> None:
        self.received.append(signum)

    def install(self) -> None:
        """Install the handlers for both user signals."""
        for signum in LISTENED_SIGNALS:
            signal.signal(signum, self._on_signal)
        self._installed = True

    def serve_forever(self) -> NoReturn:
        """Wait for signals until the process is interrupted."""
        if not self._installed:
            self.install()
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the server pid, then wait for signals forever."""
    args = sys.argv[1:] if argv is None else list(argv)
    server = Server()
    printf("Server PID: %d\n", os.getpid(), stream=server.stream)
    if args:
        printf(USAGE, stream=server.stream)
        return 1
    server.install()
    server.serve_forever()


if __name__ == "__main__":
    sys.exit(main())
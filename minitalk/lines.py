"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import weakref
from typing import IO, AnyStr, Iterator, Optional

BUFFER_SIZE = 42


class LineReader:
    """Reads lines from a text or binary stream, ``buffer_size`` at a time.

    Each line keeps its trailing newline; the last line may lack one. Text
    read past the end of a line is held until the next call.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or ``None`` once the stream is exhausted.

        At least one read is made on every call. If a read fails, the held
        text is dropped and the error is raised.
        """
        line = self._pending
        self._pending = None
        while True:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            newline = "\n" if isinstance(chunk, str) else b"\n"
            line = chunk if line is None else line + chunk
            if newline in chunk:
                break
        if not line:
            return None
        newline = "\n" if isinstance(line, str) else b"\n"
        end = line.find(newline)
        if end != -1 and end + 1 < len(line):
            self._pending = line[end + 1:]
            line = line[:end + 1]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: "weakref.WeakKeyDictionary[IO, LineReader]" = weakref.WeakKeyDictionary()


def get_next_line(stream: IO, buffer_size: int = BUFFER_SIZE) -> Optional[AnyStr]:
    """Return the next line of ``stream``, keeping unread text between calls.

    Each stream has its own held text, so several streams may be read in turn.
    """
    if buffer_size <= 0:
        _readers.pop(stream, None)
        raise ValueError("buffer_size must be positive")
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream, buffer_size)
        _readers[stream] = reader
    else:
        reader._buffer_size = buffer_size
    return reader.read_line()
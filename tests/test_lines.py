import io

import pytest

from minitalk.lines import LineReader, get_next_line

TEXTS = [
    "a\nb\nc",
    "first line\nsecond line\n",
    "\n\n\nx\n",
    "no newline at all",
    "one\n" * 50,
]


def test_lines_in_order():
    reader = LineReader(io.StringIO("a\nb\nc"), 42)
    assert reader.read_line() == "a\n"
    assert reader.read_line() == "b\n"
    assert reader.read_line() == "c"
    assert reader.read_line() is None


@pytest.mark.parametrize("buffer_size", [1, 2, 3, 7, 42, 1000])
@pytest.mark.parametrize("text", TEXTS)
def test_matches_splitlines(text, buffer_size):
    lines = list(LineReader(io.StringIO(text), buffer_size))
    assert lines == text.splitlines(keepends=True)
    assert "".join(lines) == text


def test_empty_stream():
    assert LineReader(io.StringIO(""), 5).read_line() is None


def test_trailing_newline_ends_cleanly():
    reader = LineReader(io.StringIO("x\n"), 42)
    assert reader.read_line() == "x\n"
    assert reader.read_line() is None
    assert reader.read_line() is None


@pytest.mark.parametrize("buffer_size", [1, 4, 42])
def test_binary_stream(buffer_size):
    data = b"alpha\nbeta\ngamma"
    assert list(LineReader(io.BytesIO(data), buffer_size)) == data.splitlines(keepends=True)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), 0)
    with pytest.raises(ValueError):
        get_next_line(io.StringIO("x"), -1)


def test_get_next_line_keeps_state_per_stream():
    first = io.StringIO("1a\n1b\n")
    second = io.StringIO("2a\n2b\n")
    assert get_next_line(first) == "1a\n"
    assert get_next_line(second) == "2a\n"
    assert get_next_line(first) == "1b\n"
    assert get_next_line(second) == "2b\n"
    assert get_next_line(first) is None
    assert get_next_line(second) is None


def test_get_next_line_small_buffer():
    stream = io.StringIO("hello\nworld")
    assert get_next_line(stream, 2) == "hello\n"
    assert get_next_line(stream, 2) == "world"
    assert get_next_line(stream, 2) is None


class _FailingStream:
    """Returns one chunk, fails once, then reports end of stream."""

    def __init__(self, chunk):
        self._calls = 0
        self._chunk = chunk

    def read(self, size):
        self._calls += 1
        if self._calls == 1:
            return self._chunk
        if self._calls == 2:
            raise OSError("read failed")
        return ""


def test_read_error_drops_held_text():
    reader = LineReader(_FailingStream("a\nb"), 42)
    assert reader.read_line() == "a\n"
    with pytest.raises(OSError):
        reader.read_line()
    assert reader.read_line() is None


def test_reads_ahead_even_with_held_line():
    stream = io.StringIO("a\nb\nc\nd\n")
    reader = LineReader(stream, 4)
    assert reader.read_line() == "a\n"
    position = stream.tell()
    assert reader.read_line() == "b\n"
    assert stream.tell() > position
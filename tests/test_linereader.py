import io
import os

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.linereader import LineReader, get_next_line


def test_bytes_stream_lines():
    reader = LineReader(io.BytesIO(b"first\nsecond\nthird"))
    assert reader.read_line() == b"first\n"
    assert reader.read_line() == b"second\n"
    assert reader.read_line() == b"third"
    assert reader.read_line() is None


def test_text_stream_lines():
    reader = LineReader(io.StringIO("a\nb\n"), buffer_size=1)
    assert list(reader) == ["a\n", "b\n"]


def test_empty_source_yields_nothing():
    reader = LineReader(io.BytesIO(b""))
    assert reader.read_line() is None
    assert list(reader) == []


def test_empty_lines_are_kept():
    reader = LineReader(io.BytesIO(b"\n\nx\n"), buffer_size=3)
    assert list(reader) == [b"\n", b"\n", b"x\n"]


@given(
    st.text(alphabet="ab\n", max_size=60),
    st.integers(min_value=1, max_value=20),
)
def test_lines_rebuild_the_text(text, buffer_size):
    lines = list(LineReader(io.StringIO(text), buffer_size=buffer_size))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line for line in lines)


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(b"x"), buffer_size=0)


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader(-1)
    with pytest.raises(ValueError):
        get_next_line(-1)


def test_get_next_line_from_pipe():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"one\ntwo\nend")
        os.close(write_fd)
        lines = [get_next_line(read_fd) for _ in range(4)]
    finally:
        os.close(read_fd)
    assert lines == [b"one\n", b"two\n", b"end", None]


def test_reader_on_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, b"alpha\nbeta\n")
        os.close(write_fd)
        lines = list(LineReader(read_fd, buffer_size=4))
    finally:
        os.close(read_fd)
    assert lines == [b"alpha\n", b"beta\n"]
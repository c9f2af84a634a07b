"""Reading a source one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Any, Dict, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 10

Chunk = Union[str, bytes]


class LineReader:
    """Read lines from a file descriptor or a stream with a ``read`` method.

    Data is pulled in chunks of *buffer_size*. Lines keep their trailing
    newline; the final line is returned even without one. A file
    descriptor yields bytes; a stream yields whatever its ``read`` returns.
    """

    def __init__(self, source: Any, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        if isinstance(source, int) and source < 0:
            raise ValueError("file descriptor must not be negative")
        self.source = source
        self.buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def _read_chunk(self) -> Chunk:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        return self.source.read(self.buffer_size)

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the source is exhausted."""
        parts = []
        pending = self._pending
        while True:
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                cut = pending.find(newline)
                if cut >= 0:
                    parts.append(pending[:cut + 1])
                    self._pending = pending[cut + 1:]
                    return parts[0][:0].join(parts)
                parts.append(pending)
            pending = self._read_chunk()
            if not pending:
                self._pending = None
                if parts:
                    return parts[0][:0].join(parts)
                return None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


_readers: Dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Next line read from file descriptor *fd*, or None at end of file.

    Unread data is kept per descriptor between calls.
    """
    if fd < 0:
        raise ValueError("file descriptor must not be negative")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.read_line()
    if line is None:
        del _readers[fd]
    return line
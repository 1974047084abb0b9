"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import weakref
from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 1000
MAX_BUFFER_SIZE = 1000000


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newline included.

    The stream is read in chunks of ``buffer_size``; data past the returned
    line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 0:
            raise ValueError(f"buffer size must not be negative, got {buffer_size}")
        self._stream = stream
        self._buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._pending: Optional[AnyStr] = None

    @property
    def buffer_size(self) -> int:
        """The number of characters or bytes requested per read."""
        return self._buffer_size

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, ending in a newline unless it is the last one.

        Returns None once the stream is exhausted, or always when the buffer
        size is zero. A failing read discards buffered data and propagates.
        """
        if self._buffer_size == 0:
            return None
        pending = self._pending
        while pending is None or _newline(pending) not in pending:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        index = pending.find(_newline(pending))
        if index < 0:
            line, rest = pending, None
        else:
            line, rest = pending[:index + 1], pending[index + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def _newline(sample):
    return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"


_readers: "weakref.WeakKeyDictionary[IO, LineReader]" = weakref.WeakKeyDictionary()


def get_next_line(stream: IO[AnyStr]) -> Optional[AnyStr]:
    """Return the next line of ``stream``, keeping leftover data per stream."""
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream)
        _readers[stream] = reader
    return reader.read_line()
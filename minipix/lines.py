"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 4


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, ``buffer_size`` units at a time.

    Lines are returned without their newline.  A final newline does not
    produce an extra empty line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, bytes) else "\n"

    def _fill(self) -> None:
        while not self._eof and (
            self._pending is None or self._newline() not in self._pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if self._pending is None:
                self._pending = chunk[:0]
            if not chunk:
                self._eof = True
            else:
                self._pending += chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream is exhausted."""
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            self._eof = False
            return None
        line, sep, rest = pending.partition(self._newline())
        if sep:
            self._pending = rest
        else:
            self._pending = None
            self._eof = False
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
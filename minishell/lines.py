"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Reads lines from a text or binary stream, buffer_size characters at a time.

    Each line keeps its trailing newline; a final line without one is returned
    as it is.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if stream is None:
            raise ValueError("a stream is required")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = b"\n" if isinstance(self._pending, bytes) else "\n"
                index = self._pending.find(newline)
                if index != -1:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                line = self._pending
                self._pending = None
                return line or None
            self._pending = chunk if self._pending is None else self._pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line
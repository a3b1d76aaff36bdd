"""Buffered line reading from file-like streams."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time, pulling fixed-size chunks from it.

    Works with text and binary streams alike; lines come back with the same
    type that the stream's ``read`` returns. Data read past the end of a
    line is kept for the next call.
    """

    def __init__(
        self,
        stream: IO[AnyStr],
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        keep_newline: bool = False,
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._keep_newline = keep_newline
        self._pending: Optional[AnyStr] = None
        self._newline: Optional[AnyStr] = None

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while pending is None or self._newline not in pending:
            data = self._stream.read(self._buffer_size)
            if not data:
                break
            if self._newline is None:
                self._newline = b"\n" if isinstance(data, (bytes, bytearray)) else "\n"  # type: ignore[assignment]
            pending = data if pending is None else pending + data
        return pending

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream holds no more data."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        newline = self._newline
        head, found, rest = pending.partition(newline)
        if not found:
            self._pending = None
            return head
        self._pending = rest
        return head + newline if self._keep_newline else head

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr], keep_newline: bool = False) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` using a LineReader."""
    return iter(LineReader(stream, keep_newline=keep_newline))
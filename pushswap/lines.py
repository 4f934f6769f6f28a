"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


def _newline(piece):
    return "\n" if isinstance(piece, str) else b"\n"


class LineReader(Generic[AnyStr]):
    """Reads lines from a text or binary stream, ``buffer_size`` at a time.

    Each line keeps its trailing newline; the last line of a stream may lack
    one. Data read past a line end is held for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def readline(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        pieces = [self._pending] if self._pending else []
        if not pieces or _newline(pieces[0]) not in pieces[0]:
            while True:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                pieces.append(chunk)
                if _newline(chunk) in chunk:
                    break
        self._pending = None
        if not pieces:
            return None
        buffered = pieces[0][:0].join(pieces)
        end = buffered.find(_newline(buffered))
        if end < 0:
            return buffered
        rest = buffered[end + 1:]
        self._pending = rest if rest else None
        return buffered[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.readline, None)
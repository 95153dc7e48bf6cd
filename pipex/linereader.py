"""Buffered line reading from a stream, one line at a time."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 50


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream in fixed-size chunks.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past the current line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: AnyStr | None = None

    def _newline_index(self) -> int:
        """Index of the first newline in the buffered data, or -1."""
        if self._stash is None:
            return -1
        if isinstance(self._stash, str):
            return self._stash.find("\n")
        return self._stash.find(b"\n")

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while self._newline_index() == -1:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
        if not self._stash:
            self._stash = None
            return None
        cut = self._newline_index()
        if cut == -1:
            line, self._stash = self._stash, None
        else:
            line, self._stash = self._stash[: cut + 1], self._stash[cut + 1 :]
        return line

    def reset(self) -> None:
        """Discard any buffered data not yet returned."""
        self._stash = None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line
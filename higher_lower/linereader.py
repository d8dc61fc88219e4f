"""Reading a stream one line at a time."""

from typing import AnyStr, Generic, IO, Iterator, Optional


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, newlines included."""

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, keeping its newline, or None at the end."""
        line = self._stream.readline()
        return line if line else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def line_length(text: Optional[str]) -> int:
    """Return the length of ``text`` up to its first newline; 0 for None."""
    if text is None:
        return 0
    return len(text.partition("\n")[0])
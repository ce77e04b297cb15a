"""Line-oriented reading shared by the FASTA and GFF parsers."""

from typing import IO, Iterator, Tuple

from genoio.errors import FormatError, IoError


class LineReader:
    """
    Iterate over ``(line_number, text)`` pairs of a stream.

    Works with text and binary streams (bytes are decoded as UTF-8). Line
    numbers start at 1 and ``\\n`` / ``\\r\\n`` endings are stripped. Lines are
    fetched with ``readline()``, so after the reader stops the stream is
    positioned directly after the last line handed out.

    Args:
        stream: Any object with a ``readline()`` method
    """

    def __init__(self, stream: IO):
        self._stream = stream
        self._line_number = 0
        self._exhausted = False

    @property
    def line_number(self) -> int:
        """Number of the last line read (0 before the first one)."""
        return self._line_number

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self

    def __next__(self) -> Tuple[int, str]:
        if self._exhausted:
            raise StopIteration
        try:
            raw = self._stream.readline()
        except OSError as exc:
            raise IoError(f"Failed to read line {self._line_number + 1}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise FormatError(f"invalid UTF-8 data: {exc.reason}", self._line_number + 1) from exc

        if not raw:
            self._exhausted = True
            raise StopIteration

        self._line_number += 1
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise FormatError(f"invalid UTF-8 data: {exc.reason}", self._line_number) from exc

        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        return self._line_number, raw

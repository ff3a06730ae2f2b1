"""Line sources feeding the parser."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, TextIO

from .errors import FileAccessError


class LineSource:
    """Pull-based sequence of text lines backed by a ``readline`` callable.

    ``readline`` returns one line per call and ``""`` once the input is
    exhausted, which keeps end of input distinct from a blank line (``"\\n"``).
    """

    def __init__(self, readline: Callable[[], str], stream: TextIO | None = None) -> None:
        self._readline = readline
        self._stream = stream

    @classmethod
    def from_stream(cls, stream: TextIO) -> "LineSource":
        return cls(stream.readline, stream)

    def readline(self) -> str:
        return self._readline()

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def __iter__(self) -> Iterator[str]:
        return iter(self._readline, "")

    def __enter__(self) -> "LineSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_line_source(path: str | Path, encoding: str = "utf-8", errors: str = "strict") -> LineSource:
    """Open ``path`` as a line source.

    Raises :class:`~nestconf.errors.FileAccessError` when the file cannot be
    opened.
    """

    try:
        stream = open(path, "r", encoding=encoding, errors=errors, newline=None)
    except OSError as exc:
        raise FileAccessError(str(path), exc.strerror or str(exc)) from exc
    return LineSource.from_stream(stream)

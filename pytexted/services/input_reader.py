from __future__ import annotations

import sys
from typing import TextIO

from pytexted.domain.interfaces import ILineReader


class StreamLineReader(ILineReader):
    """Line reader over a text stream (pipes, redirected files, tests)."""

    def __init__(self, stream: TextIO, *, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._closed = False

    def read_line(self) -> str | None:
        if self._closed:
            return None
        line = self._stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_stream:
            self._stream.close()


class ConsoleLineReader(ILineReader):
    """Interactive reader for an attached terminal; uses input() so line editing works."""

    def __init__(self, prompt: str = "") -> None:
        self._prompt = prompt
        self._closed = False

    def read_line(self) -> str | None:
        if self._closed:
            return None
        try:
            return input(self._prompt)
        except EOFError:
            return None

    def close(self) -> None:
        self._closed = True


def make_line_reader(stream: TextIO | None = None) -> ILineReader:
    """Pick the console reader when a TTY is attached, else read the raw stream."""
    stream = stream if stream is not None else sys.stdin
    if stream is sys.stdin and stream.isatty():
        return ConsoleLineReader()
    return StreamLineReader(stream)

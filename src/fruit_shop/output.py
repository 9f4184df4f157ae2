"""
Output sinks for human-readable shop messages.

The store writes one line per operation to a sink instead of printing
directly, so tests can collect lines without capturing stdout.
"""
import sys
from typing import List, Optional, Protocol, TextIO


class OutputSink(Protocol):
    """Anything that accepts one line of text at a time."""

    def write_line(self, line: str) -> None: ...


class ConsoleSink:
    """
    Writes lines to a text stream.

    When no stream is given, sys.stdout is looked up on every write so
    redirection (e.g. pytest's capsys) is honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @stream.setter
    def stream(self, stream: Optional[TextIO]) -> None:
        """Redirect later writes; None goes back to the current sys.stdout."""
        self._stream = stream

    def write_line(self, line: str) -> None:
        stream = self.stream
        stream.write(line + "\n")
        stream.flush()


class CollectingSink:
    """Keeps every written line in memory."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)

    def clear(self) -> None:
        self.lines.clear()

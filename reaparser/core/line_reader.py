"""Rewindable line cursor over a project file."""

from __future__ import annotations

import logging
from pathlib import Path

from reaparser.core.constants import MAX_LINE_LENGTH
from reaparser.core.errors import UnreadableSource

logger = logging.getLogger(__name__)


class LineReader:
    """Reads a text file one line at a time and can restart from the top.

    The file is opened in the constructor so an unreadable path fails
    immediately. Lines keep their terminator; lines longer than
    MAX_LINE_LENGTH are truncated.
    """

    def __init__(self, path: str | Path, max_length: int = MAX_LINE_LENGTH):
        self.path = Path(path)
        self.max_length = max_length
        self.line_number = 0
        try:
            self._file = open(
                self.path, "r", encoding="utf-8", errors="replace", newline=""
            )
        except OSError as e:
            raise UnreadableSource(path) from e

    def next_line(self) -> str | None:
        """Return the next line, or None at end of input."""
        line = self._file.readline()
        if not line:
            return None
        self.line_number += 1
        if len(line) > self.max_length:
            logger.warning(
                "%s:%d: line longer than %d characters truncated",
                self.path.name, self.line_number, self.max_length,
            )
            line = line[: self.max_length]
        return line

    def rewind(self):
        """Restart from the first line without reopening the file."""
        self._file.seek(0)
        self.line_number = 0

    def close(self):
        self._file.close()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

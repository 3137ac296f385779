"""Exceptions raised while loading REAPER projects."""

from __future__ import annotations

from pathlib import Path


class ReaParserError(Exception):
    """Base class for fatal parse failures. Carries the offending path."""

    def __init__(self, message: str, path: str | Path):
        super().__init__(message)
        self.path = str(path)


class UnreadableSource(ReaParserError):
    """The project file is missing or cannot be opened for reading."""

    def __init__(self, path: str | Path):
        super().__init__(f"Unable to load Reaper project: {path}", path)


class InvalidFormat(ReaParserError):
    """The first line is not a valid REAPER project header."""

    def __init__(self, path: str | Path):
        super().__init__(f"Invalid Reaper project: {path}", path)

"""Tests for the rewindable line reader."""

from pathlib import Path

import pytest

from reaparser.core.errors import UnreadableSource
from reaparser.core.line_reader import LineReader

from helpers import make_rpp


def test_reads_lines_until_end_of_input():
    path = make_rpp("first\nsecond\n")
    with LineReader(path) as reader:
        assert reader.next_line() == "first\n"
        assert reader.next_line() == "second\n"
        assert reader.next_line() is None
        assert reader.next_line() is None
    path.unlink()


def test_rewind_restarts_from_first_line():
    path = make_rpp("a\nb\nc\n")
    with LineReader(path) as reader:
        assert list(reader) == ["a\n", "b\n", "c\n"]
        reader.rewind()
        assert reader.line_number == 0
        assert reader.next_line() == "a\n"
        assert reader.line_number == 1
    path.unlink()


def test_line_terminators_are_kept():
    path = make_rpp("windows\r\nunix\nlast")
    with LineReader(path) as reader:
        assert list(reader) == ["windows\r\n", "unix\n", "last"]
    path.unlink()


def test_long_lines_are_truncated():
    path = make_rpp("x" * 50 + "\nshort\n")
    with LineReader(path, max_length=10) as reader:
        assert reader.next_line() == "x" * 10
        assert reader.next_line() == "short\n"
    path.unlink()


def test_unreadable_source_fails_on_open():
    with pytest.raises(UnreadableSource):
        LineReader(Path("/nonexistent/project.rpp"))


def test_directory_is_unreadable(tmp_path):
    with pytest.raises(UnreadableSource) as exc_info:
        LineReader(tmp_path)
    assert exc_info.value.path == str(tmp_path)


def test_undecodable_bytes_are_replaced(tmp_path):
    path = tmp_path / "latin1.rpp"
    path.write_bytes(b"NAME \"Caf\xe9\"\n")
    with LineReader(path) as reader:
        assert reader.next_line() == 'NAME "Caf\ufffd"\n'

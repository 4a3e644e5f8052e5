from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from bloc.buffer import TextBuffer, load_file, save_file, split_lines


def test_split_lines_strips_line_endings() -> None:
    assert split_lines(b"a\r\nb\nc") == [b"a", b"b", b"c"]
    assert split_lines(b"a\n\n") == [b"a", b""]
    assert split_lines(b"\n") == [b""]
    assert split_lines(b"") == []


def test_load_file_creates_one_row_per_line(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    path.write_bytes(b"first\r\nsecond\n\nfourth\n")

    buffer = load_file(str(path))

    assert list(buffer.lines()) == [b"first", b"second", b"", b"fourth"]
    assert buffer.dirty is False


def test_load_file_keeps_bytes_unchanged(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9\n")

    buffer = load_file(str(path))

    assert buffer.content(0) == b"caf\xe9"


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_file(str(tmp_path / "missing.txt"))


def test_save_then_reopen_round_trip(tmp_path: Path) -> None:
    lines = [b"one", b"", b"three  ", b"four"]
    buffer = TextBuffer.from_lines(lines)
    buffer.insert_char(0, 3, ord("!"))
    path = tmp_path / "out.txt"

    written = save_file(buffer, str(path))

    assert written == len(buffer.serialize())
    assert buffer.dirty is False
    reopened = load_file(str(path))
    assert reopened.row_count == 4
    assert list(reopened.lines()) == [b"one!", b"", b"three  ", b"four"]


def test_save_truncates_longer_file(tmp_path: Path) -> None:
    path = tmp_path / "long.txt"
    path.write_bytes(b"x" * 100)

    save_file(TextBuffer.from_lines([b"short"]), str(path))

    assert path.read_bytes() == b"short\n"


def test_save_creates_file_without_extra_permissions(tmp_path: Path) -> None:
    path = tmp_path / "new.txt"

    save_file(TextBuffer.from_lines([b"a"]), str(path))

    mode = stat.S_IMODE(os.stat(path).st_mode)
    assert mode & ~0o644 == 0
    assert path.read_bytes() == b"a\n"

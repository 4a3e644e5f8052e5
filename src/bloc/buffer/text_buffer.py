"""Ordered row storage and the line-level editing primitives."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from .row import Row
from .validation import clamp_column, report_ignored, row_in_range


class TextBuffer:
    """Owns every Row of the open document.

    Callers never receive a Row: reads hand out immutable ``bytes`` copies so
    no outside code can mutate row memory behind the buffer's back. Invalid
    indices are clamped or ignored (see :mod:`bloc.buffer.validation`).
    """

    def __init__(self) -> None:
        self._rows: List[Row] = []
        self.version = 0
        self.dirty = False

    @classmethod
    def from_lines(cls, lines: Iterable[bytes]) -> "TextBuffer":
        buffer = cls()
        buffer._rows = [Row(bytearray(line)) for line in lines]
        return buffer

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def row_size(self, index: int) -> int:
        if not row_in_range(index, len(self._rows)):
            return 0
        return self._rows[index].size

    def content(self, index: int) -> bytes:
        return bytes(self._rows[index].content)

    def render(self, index: int) -> bytes:
        return self._rows[index].render

    def lines(self) -> Iterator[bytes]:
        for row in self._rows:
            yield bytes(row.content)

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True

    # -- row level -------------------------------------------------------

    def insert_row(self, at: int, content: bytes = b"") -> None:
        if not row_in_range(at, len(self._rows), allow_end=True):
            report_ignored("insert_row", at=at, rows=len(self._rows))
            return
        self._rows.insert(at, Row(bytearray(content)))
        self._touch()

    def split_row_at(self, row_index: int, col_offset: int) -> None:
        if not row_in_range(row_index, len(self._rows)):
            report_ignored("split_row_at", row=row_index, rows=len(self._rows))
            return
        row = self._rows[row_index]
        tail = row.truncate(clamp_column(col_offset, row.size))
        self._rows.insert(row_index + 1, Row(bytearray(tail)))
        self._touch()

    def join_with_previous(self, row_index: int) -> None:
        if row_index < 1 or not row_in_range(row_index, len(self._rows)):
            report_ignored("join_with_previous", row=row_index, rows=len(self._rows))
            return
        current = self._rows.pop(row_index)
        self._rows[row_index - 1].append(bytes(current.content))
        self._touch()

    # -- character level -------------------------------------------------

    def insert_char(self, row_index: int, col_offset: int, ch: int) -> int:
        """Insert byte ``ch`` and return the column it actually landed in."""

        if not row_in_range(row_index, len(self._rows)):
            report_ignored("insert_char", row=row_index, rows=len(self._rows))
            return col_offset
        row = self._rows[row_index]
        at = clamp_column(col_offset, row.size)
        row.insert(at, ch)
        self._touch()
        return at

    def delete_char(self, row_index: int, col_offset: int) -> bool:
        if not row_in_range(row_index, len(self._rows)):
            report_ignored("delete_char", row=row_index, rows=len(self._rows))
            return False
        row = self._rows[row_index]
        if col_offset < 0 or col_offset >= row.size:
            return False
        row.delete(col_offset)
        self._touch()
        return True

    # -- persistence -----------------------------------------------------

    def serialize(self) -> bytes:
        """Every row followed by exactly one newline, the last one included."""

        return b"".join(bytes(row.content) + b"\n" for row in self._rows)


__all__ = ["TextBuffer"]

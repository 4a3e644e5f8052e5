"""Cursor position in screen columns and buffer rows."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CursorState:
    """Mutable cursor tied to the gutter width.

    ``cx`` is a screen column that already includes the gutter, ``cy`` a buffer
    row index in ``[0, row_count]`` where ``row_count`` is the virtual row below
    the last line.
    """

    origin: int = 0
    cx: int = 0
    cy: int = 0

    def __post_init__(self) -> None:
        if self.cx < self.origin:
            self.cx = self.origin

    @property
    def column(self) -> int:
        return self.cx - self.origin

    def set_column(self, column: int) -> None:
        self.cx = self.origin + max(column, 0)

    def home(self) -> None:
        self.cx = self.origin

    def at_line_start(self) -> bool:
        return self.cx <= self.origin

    def move_to(self, row: int, column: int = 0) -> None:
        self.cy = row
        self.set_column(column)


__all__ = ["CursorState"]

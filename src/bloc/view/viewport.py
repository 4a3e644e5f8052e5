"""Vertical scrolling window over the buffer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ViewportState:
    """Visible window sampled once at startup; resizes are not tracked."""

    screenrows: int
    screencols: int
    reserved_y: int = 2
    rowoff: int = 0

    def __post_init__(self) -> None:
        if self.screencols <= 0:
            raise ValueError("screencols must be positive")
        if self.screenrows <= self.reserved_y:
            raise ValueError(
                f"screenrows ({self.screenrows}) must exceed reserved_y ({self.reserved_y})"
            )

    @property
    def text_rows(self) -> int:
        return self.screenrows - self.reserved_y

    def recompute_scroll(self, cursor_row: int) -> None:
        """Keep ``rowoff <= cursor_row <= rowoff + text_rows - 1``."""

        if cursor_row < self.rowoff:
            self.rowoff = cursor_row
        elif cursor_row + self.reserved_y >= self.rowoff + self.screenrows:
            self.rowoff = cursor_row + self.reserved_y - self.screenrows + 1

    def is_visible(self, row: int) -> bool:
        return self.rowoff <= row < self.rowoff + self.text_rows


__all__ = ["ViewportState"]

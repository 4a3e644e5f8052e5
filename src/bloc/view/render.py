"""Frame assembly: one escape-coded byte string per screen refresh."""

from __future__ import annotations

from typing import Optional

from bloc import __version__
from bloc.runtime import telemetry
from bloc.state import EditorState

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"
CURSOR_HOME = b"\x1b[H"
CLEAR_LINE_RIGHT = b"\x1b[K"
INVERT = b"\x1b[7m"
RESET_ATTRS = b"\x1b[m"
NEWLINE = b"\r\n"

NO_NAME = "[No Name]"
WELCOME = f"$ Bloc editor -- version {__version__}"


def cursor_position(row: int, col: int) -> bytes:
    """1-based cursor move sequence."""

    return b"\x1b[%d;%dH" % (row, col)


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


class RenderBatcher:
    """Builds a complete frame into a single buffer.

    Nothing here writes to the terminal: the caller hands the returned bytes
    to one ``write`` call so the update lands atomically.
    """

    def render(self, state: EditorState, *, now: Optional[float] = None) -> bytes:
        with telemetry.span("render::frame", component="render"):
            frame = bytearray()
            frame += HIDE_CURSOR
            frame += CURSOR_HOME
            self._draw_rows(frame, state)
            self._draw_status_bar(frame, state)
            self._draw_message_bar(frame, state, now)
            viewport = state.viewport
            frame += cursor_position(
                state.cursor.cy - viewport.rowoff + 1, state.cursor.cx + 1
            )
            frame += SHOW_CURSOR
            return bytes(frame)

    def _gutter(self, state: EditorState, filerow: Optional[int]) -> bytes:
        cfg = state.config
        if filerow is None or not cfg.reserved_x:
            number = b" " * cfg.reserved_x
        else:
            # numbers wider than reserved_x widen the gutter of their own row
            number = str(filerow + 1).rjust(cfg.reserved_x).encode("ascii")
        return number + b" " * cfg.indent_x

    def _draw_rows(self, frame: bytearray, state: EditorState) -> None:
        buffer = state.buffer
        viewport = state.viewport
        cols = viewport.screencols
        for y in range(viewport.text_rows):
            filerow = viewport.rowoff + y
            if filerow < buffer.row_count:
                gutter = self._gutter(state, filerow)[:cols]
                width = max(cols - len(gutter), 0)
                frame += gutter
                frame += buffer.render(filerow)[:width]
            elif buffer.row_count == 0 and y == viewport.text_rows // 3:
                gutter = self._gutter(state, None)[:cols]
                frame += gutter
                frame += _encode(WELCOME)[: max(cols - len(gutter), 0)]
            else:
                frame += self._gutter(state, None)[:cols]
            frame += CLEAR_LINE_RIGHT
            frame += NEWLINE

    def _draw_status_bar(self, frame: bytearray, state: EditorState) -> None:
        cols = state.viewport.screencols
        name = (state.filename or NO_NAME)[:20]
        modified = " (modified)" if state.buffer.dirty else ""
        status = _encode(
            f"{name} - {state.buffer.row_count} lines{modified}. "
            f"Cy: {state.cursor.cy}, Cx: {state.cursor.cx}"
        )[:cols]
        rstatus = _encode(f"{state.cursor.cy + 1}/{state.buffer.row_count}")

        frame += INVERT
        frame += status
        remaining = cols - len(status)
        if remaining >= len(rstatus):
            frame += b" " * (remaining - len(rstatus))
            frame += rstatus
        else:
            frame += b" " * remaining
        frame += RESET_ATTRS
        frame += NEWLINE

    def _draw_message_bar(
        self, frame: bytearray, state: EditorState, now: Optional[float]
    ) -> None:
        cols = state.viewport.screencols
        text = state.message.visible_text(state.config.message_timeout_s, now=now)
        message = _encode(text)[:cols]
        frame += INVERT
        frame += CLEAR_LINE_RIGHT
        frame += message
        frame += b" " * (cols - len(message))
        frame += RESET_ATTRS


__all__ = [
    "RenderBatcher",
    "cursor_position",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "CURSOR_HOME",
    "CLEAR_LINE_RIGHT",
    "INVERT",
    "RESET_ATTRS",
    "NO_NAME",
    "WELCOME",
]

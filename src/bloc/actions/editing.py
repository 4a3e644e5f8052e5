"""Text mutations driven by the cursor position."""

from __future__ import annotations

from bloc.input.keys import KeyEvent
from bloc.state import CommandContext, DispatchResult


def insert_char(context: CommandContext, event: KeyEvent) -> DispatchResult:
    state = context.state
    buffer, cursor = state.buffer, state.cursor
    if state.on_virtual_row:
        buffer.insert_row(buffer.row_count, b"")
    landed = buffer.insert_char(cursor.cy, cursor.column, event.code)
    cursor.set_column(landed + 1)
    return DispatchResult(consumed=True, status="insert")


def backspace(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    buffer, cursor = state.buffer, state.cursor
    if state.on_virtual_row:
        return DispatchResult(consumed=True, status="noop")

    if not cursor.at_line_start():
        column = min(cursor.column, buffer.row_size(cursor.cy))
        if column > 0:
            buffer.delete_char(cursor.cy, column - 1)
            cursor.set_column(column - 1)
        else:
            cursor.home()
        return DispatchResult(consumed=True, status="delete")

    if cursor.cy > 0:
        join_point = buffer.row_size(cursor.cy - 1)
        buffer.join_with_previous(cursor.cy)
        cursor.move_to(cursor.cy - 1, join_point)
        return DispatchResult(consumed=True, status="join")

    return DispatchResult(consumed=True, status="noop")


def newline(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    buffer, cursor = state.buffer, state.cursor
    if cursor.at_line_start() or state.on_virtual_row:
        buffer.insert_row(cursor.cy, b"")
    else:
        buffer.split_row_at(cursor.cy, cursor.column)
    cursor.move_to(cursor.cy + 1)
    return DispatchResult(consumed=True, status="newline")


__all__ = ["insert_char", "backspace", "newline"]

"""Cursor motion and goto-line."""

from __future__ import annotations

from bloc.input.keys import KeyEvent
from bloc.runtime import telemetry
from bloc.state import CommandContext, DispatchResult, EditorState

GOTO_PROMPT = "Go to line: {} (ESC to cancel)"


def _snap_column(state: EditorState) -> None:
    limit = state.current_row_size()
    if state.cursor.column > limit:
        state.cursor.set_column(limit)


def move_left(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    cursor = state.cursor
    if not cursor.at_line_start():
        cursor.cx -= 1
    elif cursor.cy > 0:
        cursor.move_to(cursor.cy - 1, state.buffer.row_size(cursor.cy - 1))
    return DispatchResult(consumed=True, status="move")


def move_right(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    cursor = state.cursor
    if state.on_virtual_row:
        return DispatchResult(consumed=True, status="move")
    size = state.buffer.row_size(cursor.cy)
    if cursor.column < size:
        cursor.cx += 1
    else:
        cursor.move_to(cursor.cy + 1)
    return DispatchResult(consumed=True, status="move")


def move_up(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    if state.cursor.cy > 0:
        state.cursor.cy -= 1
    _snap_column(state)
    return DispatchResult(consumed=True, status="move")


def move_down(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    if state.cursor.cy < state.buffer.row_count:
        state.cursor.cy += 1
    _snap_column(state)
    return DispatchResult(consumed=True, status="move")


def goto_line(context: CommandContext, event: KeyEvent) -> DispatchResult:
    """Prompt for a 1-based line number and jump there if it exists."""

    del event
    state = context.state
    answer = context.prompt(GOTO_PROMPT)
    if answer is None:
        state.set_message("Go to line cancelled")
        return DispatchResult(consumed=True, status="goto_cancel")

    try:
        line = int(answer.strip())
    except ValueError:
        state.set_message(f"Not a line number: {answer}")
        telemetry.record_event("goto.rejected", data={"input": answer})
        return DispatchResult(consumed=True, status="goto_invalid", message=answer)

    index = line - 1
    row_count = state.buffer.row_count
    if not 0 <= index < row_count:
        state.set_message(f"Line {line} is out of range (1-{row_count})")
        telemetry.record_event(
            "goto.rejected", data={"line": line, "rows": row_count}
        )
        return DispatchResult(
            consumed=True, status="goto_out_of_range", message=str(line)
        )

    state.cursor.move_to(index)
    state.viewport.rowoff = index
    return DispatchResult(consumed=True, status="goto", message=str(line))


__all__ = ["move_left", "move_right", "move_up", "move_down", "goto_line"]

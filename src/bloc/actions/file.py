"""Actions that touch the file on disk or end the session."""

from __future__ import annotations

from bloc.buffer import save_file
from bloc.input.keys import KeyEvent
from bloc.runtime import telemetry
from bloc.state import CommandContext, DispatchResult

SAVE_AS_PROMPT = "Save as: {} (ESC to cancel)"


def save(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    state = context.state
    if not state.filename:
        answer = context.prompt(SAVE_AS_PROMPT)
        if not answer:
            state.set_message("Save aborted")
            return DispatchResult(consumed=True, status="save_aborted")
        state.filename = answer

    try:
        written = save_file(state.buffer, state.filename)
    except OSError as exc:
        telemetry.record_event(
            "editor.save_failed",
            level="error",
            data={"path": state.filename, "error": exc.strerror or str(exc)},
        )
        state.set_message(f"Can't save! I/O error: {exc.strerror or exc}")
        return DispatchResult(consumed=True, status="save_failed")

    state.set_message(f"File saved! {written} bytes written to disk")
    return DispatchResult(consumed=True, status="save", message=state.filename)


def quit_editor(context: CommandContext, event: KeyEvent) -> DispatchResult:
    del event
    telemetry.record_event(
        "editor.quit", data={"dirty": context.state.buffer.dirty}
    )
    return DispatchResult(consumed=True, status="quit", quit=True)


__all__ = ["save", "quit_editor", "SAVE_AS_PROMPT"]

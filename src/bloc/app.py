"""Executable editor: main loop, line prompt and command-line entry point."""

from __future__ import annotations

import argparse
import os
import sys
from contextlib import suppress
from typing import Optional, Protocol, Sequence

from bloc.buffer import TextBuffer, load_file
from bloc.config import EditorConfig
from bloc.dispatch import CommandDispatcher
from bloc.input import ByteSource, Key, KeyDecoder, ctrl_key
from bloc.runtime import telemetry
from bloc.state import DispatchResult, EditorState
from bloc.terminal import RawTerminal, TerminalError
from bloc.view.render import RenderBatcher


class EditorTerminal(ByteSource, Protocol):
    """What the editor needs from a terminal."""

    def window_size(self) -> tuple[int, int]: ...

    def write(self, data: bytes) -> None: ...

    def clear_screen(self) -> None: ...


class Editor:
    """Owns one session: state, decoder, dispatcher and renderer."""

    def __init__(self, terminal: EditorTerminal, state: EditorState) -> None:
        self.terminal = terminal
        self.state = state
        self.decoder = KeyDecoder(terminal, escape_timeout=state.config.escape_timeout)
        self.dispatcher = CommandDispatcher(state, prompt=self.prompt)
        self.renderer = RenderBatcher()

    @classmethod
    def open(
        cls,
        terminal: EditorTerminal,
        path: Optional[str] = None,
        *,
        config: Optional[EditorConfig] = None,
    ) -> "Editor":
        cfg = config or EditorConfig()
        rows, cols = terminal.window_size()
        buffer = TextBuffer()
        message = cfg.help_message
        if path:
            try:
                buffer = load_file(path)
            except FileNotFoundError:
                telemetry.record_event("editor.new_file", data={"path": path})
                message = f"New file: {path}"
        state = EditorState.create(
            screenrows=rows,
            screencols=cols,
            config=cfg,
            buffer=buffer,
            filename=path,
        )
        state.set_message(message)
        return cls(terminal, state)

    def refresh(self) -> None:
        self.state.viewport.recompute_scroll(self.state.cursor.cy)
        self.terminal.write(self.renderer.render(self.state))

    def step(self) -> DispatchResult:
        self.refresh()
        event = self.decoder.read_key()
        return self.dispatcher.dispatch(event)

    def run(self) -> None:
        """Process keys until an exit command, then clear the screen."""

        telemetry.record_event(
            "editor.start",
            data={
                "file": self.state.filename or "",
                "rows": self.state.buffer.row_count,
            },
        )
        while True:
            result = self.step()
            if result.quit:
                break
        self.terminal.clear_screen()

    def prompt(self, template: str) -> Optional[str]:
        """Read a line in the message bar; ``None`` when cancelled with Escape.

        ``template`` holds one ``{}`` placeholder for the text typed so far.
        """

        typed = bytearray()
        while True:
            self.state.set_message(template.format(os.fsdecode(bytes(typed))))
            self.refresh()
            event = self.decoder.read_key()
            if event.code == Key.ESCAPE:
                self.state.set_message("")
                return None
            if event.code == Key.ENTER:
                if typed:
                    self.state.set_message("")
                    return os.fsdecode(bytes(typed))
            elif event.code in (Key.BACKSPACE, ctrl_key("h")):
                if typed:
                    typed.pop()
            elif event.is_printable:
                typed.append(event.code)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bloc", description="Minimal raw-terminal text editor."
    )
    parser.add_argument("path", nargs="?", help="File to open (optional)")
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write telemetry to this file (default: $BLOC_LOG_FILE)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Minimum telemetry level (default: $BLOC_LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_file or args.log_level:
        telemetry.configure(log_file=args.log_file, level=args.log_level)

    config = EditorConfig.from_env()
    terminal = RawTerminal()
    try:
        with terminal:
            Editor.open(terminal, args.path, config=config).run()
    except TerminalError as exc:
        return _abort(terminal, str(exc))
    except OSError as exc:
        # opening an unreadable path (directory, permissions) ends the session
        if exc.filename is None:
            raise
        return _abort(terminal, f"{exc.filename}: {exc.strerror}")
    return 0


def _abort(terminal: EditorTerminal, reason: str) -> int:
    telemetry.record_event("editor.fatal", level="error", data={"error": reason})
    with suppress(TerminalError):
        terminal.clear_screen()
    print(f"bloc: {reason}", file=sys.stderr)
    return 1


__all__ = ["Editor", "EditorTerminal", "main"]

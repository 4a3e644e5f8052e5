"""Session-wide editor state and the types exchanged with command handlers."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from bloc.buffer import TextBuffer
from bloc.config import EditorConfig
from bloc.view.cursor import CursorState
from bloc.view.viewport import ViewportState

Prompter = Callable[[str], Optional[str]]


@dataclass(slots=True)
class StatusMessage:
    """Transient message shown in the message bar."""

    text: str = ""
    set_at: float = 0.0

    def set(self, text: str, *, now: Optional[float] = None) -> None:
        self.text = text
        self.set_at = time.monotonic() if now is None else now

    def visible_text(self, timeout_s: float, *, now: Optional[float] = None) -> str:
        current = time.monotonic() if now is None else now
        if self.text and current - self.set_at < timeout_s:
            return self.text
        return ""


@dataclass(slots=True)
class EditorState:
    """Everything a session mutates, built once at startup and passed around."""

    buffer: TextBuffer
    cursor: CursorState
    viewport: ViewportState
    config: EditorConfig = field(default_factory=EditorConfig)
    filename: Optional[str] = None
    message: StatusMessage = field(default_factory=StatusMessage)

    @classmethod
    def create(
        cls,
        *,
        screenrows: int,
        screencols: int,
        config: Optional[EditorConfig] = None,
        buffer: Optional[TextBuffer] = None,
        filename: Optional[str] = None,
    ) -> "EditorState":
        cfg = config or EditorConfig()
        return cls(
            buffer=buffer if buffer is not None else TextBuffer(),
            cursor=CursorState(origin=cfg.gutter_width),
            viewport=ViewportState(
                screenrows=screenrows,
                screencols=screencols,
                reserved_y=cfg.reserved_y,
            ),
            config=cfg,
            filename=filename,
        )

    @property
    def on_virtual_row(self) -> bool:
        return self.cursor.cy >= self.buffer.row_count

    def current_row_size(self) -> int:
        if self.on_virtual_row:
            return 0
        return self.buffer.row_size(self.cursor.cy)

    def set_message(self, text: str) -> None:
        self.message.set(text)


@dataclass(slots=True)
class CommandContext:
    """Shared services every command handler can access."""

    state: EditorState
    prompt: Prompter


@dataclass(slots=True)
class DispatchResult:
    """Result returned from ``CommandDispatcher.dispatch``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


__all__ = [
    "Prompter",
    "StatusMessage",
    "EditorState",
    "CommandContext",
    "DispatchResult",
]

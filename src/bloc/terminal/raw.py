"""Raw-mode terminal backed by the process's stdin/stdout descriptors."""

from __future__ import annotations

import os
import select
import sys
import termios
from typing import Any, Optional

from bloc.runtime import telemetry

CLEAR_AND_HOME = b"\x1b[2J\x1b[H"


class TerminalError(RuntimeError):
    """Unrecoverable terminal failure; the session has to end."""


class InputError(TerminalError):
    """Reading the next input byte failed for a reason other than an interrupt."""


class RawTerminal:
    """Switches the tty into raw mode and performs byte-level I/O.

    Use as a context manager: the original attributes are restored on every
    way out of the ``with`` block, including exceptions and ``SystemExit``.
    """

    def __init__(
        self, *, stdin_fd: Optional[int] = None, stdout_fd: Optional[int] = None
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._original: Optional[list[Any]] = None

    def __enter__(self) -> "RawTerminal":
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    @property
    def raw(self) -> bool:
        return self._original is not None

    def enable_raw_mode(self) -> None:
        try:
            original = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"tcgetattr: {exc}") from exc

        raw = list(original)
        raw[0] &= ~(termios.ICRNL | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        self._original = original
        telemetry.record_event("terminal.raw", level="debug")

    def restore(self) -> None:
        if self._original is None:
            return
        original, self._original = self._original, None
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, original)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        telemetry.record_event("terminal.restored", level="debug")

    def window_size(self) -> tuple[int, int]:
        """Return ``(rows, cols)``; sampled once, resizes are not followed."""

        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise TerminalError(f"window size: {exc}") from exc
        if size.columns == 0:
            raise TerminalError("window size: terminal reports zero columns")
        return size.lines, size.columns

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        """Read one byte.

        With ``timeout`` set, ``None`` is returned when nothing arrives in time.
        Without it the call blocks; interrupts are retried.
        """

        while True:
            try:
                if timeout is not None:
                    ready, _, _ = select.select([self.stdin_fd], [], [], timeout)
                    if not ready:
                        return None
                data = os.read(self.stdin_fd, 1)
            except (InterruptedError, BlockingIOError):
                continue
            except OSError as exc:
                raise InputError(f"read: {exc}") from exc
            if not data:
                if timeout is not None:
                    return None
                raise InputError("read: end of input")
            return data[0]

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            try:
                written = os.write(self.stdout_fd, view)
            except InterruptedError:
                continue
            except OSError as exc:
                raise TerminalError(f"write: {exc}") from exc
            view = view[written:]

    def clear_screen(self) -> None:
        self.write(CLEAR_AND_HOME)


__all__ = ["RawTerminal", "TerminalError", "InputError", "CLEAR_AND_HOME"]

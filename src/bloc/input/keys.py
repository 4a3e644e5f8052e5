"""Logical key codes and the normalized key event passed to the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

ESC = 0x1B


class Key(IntEnum):
    ENTER = 13
    ESCAPE = 27
    BACKSPACE = 127
    ARROW_LEFT = 1000
    ARROW_UP = 1001
    ARROW_RIGHT = 1002
    ARROW_DOWN = 1003


_KEY_TOKENS = {
    Key.ENTER: "enter",
    Key.ESCAPE: "escape",
    Key.BACKSPACE: "backspace",
    Key.ARROW_LEFT: "left",
    Key.ARROW_UP: "up",
    Key.ARROW_RIGHT: "right",
    Key.ARROW_DOWN: "down",
}


def ctrl_key(ch: str) -> int:
    """Code produced by holding Ctrl with ``ch`` (``byte & 0x1F``)."""

    return ord(ch) & 0x1F


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Single decoded key press: a raw byte (0-255) or a ``Key`` above 255."""

    code: int

    @property
    def token(self) -> str:
        """Keymap token, e.g. ``ctrl+s``, ``up``, ``enter`` or ``a``."""

        if self.code in _KEY_TOKENS:
            return _KEY_TOKENS[Key(self.code)]
        if 1 <= self.code <= 26:
            return f"ctrl+{chr(self.code + 96)}"
        if 0 <= self.code < 256:
            return chr(self.code)
        return f"key{self.code}"

    @property
    def is_printable(self) -> bool:
        return 32 <= self.code < 127 or 128 <= self.code < 256


__all__ = ["ESC", "Key", "KeyEvent", "ctrl_key"]

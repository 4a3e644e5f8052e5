"""Editing verbs bound to keys by the default keymap."""

from .editing import backspace, insert_char, newline
from .file import quit_editor, save
from .navigation import goto_line, move_down, move_left, move_right, move_up

__all__ = [
    "insert_char",
    "backspace",
    "newline",
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "goto_line",
    "save",
    "quit_editor",
]

"""Line buffer, row storage, and file persistence."""

from .fileio import load_file, save_file, split_lines
from .row import Row
from .text_buffer import TextBuffer
from .validation import clamp_column, row_in_range

__all__ = [
    "Row",
    "TextBuffer",
    "load_file",
    "save_file",
    "split_lines",
    "clamp_column",
    "row_in_range",
]

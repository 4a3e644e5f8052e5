"""Raw input decoding."""

from .decoder import ByteSource, KeyDecoder
from .keys import ESC, Key, KeyEvent, ctrl_key

__all__ = [
    "ByteSource",
    "KeyDecoder",
    "Key",
    "KeyEvent",
    "ESC",
    "ctrl_key",
]

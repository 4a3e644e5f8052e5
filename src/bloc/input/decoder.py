"""Lookahead state machine turning raw input bytes into key events."""

from __future__ import annotations

from typing import Optional, Protocol

from bloc.runtime import telemetry

from .keys import ESC, Key, KeyEvent

_CSI_ARROWS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
}


class ByteSource(Protocol):
    """Anything that can hand out input one byte at a time."""

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        """Return the next byte, or ``None`` if ``timeout`` expired first."""
        ...


class KeyDecoder:
    """Decodes one logical key per ``read_key`` call.

    Only ``ESC [ A/B/C/D`` is understood. Any other escape sequence collapses
    to a plain Escape and the two bytes read after ESC are dropped, never
    replayed as typed characters.
    """

    def __init__(self, source: ByteSource, *, escape_timeout: float = 0.1) -> None:
        self._source = source
        self._escape_timeout = escape_timeout

    def read_key(self) -> KeyEvent:
        byte = self._read_blocking()
        if byte != ESC:
            return KeyEvent(byte)

        first = self._source.read_byte(self._escape_timeout)
        if first is None:
            return KeyEvent(Key.ESCAPE)
        second = self._source.read_byte(self._escape_timeout)
        if second is None:
            return KeyEvent(Key.ESCAPE)

        if first == ord("[") and second in _CSI_ARROWS:
            return KeyEvent(_CSI_ARROWS[second])

        telemetry.record_event(
            "input.escape_discarded",
            level="debug",
            data={"bytes": [first, second]},
        )
        return KeyEvent(Key.ESCAPE)

    def _read_blocking(self) -> int:
        while True:
            try:
                byte = self._source.read_byte(None)
            except InterruptedError:
                continue
            if byte is not None:
                return byte


__all__ = ["ByteSource", "KeyDecoder"]

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

import pytest

from bloc.input import Key, KeyDecoder, KeyEvent, ctrl_key
from bloc.terminal import InputError


class ScriptedSource:
    """Byte source replaying a fixed script; ``None`` once a timed read runs dry."""

    def __init__(self, data: Iterable[object]) -> None:
        self._script = deque(data)
        self.timeouts: list[Optional[float]] = []

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        self.timeouts.append(timeout)
        if not self._script:
            if timeout is not None:
                return None
            raise InputError("script exhausted")
        item = self._script.popleft()
        if isinstance(item, BaseException):
            raise item
        return int(item)


def decode(data: bytes) -> KeyEvent:
    return KeyDecoder(ScriptedSource(data)).read_key()


@pytest.mark.parametrize(
    ("final", "expected"),
    [
        (b"A", Key.ARROW_UP),
        (b"B", Key.ARROW_DOWN),
        (b"C", Key.ARROW_RIGHT),
        (b"D", Key.ARROW_LEFT),
    ],
)
def test_arrow_sequences(final: bytes, expected: Key) -> None:
    assert decode(b"\x1b[" + final).code == expected


def test_plain_byte_is_returned_as_is() -> None:
    event = decode(b"a")

    assert event.code == ord("a")
    assert event.token == "a"
    assert event.is_printable


def test_lone_escape() -> None:
    assert decode(b"\x1b").code == Key.ESCAPE


def test_escape_with_single_follow_up_byte() -> None:
    assert decode(b"\x1b[").code == Key.ESCAPE


def test_unknown_sequence_is_discarded() -> None:
    source = ScriptedSource(b"\x1b[Zq")
    decoder = KeyDecoder(source)

    assert decoder.read_key().code == Key.ESCAPE
    # the two bytes after ESC are gone, decoding resumes after them
    assert decoder.read_key().code == ord("q")


def test_ss3_sequence_collapses_to_escape() -> None:
    assert decode(b"\x1bOA").code == Key.ESCAPE


def test_follow_up_reads_use_escape_timeout() -> None:
    source = ScriptedSource(b"\x1b[A")

    KeyDecoder(source, escape_timeout=0.25).read_key()

    assert source.timeouts == [None, 0.25, 0.25]


def test_interrupted_read_is_retried() -> None:
    source = ScriptedSource([InterruptedError(), ord("x")])

    assert KeyDecoder(source).read_key().code == ord("x")


def test_read_failure_propagates() -> None:
    source = ScriptedSource([InputError("boom")])

    with pytest.raises(InputError):
        KeyDecoder(source).read_key()


def test_key_tokens() -> None:
    assert KeyEvent(ctrl_key("s")).token == "ctrl+s"
    assert KeyEvent(Key.BACKSPACE).token == "backspace"
    assert KeyEvent(Key.ENTER).token == "enter"
    assert KeyEvent(Key.ESCAPE).token == "escape"
    assert KeyEvent(Key.ARROW_UP).token == "up"
    assert not KeyEvent(ctrl_key("e")).is_printable
    assert not KeyEvent(Key.BACKSPACE).is_printable
    assert KeyEvent(0xE9).is_printable

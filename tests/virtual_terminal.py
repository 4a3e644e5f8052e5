"""In-memory terminal double used by the editor tests.

Input is a queue of bytes; every ``write`` is captured so tests can inspect
the frames the editor produced.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from bloc.terminal import CLEAR_AND_HOME, InputError


class VirtualTerminal:
    """Implements the ``EditorTerminal`` protocol without any real I/O.

    Parameters
    ----------
    rows, columns:
        Size reported by ``window_size``.
    keys:
        Bytes queued as keyboard input.
    """

    def __init__(self, rows: int = 24, columns: int = 80, keys: bytes = b"") -> None:
        self.rows = rows
        self.columns = columns
        self._input: Deque[int] = deque(keys)
        self.writes: List[bytes] = []
        self.clear_count = 0

    def feed(self, data: bytes) -> None:
        self._input.extend(data)

    def window_size(self) -> tuple[int, int]:
        return self.rows, self.columns

    def read_byte(self, timeout: Optional[float] = None) -> Optional[int]:
        if self._input:
            return self._input.popleft()
        if timeout is not None:
            return None
        raise InputError("virtual terminal: input exhausted")

    def write(self, data: bytes) -> None:
        self.writes.append(bytes(data))

    def clear_screen(self) -> None:
        self.clear_count += 1
        self.writes.append(CLEAR_AND_HOME)

    @property
    def frames(self) -> List[bytes]:
        return [chunk for chunk in self.writes if chunk != CLEAR_AND_HOME]

    @property
    def last_frame(self) -> bytes:
        return self.frames[-1]

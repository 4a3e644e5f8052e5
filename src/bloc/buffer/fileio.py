"""Loading and saving buffers as raw bytes."""

from __future__ import annotations

import os
from typing import List

from bloc.runtime import telemetry

from .text_buffer import TextBuffer

FILE_MODE = 0o644


def split_lines(data: bytes) -> List[bytes]:
    """Split on ``\\n`` and strip trailing CR/LF bytes from every line."""

    if not data:
        return []
    lines = data.split(b"\n")
    if data.endswith(b"\n"):
        lines.pop()
    return [line.rstrip(b"\r\n") for line in lines]


def load_file(path: str) -> TextBuffer:
    """Read ``path`` into a new buffer; raises ``FileNotFoundError`` as-is."""

    with telemetry.span("buffer::load", component="buffer", metadata={"path": path}):
        with open(path, "rb") as handle:
            data = handle.read()
        buffer = TextBuffer.from_lines(split_lines(data))
    telemetry.record_event(
        "editor.open", data={"path": path, "rows": buffer.row_count}
    )
    return buffer


def save_file(buffer: TextBuffer, path: str) -> int:
    """Overwrite ``path`` with the serialized buffer and return the byte count."""

    payload = buffer.serialize()
    with telemetry.span("buffer::save", component="buffer", metadata={"path": path}):
        fd = os.open(path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        try:
            os.ftruncate(fd, len(payload))
            view = memoryview(payload)
            while view:
                written = os.write(fd, view)
                view = view[written:]
        finally:
            os.close(fd)
    buffer.mark_clean()
    telemetry.record_event(
        "editor.save", data={"path": path, "bytes": len(payload)}
    )
    return len(payload)


__all__ = ["FILE_MODE", "split_lines", "load_file", "save_file"]

"""Single line storage with its derived render form."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Row:
    """One line of the buffer.

    ``content`` is the editable byte sequence; ``render`` is what the screen
    shows. Today ``render`` is an identity copy of ``content``, kept separate so
    display-only expansions (tabs, control characters) can land here without
    touching the editing code.
    """

    content: bytearray = field(default_factory=bytearray)
    render: bytes = b""

    def __post_init__(self) -> None:
        self.content = bytearray(self.content)
        self.update_render()

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def rsize(self) -> int:
        return len(self.render)

    def update_render(self) -> None:
        """Recompute ``render`` from ``content``; call after every mutation."""

        self.render = bytes(self.content)

    def insert(self, at: int, byte: int) -> None:
        self.content.insert(at, byte)
        self.update_render()

    def delete(self, at: int) -> None:
        del self.content[at]
        self.update_render()

    def append(self, data: bytes) -> None:
        self.content.extend(data)
        self.update_render()

    def truncate(self, length: int) -> bytes:
        """Cut the row at ``length`` and return the removed tail."""

        tail = bytes(self.content[length:])
        del self.content[length:]
        self.update_render()
        return tail


__all__ = ["Row"]

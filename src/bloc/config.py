"""Editor layout and behaviour settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

ENV_PREFIX = "BLOC_"

DEFAULT_HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-E = exit | Ctrl-L = go to line"


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _env_float(key: str, fallback: float) -> float:
    value = os.environ.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def _env_list(key: str) -> tuple[str, ...]:
    raw = os.environ.get(f"{ENV_PREFIX}{key}", "")
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Fixed geometry and timing used for the lifetime of a session.

    ``reserved_x`` is the width of the line-number field and ``indent_x`` the
    spacing after it; together they form the gutter, so the first editable
    screen column is ``reserved_x + indent_x``. ``reserved_y`` rows at the
    bottom hold the status and message bars.
    """

    reserved_x: int = 4
    indent_x: int = 1
    reserved_y: int = 2
    escape_timeout_ms: int = 100
    message_timeout_s: float = 5.0
    help_message: str = DEFAULT_HELP_MESSAGE
    disabled_bindings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.reserved_x < 0 or self.indent_x < 0:
            raise ValueError("gutter widths cannot be negative")
        if self.reserved_y < 0:
            raise ValueError("reserved_y cannot be negative")
        if self.escape_timeout_ms <= 0:
            raise ValueError("escape_timeout_ms must be positive")

    @property
    def gutter_width(self) -> int:
        return self.reserved_x + self.indent_x

    @property
    def escape_timeout(self) -> float:
        return self.escape_timeout_ms / 1000.0

    @classmethod
    def from_env(cls, *, help_message: Optional[str] = None) -> "EditorConfig":
        defaults = cls()
        return cls(
            reserved_x=_env_int("RESERVED_X", defaults.reserved_x),
            indent_x=_env_int("INDENT_X", defaults.indent_x),
            escape_timeout_ms=_env_int("ESCAPE_TIMEOUT_MS", defaults.escape_timeout_ms),
            message_timeout_s=_env_float("MESSAGE_TIMEOUT", defaults.message_timeout_s),
            help_message=help_message or defaults.help_message,
            disabled_bindings=_env_list("DISABLE_BINDINGS"),
        )


__all__ = ["EditorConfig", "DEFAULT_HELP_MESSAGE", "ENV_PREFIX"]

"""Minimal raw-terminal line editor."""

__all__ = [
    "actions",
    "app",
    "buffer",
    "config",
    "dispatch",
    "input",
    "keymaps",
    "runtime",
    "state",
    "terminal",
    "view",
]

__version__ = "0.1.0"

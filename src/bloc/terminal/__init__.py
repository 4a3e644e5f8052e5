"""Terminal mode control and byte-level I/O."""

from .raw import CLEAR_AND_HOME, InputError, RawTerminal, TerminalError

__all__ = ["RawTerminal", "TerminalError", "InputError", "CLEAR_AND_HOME"]

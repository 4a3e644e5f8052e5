"""Key dispatch."""

from .dispatcher import CommandDispatcher

__all__ = ["CommandDispatcher"]

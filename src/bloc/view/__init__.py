"""Cursor and viewport coordinate model.

The frame renderer lives in :mod:`bloc.view.render` and is imported from there
directly since it depends on :mod:`bloc.state`.
"""

from .cursor import CursorState
from .viewport import ViewportState

__all__ = ["CursorState", "ViewportState"]

"""Declarative keymap registry and default bindings."""

from .models import ActionRef, Binding
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, ResolutionMatch, ResolutionResult
from .defaults import INSERT_ACTION_ID, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
    "INSERT_ACTION_ID",
    "load_default_keymaps",
]

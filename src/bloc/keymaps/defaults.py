"""Built-in actions and key bindings."""

from __future__ import annotations

from typing import Iterable, Sequence

from bloc.actions import editing as editing_actions
from bloc.actions import file as file_actions
from bloc.actions import navigation as navigation_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.insert_char",
        handler=editing_actions.insert_char,
        description="Insert the typed character",
    ),
    ActionRef(
        id="edit.backspace",
        handler=editing_actions.backspace,
        description="Delete left of the cursor or join with the previous line",
    ),
    ActionRef(
        id="edit.newline",
        handler=editing_actions.newline,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="move.left",
        handler=navigation_actions.move_left,
        description="Move left, wrapping to the previous line",
    ),
    ActionRef(
        id="move.right",
        handler=navigation_actions.move_right,
        description="Move right, wrapping to the next line",
    ),
    ActionRef(
        id="move.up",
        handler=navigation_actions.move_up,
        description="Move up one line",
    ),
    ActionRef(
        id="move.down",
        handler=navigation_actions.move_down,
        description="Move down one line",
    ),
    ActionRef(
        id="move.goto_line",
        handler=navigation_actions.goto_line,
        description="Prompt for a line number and jump to it",
    ),
    ActionRef(
        id="file.save",
        handler=file_actions.save,
        description="Write the buffer to disk",
    ),
    ActionRef(
        id="editor.quit",
        handler=file_actions.quit_editor,
        description="Leave the editor without confirmation",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="save", key="ctrl+s", action_id="file.save", description="Save"),
    Binding(id="quit", key="ctrl+e", action_id="editor.quit", description="Exit"),
    Binding(
        id="goto", key="ctrl+l", action_id="move.goto_line", description="Go to line"
    ),
    Binding(id="newline", key="enter", action_id="edit.newline"),
    Binding(id="backspace", key="backspace", action_id="edit.backspace"),
    Binding(id="left", key="left", action_id="move.left"),
    Binding(id="right", key="right", action_id="move.right"),
    Binding(id="up", key="up", action_id="move.up"),
    Binding(id="down", key="down", action_id="move.down"),
)

INSERT_ACTION_ID = "edit.insert_char"


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and the bindings selected by the filters."""

    allowed_bindings = _build_filters(include_bindings, exclude_bindings)

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if not _selected(binding.id, allowed_bindings):
            continue
        registry.register_binding(binding, replace=replace)

    if extra_bindings:
        for binding in extra_bindings:
            registry.register_binding(binding, replace=replace)


def _build_filters(
    include: Sequence[str] | None, exclude: Sequence[str] | None
) -> tuple[set[str] | None, set[str]]:
    include_set = set(include) if include else None
    exclude_set = set(exclude or ())
    return include_set, exclude_set


def _selected(item_id: str, filters: tuple[set[str] | None, set[str]]) -> bool:
    include, exclude = filters
    if include is not None and item_id not in include:
        return False
    if item_id in exclude:
        return False
    return True


__all__ = [
    "load_default_keymaps",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "INSERT_ACTION_ID",
]

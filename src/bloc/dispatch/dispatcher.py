"""Maps decoded keys onto buffer, cursor and viewport mutations."""

from __future__ import annotations

from typing import Optional

from bloc.input.keys import KeyEvent
from bloc.keymaps import (
    INSERT_ACTION_ID,
    KeymapRegistry,
    KeymapResolver,
    ResolutionMatch,
    load_default_keymaps,
)
from bloc.runtime import telemetry
from bloc.state import CommandContext, DispatchResult, EditorState, Prompter


def _no_prompt(template: str) -> Optional[str]:
    del template
    return None


class CommandDispatcher:
    """Runs one key to completion: resolve, execute, then rescroll.

    Bound keys run their action; unbound printable bytes are inserted; every
    other key is ignored.
    """

    def __init__(
        self,
        state: EditorState,
        *,
        prompt: Prompter | None = None,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = CommandContext(state=state, prompt=prompt or _no_prompt)
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="bloc.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(
                self.keymap_registry,
                exclude_bindings=state.config.disabled_bindings,
            )
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="bloc.keymaps"
        )

    @property
    def state(self) -> EditorState:
        return self.context.state

    def dispatch(self, event: KeyEvent) -> DispatchResult:
        with telemetry.span(
            name="dispatch::key",
            component="dispatch",
            metadata={"key": event.token},
        ) as handle:
            result = self._run(event)
            handle.add_metadata("status", result.status)
        self.state.viewport.recompute_scroll(self.state.cursor.cy)
        return result

    def _run(self, event: KeyEvent) -> DispatchResult:
        resolution = self.keymap_resolver.resolve(event.token)
        if resolution.status == "match" and resolution.match:
            return self._execute_match(resolution.match, event)

        if event.is_printable:
            action = self.keymap_registry.get_action(INSERT_ACTION_ID)
            return self._coerce(action(self.context, event))

        return DispatchResult(consumed=False, status="ignored")

    def _execute_match(self, match: ResolutionMatch, event: KeyEvent) -> DispatchResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, event)
        return self._coerce(outcome)

    @staticmethod
    def _coerce(outcome: object) -> DispatchResult:
        if isinstance(outcome, DispatchResult):
            return outcome
        return DispatchResult(consumed=True)


__all__ = ["CommandDispatcher"]

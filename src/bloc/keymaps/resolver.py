"""Key token resolution against a registry snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from bloc.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Looks key tokens up in a table rebuilt whenever the registry changes."""

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Optional[tuple[int, Dict[str, ResolutionMatch]]] = None

    def resolve(self, token: str) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": token},
        ) as handle:
            match = self._ensure_table().get(token)
            if match is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", match.binding.id)
            return ResolutionResult(status="match", match=match)

    def reset(self) -> None:
        self._cache = None

    def _ensure_table(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if self._cache and self._cache[0] == revision:
            return self._cache[1]

        table = {
            binding.key: ResolutionMatch(
                binding=binding,
                action=self._registry.get_action(binding.action_id),
            )
            for binding in self._registry.iter_bindings()
        }
        self._cache = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]

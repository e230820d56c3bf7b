"""Name-keyed component registry.

Maps string identifiers to zero-argument (or provider-accepting)
factories, tagged with a role and an optional qualifier. Config-driven
wiring looks components up by name; the container looks them up by
role and qualifier. Names that were never registered are reported as
TypeResolutionError instead of failing somewhere inside construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from calcdi.domain.exceptions import TypeResolutionError, WiringStep


class Role(str, Enum):
    PROVIDER = "provider"
    CALCULATOR = "calculator"

    @property
    def resolve_step(self) -> WiringStep:
        if self is Role.PROVIDER:
            return WiringStep.RESOLVE_PROVIDER
        return WiringStep.RESOLVE_CALCULATOR


@dataclass(frozen=True)
class ComponentEntry:
    """One registration: how to build a component and what it is for."""

    name: str
    role: Role
    factory: Callable[..., object]
    qualifier: str | None = None


def qualified_name(factory: Callable[..., object]) -> str:
    """Return 'package.module.QualName' for a class or function."""
    return f"{factory.__module__}.{factory.__qualname__}"


class ComponentRegistry:

    def __init__(self) -> None:
        self._entries: dict[str, ComponentEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def register(
        self,
        factory: Callable[..., object],
        *,
        role: Role,
        name: str | None = None,
        qualifier: str | None = None,
    ) -> ComponentEntry:
        """Register a factory under its qualified name (or an explicit one)."""
        key = name or qualified_name(factory)
        if key in self._entries:
            raise ValueError(f"Component '{key}' is already registered")

        entry = ComponentEntry(name=key, role=role, factory=factory, qualifier=qualifier)
        self._entries[key] = entry
        return entry

    def resolve(self, name: str, *, role: Role) -> ComponentEntry:
        """Look up a component by name, checking it plays the expected role."""
        entry = self._entries.get(name)
        if entry is None:
            raise TypeResolutionError(
                f"Unknown {role.value} type '{name}'",
                name=name,
                step=role.resolve_step,
            )
        if entry.role is not role:
            raise TypeResolutionError(
                f"'{name}' is registered as a {entry.role.value}, not a {role.value}",
                name=name,
                step=role.resolve_step,
            )
        return entry

    def find(self, role: Role, qualifier: str | None = None) -> ComponentEntry:
        """Return the single component for a role, narrowed by qualifier."""
        candidates = [e for e in self._entries.values() if e.role is role]
        if qualifier is not None:
            candidates = [e for e in candidates if e.qualifier == qualifier]

        if not candidates:
            tag = f" with qualifier '{qualifier}'" if qualifier is not None else ""
            raise TypeResolutionError(
                f"No {role.value} registered{tag}",
                name=qualifier,
                step=role.resolve_step,
            )
        if len(candidates) > 1:
            names = ", ".join(e.name for e in candidates)
            raise TypeResolutionError(
                f"Ambiguous {role.value}: {len(candidates)} candidates ({names}); "
                "specify a qualifier",
                name=qualifier,
                step=role.resolve_step,
            )
        return candidates[0]

    def entries(self) -> list[ComponentEntry]:
        """All registrations, in registration order."""
        return list(self._entries.values())

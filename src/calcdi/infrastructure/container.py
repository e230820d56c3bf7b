"""Declarative container: wiring by role and qualifier.

Picks the one provider and the one calculator the registry holds for
each role (narrowed by qualifier when several exist), builds them and
injects the provider. No names are read from configuration; this is
the only place that connects components by what they *are* rather
than what they are called.
"""

from __future__ import annotations

import logging

from calcdi.domain.model.assembly import Assembly
from calcdi.infrastructure.registry import ComponentRegistry, Role
from calcdi.infrastructure.wiring import build_calculator, build_provider

logger = logging.getLogger(__name__)


class Container:
    """Composes the provider/calculator pair from a registry."""

    def __init__(
        self,
        registry: ComponentRegistry,
        provider_qualifier: str | None = None,
        calculator_qualifier: str | None = None,
    ) -> None:
        self.registry = registry

        provider_entry = registry.find(Role.PROVIDER, provider_qualifier)
        self.provider = build_provider(provider_entry)

        calculator_entry = registry.find(Role.CALCULATOR, calculator_qualifier)
        self.calculator = build_calculator(calculator_entry, self.provider)

        logger.info(
            "Container wired %s <- %s",
            calculator_entry.name,
            provider_entry.name,
            extra={"qualifier": provider_qualifier},
        )

    def assembly(self) -> Assembly:
        return Assembly(provider=self.provider, calculator=self.calculator)

"""Composition root: registers concrete components and wires them.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. Three strategies end
in the same Assembly: by hand, by name from a config file, and by role
through the container.
"""

from __future__ import annotations

from pathlib import Path

from calcdi.domain.model.assembly import Assembly
from calcdi.domain.service.trig_calculator import TrigCalculator
from calcdi.infrastructure.config_file import read_wiring_spec
from calcdi.infrastructure.container import Container
from calcdi.infrastructure.providers.constant_provider import ConstantDataProvider
from calcdi.infrastructure.providers.sensor_provider import SensorDataProvider
from calcdi.infrastructure.registry import ComponentRegistry, Role
from calcdi.infrastructure.settings import get_settings
from calcdi.infrastructure.wiring import wire_from_spec


def default_registry() -> ComponentRegistry:
    registry = ComponentRegistry()
    registry.register(ConstantDataProvider, role=Role.PROVIDER, qualifier="dao")
    registry.register(SensorDataProvider, role=Role.PROVIDER, qualifier="sensor")
    registry.register(TrigCalculator, role=Role.CALCULATOR, qualifier="metier")
    return registry


def compose_manually() -> Assembly:
    provider = ConstantDataProvider()
    return Assembly(provider=provider, calculator=TrigCalculator(provider))


def assemble_from_config(
    path: Path | str | None = None,
    registry: ComponentRegistry | None = None,
) -> Assembly:
    config_path = Path(path if path is not None else get_settings().config_path)
    spec = read_wiring_spec(config_path)
    if registry is None:
        registry = default_registry()
    return wire_from_spec(spec, registry)


def assemble_from_container(
    qualifier: str | None = None,
    registry: ComponentRegistry | None = None,
) -> Assembly:
    provider_qualifier = qualifier if qualifier is not None else get_settings().provider_qualifier
    if registry is None:
        registry = default_registry()
    container = Container(registry, provider_qualifier=provider_qualifier)
    return container.assembly()

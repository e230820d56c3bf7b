"""Wiring by name: turn a WiringSpec into a live Assembly.

Construction rules shared with the container:

- providers are built with their zero-argument constructor;
- calculators are built with the provider as the single constructor
  argument when the factory accepts one, otherwise with no arguments
  followed by set_provider().
"""

from __future__ import annotations

import inspect
import logging
from typing import Callable

from calcdi.domain.capability.calculator import Calculator
from calcdi.domain.capability.data_provider import DataProvider
from calcdi.domain.exceptions import InstantiationError, WiringStep
from calcdi.domain.model.assembly import Assembly
from calcdi.domain.model.wiring_spec import WiringSpec
from calcdi.infrastructure.registry import ComponentEntry, ComponentRegistry, Role

logger = logging.getLogger(__name__)


def _accepts_provider(factory: Callable[..., object]) -> bool:
    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind(object())
    except TypeError:
        return False
    return True


def build_provider(entry: ComponentEntry) -> DataProvider:
    logger.debug(
        "Constructing provider %s",
        entry.name,
        extra={"step": WiringStep.CONSTRUCTION.value, "role": entry.role.value},
    )
    try:
        provider = entry.factory()
    except Exception as exc:
        raise InstantiationError(
            f"Cannot construct provider '{entry.name}': {exc}"
        ) from exc

    if not isinstance(provider, DataProvider):
        raise InstantiationError(
            f"'{entry.name}' built a {type(provider).__name__}, not a DataProvider"
        )
    return provider


def build_calculator(entry: ComponentEntry, provider: DataProvider) -> Calculator:
    if _accepts_provider(entry.factory):
        logger.debug(
            "Constructing calculator %s with provider argument",
            entry.name,
            extra={"step": WiringStep.CONSTRUCTION.value, "role": entry.role.value},
        )
        try:
            calculator = entry.factory(provider)
        except Exception as exc:
            raise InstantiationError(
                f"Cannot construct calculator '{entry.name}': {exc}"
            ) from exc
        _check_calculator(entry, calculator)
        return calculator

    logger.debug(
        "Constructing calculator %s, injecting through set_provider()",
        entry.name,
        extra={"step": WiringStep.INJECTION.value, "role": entry.role.value},
    )
    try:
        calculator = entry.factory()
    except Exception as exc:
        raise InstantiationError(
            f"Cannot construct calculator '{entry.name}': {exc}"
        ) from exc
    _check_calculator(entry, calculator)

    try:
        calculator.set_provider(provider)
    except Exception as exc:
        raise InstantiationError(
            f"Cannot inject provider into '{entry.name}': {exc}",
            step=WiringStep.INJECTION,
        ) from exc
    return calculator


def _check_calculator(entry: ComponentEntry, calculator: object) -> None:
    if not isinstance(calculator, Calculator):
        raise InstantiationError(
            f"'{entry.name}' built a {type(calculator).__name__}, not a Calculator"
        )


def wire_from_spec(spec: WiringSpec, registry: ComponentRegistry) -> Assembly:
    """Resolve, construct and inject the components a spec names."""
    provider_entry = registry.resolve(spec.provider_name, role=Role.PROVIDER)
    provider = build_provider(provider_entry)

    if spec.calculator_name is None:
        logger.info("Wired provider only", extra={"component": provider_entry.name})
        return Assembly(provider=provider)

    calculator_entry = registry.resolve(spec.calculator_name, role=Role.CALCULATOR)
    calculator = build_calculator(calculator_entry, provider)
    logger.info(
        "Wired %s <- %s",
        calculator_entry.name,
        provider_entry.name,
        extra={"component": calculator_entry.name},
    )
    return Assembly(provider=provider, calculator=calculator)

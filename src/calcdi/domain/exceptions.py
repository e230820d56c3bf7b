"""Domain-level exceptions.

Every wiring or computation failure is a subclass of CalcDIException
so the CLI layer can catch them uniformly. Each error records the
bootstrap step it happened in, so the message can say where startup
stopped.
"""

from __future__ import annotations

from enum import Enum


class WiringStep(str, Enum):
    """The stages of the one-shot startup sequence."""

    READ_CONFIG = "reading config"
    RESOLVE_PROVIDER = "resolving provider type"
    RESOLVE_CALCULATOR = "resolving calculator type"
    CONSTRUCTION = "construction"
    INJECTION = "injection"
    COMPUTATION = "computation"


class CalcDIException(Exception):
    """Base class for all wiring and computation errors."""

    default_step: WiringStep | None = None

    def __init__(self, message: str, step: WiringStep | None = None) -> None:
        super().__init__(message)
        self.step = step if step is not None else self.default_step


class ResourceNotFound(CalcDIException):
    """The configuration file does not exist."""

    default_step = WiringStep.READ_CONFIG


class ConfigurationError(CalcDIException):
    """The configuration file exists but does not name a provider."""

    default_step = WiringStep.READ_CONFIG


class TypeResolutionError(CalcDIException):
    """A component name (or role/qualifier pair) is not registered."""

    def __init__(
        self, message: str, name: str | None = None, step: WiringStep | None = None
    ) -> None:
        super().__init__(message, step)
        self.name = name


class InstantiationError(CalcDIException):
    """A component was found but could not be constructed or injected."""

    default_step = WiringStep.CONSTRUCTION


class NotConfigured(CalcDIException):
    """compute() was called before a DataProvider was attached."""

    default_step = WiringStep.COMPUTATION

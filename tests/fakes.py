"""In-memory test doubles.

These implement the same abstract interfaces as the shipped
components but let a test choose the reading, count calls, or force
the set_provider() injection path.
"""

from __future__ import annotations

from calcdi.domain.capability.calculator import Calculator
from calcdi.domain.capability.data_provider import DataProvider
from calcdi.domain.service.trig_calculator import TrigCalculator


class FixedDataProvider(DataProvider):

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def reading(self) -> float:
        return self.value


class CountingDataProvider(DataProvider):

    def __init__(self, value: float = 1.0) -> None:
        self.value = value
        self.calls = 0

    def reading(self) -> float:
        self.calls += 1
        return self.value


class SetterOnlyCalculator(TrigCalculator):
    """Zero-argument constructor; the provider can only arrive via set_provider()."""

    def __init__(self) -> None:
        super().__init__()
        self.injected_via_setter = False

    def set_provider(self, provider: DataProvider) -> None:
        super().set_provider(provider)
        self.injected_via_setter = True


class BrokenSetterCalculator(TrigCalculator):

    def __init__(self) -> None:
        super().__init__()

    def set_provider(self, provider: DataProvider) -> None:
        raise RuntimeError("setter exploded")


class ExplodingProvider(DataProvider):

    def __init__(self) -> None:
        raise RuntimeError("no connection")

    def reading(self) -> float:  # pragma: no cover
        return 0.0


class NotAProvider:
    """Constructible, but does not implement DataProvider."""


class AbstractOnlyCalculator(Calculator):
    """Leaves compute() abstract, so it cannot be instantiated."""

    def set_provider(self, provider: DataProvider) -> None:
        pass

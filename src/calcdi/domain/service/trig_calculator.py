"""Domain service: the reference Calculator.

The formula is a placeholder business rule with no physical meaning.
It is kept exactly as written, evaluated left to right, so results
match to the last bit across wiring strategies.
"""

from __future__ import annotations

import math

from calcdi.domain.capability.calculator import Calculator
from calcdi.domain.capability.data_provider import DataProvider
from calcdi.domain.exceptions import NotConfigured


class TrigCalculator(Calculator):

    def __init__(self, provider: DataProvider | None = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> DataProvider | None:
        return self._provider

    def set_provider(self, provider: DataProvider) -> None:
        self._provider = provider

    def compute(self) -> float:
        if self._provider is None:
            raise NotConfigured(
                f"{type(self).__name__} has no DataProvider attached"
            )
        t = self._provider.reading()
        return t * 12 * math.pi / 2 * math.cos(t)

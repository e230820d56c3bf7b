"""Stub DataProvider standing in for a sensor feed.

Same contract as ConstantDataProvider with a different value, so a
calculator can be pointed at either one without code changes.
"""

from __future__ import annotations

from calcdi.domain.capability.data_provider import DataProvider


class SensorDataProvider(DataProvider):

    VALUE = 12.0

    def reading(self) -> float:
        return self.VALUE

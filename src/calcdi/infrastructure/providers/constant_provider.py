"""Stub DataProvider standing in for a database-backed source."""

from __future__ import annotations

from calcdi.domain.capability.data_provider import DataProvider


class ConstantDataProvider(DataProvider):
    """Always returns the same reading. Stateless."""

    VALUE = 23.0

    def reading(self) -> float:
        return self.VALUE

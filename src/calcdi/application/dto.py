"""Data Transfer Objects that cross the application/CLI boundary."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComputationDTO:
    """Output: the provider's reading and, if a calculator was wired, its result."""

    reading: float
    result: float | None = None

    @property
    def has_result(self) -> bool:
        return self.result is not None

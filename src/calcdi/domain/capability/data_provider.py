"""Abstract data source consumed by calculators.

Defined in the domain layer so business logic never depends on
where a reading comes from. Concrete providers live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class DataProvider(ABC):

    @abstractmethod
    def reading(self) -> float:
        """Return the current numeric reading."""

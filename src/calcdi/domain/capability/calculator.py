"""Abstract business-logic component.

A Calculator holds a reference to a DataProvider it does not own.
The provider is attached either at construction or through
set_provider(); wiring code decides which.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from calcdi.domain.capability.data_provider import DataProvider


class Calculator(ABC):

    @abstractmethod
    def set_provider(self, provider: DataProvider) -> None:
        """Attach (or replace) the DataProvider used by compute()."""

    @abstractmethod
    def compute(self) -> float:
        """Return the derived value.

        Raises NotConfigured if no provider has been attached.
        """

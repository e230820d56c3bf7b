"""The end state of any wiring strategy."""

from __future__ import annotations

from dataclasses import dataclass

from calcdi.domain.capability.calculator import Calculator
from calcdi.domain.capability.data_provider import DataProvider


@dataclass(frozen=True)
class Assembly:
    """A provider and, in the extended variant, a calculator wired to it.

    Whichever path built it (manual, by name, by container), the
    calculator already has exactly this provider attached.
    """

    provider: DataProvider
    calculator: Calculator | None = None

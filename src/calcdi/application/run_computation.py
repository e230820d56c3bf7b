"""Application service: Run Computation use case."""

from __future__ import annotations

import logging

from calcdi.application.dto import ComputationDTO
from calcdi.domain.model.assembly import Assembly

logger = logging.getLogger(__name__)


class RunComputationHandler:

    def __init__(self, assembly: Assembly) -> None:
        self._assembly = assembly

    def handle(self) -> ComputationDTO:
        """Read the provider once, then compute if a calculator is wired."""
        reading = self._assembly.provider.reading()
        calculator = self._assembly.calculator
        if calculator is None:
            return ComputationDTO(reading=reading)

        result = calculator.compute()
        logger.info(
            "Computed %s", result, extra={"component": type(calculator).__name__}
        )
        return ComputationDTO(reading=reading, result=result)

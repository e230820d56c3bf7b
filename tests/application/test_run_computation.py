"""Tests for the RunComputation use case."""

import math

import pytest

from calcdi.application.run_computation import RunComputationHandler
from calcdi.domain.exceptions import NotConfigured
from calcdi.domain.model.assembly import Assembly
from calcdi.domain.service.trig_calculator import TrigCalculator
from tests.fakes import FixedDataProvider


class TestRunComputation:

    def test_provider_only_reports_reading(self):
        dto = RunComputationHandler(Assembly(provider=FixedDataProvider(4.0))).handle()

        assert dto.reading == 4.0
        assert dto.result is None
        assert not dto.has_result

    def test_extended_reports_reading_and_result(self):
        provider = FixedDataProvider(math.pi)
        assembly = Assembly(provider=provider, calculator=TrigCalculator(provider))

        dto = RunComputationHandler(assembly).handle()

        assert dto.reading == math.pi
        assert dto.has_result
        assert dto.result == pytest.approx(-6 * math.pi ** 2)

    def test_unconfigured_calculator_propagates(self):
        assembly = Assembly(provider=FixedDataProvider(1.0), calculator=TrigCalculator())

        with pytest.raises(NotConfigured):
            RunComputationHandler(assembly).handle()

"""
Tests for the single (case reference) lookup service.
"""
import pytest

from region_pricing.data.directory import CaseStore
from region_pricing.engine.errors import ContractViolation
from region_pricing.engine.models import SinglePricingResult
from region_pricing.engine.resolver import ResolutionEngine
from region_pricing.services.error_reporter import ErrorReporter
from region_pricing.services.single_lookup import SingleLookupService

from conftest import BrokenSink, FailingStore


def test_case_with_pricing(single_service):
    result = single_service.get_pricing("CS-1")

    assert result.ok
    assert result.error_message is None
    assert [r.contract_length for r in result.pricing_data["DE"]] == ["1 Month", "12 Months"]


@pytest.mark.parametrize("reference", [None, "", "   "])
def test_empty_reference_is_contract_violation(single_service, reference):
    with pytest.raises(ContractViolation):
        single_service.get_pricing(reference)


def test_missing_region_on_contact(single_service):
    result = single_service.get_pricing("CS-2")

    assert result.to_dict() == {
        "pricingData": None,
        "errorMessage": "Product or Home Region is missing on the associated Contact.",
    }


@pytest.mark.parametrize("reference", ["CS-4", "CS-404"])
def test_unknown_case_or_contact_is_missing_context(single_service, reference):
    result = single_service.get_pricing(reference)
    assert result.error_message == "Product or Home Region is missing on the associated Contact."


def test_no_pricing_configured(single_service, settings):
    result = single_service.get_pricing("CS-3")

    assert result.pricing_data is None
    assert result.error_message == settings.labels.no_pricing


def test_catalog_fault_is_reported_and_hidden(settings, directory, sink):
    service = SingleLookupService(
        CaseStore(settings.cases_csv, directory),
        ResolutionEngine(FailingStore()),
        ErrorReporter(sink),
        settings.labels,
    )
    result = service.get_pricing("CS-1")

    assert result.error_message == settings.labels.general_error
    assert "offline" not in result.error_message
    assert len(sink.records) == 1
    assert "catalog database offline" in sink.records[0]["message"]
    assert sink.records[0]["action_name"] == "SingleLookupService.get_pricing"
    assert sink.records[0]["status"] == "Open"


def test_logging_failure_does_not_escape(settings, directory):
    service = SingleLookupService(
        CaseStore(settings.cases_csv, directory),
        ResolutionEngine(FailingStore()),
        ErrorReporter(BrokenSink()),
        settings.labels,
    )
    result = service.get_pricing("CS-1")
    assert result.error_message == settings.labels.general_error


def test_repeated_calls_are_identical(single_service):
    assert single_service.get_pricing("CS-1").to_dict() == single_service.get_pricing("CS-1").to_dict()


def test_result_fields_are_exclusive():
    with pytest.raises(ValueError):
        SinglePricingResult(pricing_data={}, error_message="boom")
    with pytest.raises(ValueError):
        SinglePricingResult()

"""
Bulk-Lookup Service - price lists for a batch of customer UUIDs.

One directory read resolves every UUID, and one catalog query (through
ResolutionEngine.resolve_batch) prices every complete context. Per-id
problems are itemized under errors; they never fail the batch.
"""
import logging
from typing import Iterable, Optional

from ..config.settings import Labels
from ..engine.models import BulkPricingResult, CustomerPricing, PricingContext
from ..engine.resolver import ResolutionEngine
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

ACTION_NAME = "BulkLookupService.get_pricing_bulk"


def split_ids(raw: Optional[str]) -> list[str]:
    """Split a comma-separated id parameter; blanks are dropped."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(',') if part.strip()]


def normalize_ids(external_ids: Optional[Iterable[str]]) -> list[str]:
    """Trim ids, drop blanks and repeats, keep first-seen order."""
    stripped = (str(i).strip() for i in external_ids or [] if i is not None)
    return list(dict.fromkeys(i for i in stripped if i))


class BulkLookupService:
    """
    Resolves many external ids in a single pass.

    Ids whose context is complete but which have no active entries are
    left out of the response unless report_unpriced_ids is set, in which
    case they are itemized under errors with the no_pricing label.
    """

    def __init__(
        self,
        directory,
        engine: ResolutionEngine,
        reporter: ErrorReporter,
        labels: Labels,
        report_unpriced_ids: bool = False,
        expose_fault_detail: bool = True,
    ):
        self.directory = directory
        self.engine = engine
        self.reporter = reporter
        self.labels = labels
        self.report_unpriced_ids = report_unpriced_ids
        self.expose_fault_detail = expose_fault_detail

    @classmethod
    def from_settings(cls, settings, directory, engine, reporter) -> 'BulkLookupService':
        return cls(
            directory=directory,
            engine=engine,
            reporter=reporter,
            labels=settings.labels,
            report_unpriced_ids=settings.report_unpriced_ids,
            expose_fault_detail=settings.expose_fault_detail,
        )

    def get_pricing_bulk(self, external_ids: Optional[Iterable[str]]) -> BulkPricingResult:
        """
        Get pricing for every external id.

        Returns a processed result carrying successes and itemized errors,
        an invalid-input result for an empty id list, or a fault result when
        something unexpected fails.
        """
        ids = normalize_ids(external_ids)
        if not ids:
            return BulkPricingResult.invalid_input(self.labels.invalid_ids)

        try:
            records = self.directory.find_by_external_ids(ids)

            errors: dict[str, str] = {}
            contexts: list[PricingContext] = []
            for external_id in ids:
                record = records.get(external_id)
                if record is None:
                    errors[external_id] = f"{self.labels.not_found} for UUID: {external_id}"
                    continue

                context = record.to_context(customer_key=external_id)
                if not context.is_complete:
                    errors[external_id] = f"{self.labels.missing_context} for UUID: {external_id}"
                    continue
                contexts.append(context)

            resolved = self.engine.resolve_batch(contexts)

            success_data: dict[str, CustomerPricing] = {}
            for context in contexts:
                key = context.customer_key
                pricing_data = resolved.get(key)
                if pricing_data:
                    success_data[key] = CustomerPricing(
                        contact_name=records[key].display_name,
                        pricing_data=pricing_data,
                    )
                elif self.report_unpriced_ids:
                    errors[key] = f"{self.labels.no_pricing} UUID: {key}"

            logger.info(
                "Bulk lookup: %d id(s), %d priced, %d error(s)",
                len(ids), len(success_data), len(errors)
            )
            return BulkPricingResult.processed(success_data, errors)
        except Exception as e:
            logger.exception("Bulk pricing lookup failed")
            self.reporter.report_error(str(e), ACTION_NAME)

            message = self.labels.general_error
            if self.expose_fault_detail:
                message = f"{message} Details: {e}"
            return BulkPricingResult.fault(message)

"""
Single-Lookup Service - price list for the contact behind one case reference.
"""
import logging
from typing import Optional

from ..config.settings import Labels
from ..engine.errors import ContractViolation
from ..engine.models import SinglePricingResult
from ..engine.resolver import ResolutionEngine
from .error_reporter import ErrorReporter

logger = logging.getLogger(__name__)

ACTION_NAME = "SingleLookupService.get_pricing"


class SingleLookupService:
    """
    Resolves one case reference to a price list.

    Every outcome except an empty reference comes back as a
    SinglePricingResult. Faults are reported and replaced by the generic
    error label; their detail is never shown to the caller.
    """

    def __init__(self, case_store, engine: ResolutionEngine, reporter: ErrorReporter, labels: Labels):
        self.case_store = case_store
        self.engine = engine
        self.reporter = reporter
        self.labels = labels

    def get_pricing(self, reference: Optional[str]) -> SinglePricingResult:
        """
        Get pricing for the contact attached to a case.

        Raises ContractViolation when reference is None or blank.
        """
        if reference is None or not str(reference).strip():
            raise ContractViolation("A case reference is required.")
        reference = str(reference).strip()

        try:
            customer = self.case_store.get_customer(reference)
            context = customer.to_context() if customer else None

            if context is None or not context.is_complete:
                logger.info("Case %s: contact missing or lacks product/region", reference)
                return SinglePricingResult.failure(self.labels.missing_context_message())

            pricing_data = self.engine.resolve(context.product_id, context.region_code)
            if not pricing_data:
                logger.info(
                    "Case %s: no pricing for product %s in %s",
                    reference, context.product_id, context.region_code
                )
                return SinglePricingResult.failure(self.labels.no_pricing)

            return SinglePricingResult.success(pricing_data)
        except Exception as e:
            logger.exception("Pricing lookup failed for case %s", reference)
            self.reporter.report_error(str(e), ACTION_NAME)
            return SinglePricingResult.failure(self.labels.general_error)

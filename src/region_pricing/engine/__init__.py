"""Engine subpackage - core pricing resolution logic."""
from .resolver import ResolutionEngine
from .models import (
    PriceEntry, PricingContext, PricingRow, CustomerRecord,
    SinglePricingResult, BulkPricingResult, CustomerPricing,
)
from .errors import PricingError, ContractViolation, CatalogUnavailable

__all__ = [
    'ResolutionEngine', 'PriceEntry', 'PricingContext', 'PricingRow',
    'CustomerRecord', 'SinglePricingResult', 'BulkPricingResult', 'CustomerPricing',
    'PricingError', 'ContractViolation', 'CatalogUnavailable',
]

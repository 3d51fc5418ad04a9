"""
Conditions raised by the pricing engine and lookup services.

Only raised conditions live here. Missing context, unknown customers and
unconfigured pricing are reported as response data, never raised.
"""


class PricingError(Exception):
    """Base exception"""
    pass


class ContractViolation(PricingError, ValueError):
    """A caller passed a structurally invalid argument (e.g. an empty reference)"""
    pass


class CatalogUnavailable(PricingError):
    """The catalog store query itself failed"""
    pass

"""
Data models for the pricing resolution engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Product:
    """A sellable item."""
    product_id: str
    name: str
    active: bool = True


@dataclass(frozen=True)
class PriceCatalog:
    """A named price list, scoped to one region when region_code is set."""
    catalog_id: str
    name: str
    active: bool = True
    region_code: Optional[str] = None


@dataclass(frozen=True)
class PriceEntry:
    """One product's price in one catalog, with denormalized product name and region."""
    entry_id: str
    product_id: str
    catalog_id: str
    product_name: str
    region_code: Optional[str]
    unit_price: Optional[Decimal]
    currency_code: str
    contract_length: Optional[str] = None  # e.g. "12 Months"
    atm_fee_percent: Optional[Decimal] = None
    replacement_cost: Optional[Decimal] = None
    active: bool = True


@dataclass(frozen=True)
class CustomerRecord:
    """A customer as exposed by the directory."""
    customer_id: str
    external_id: Optional[str]
    display_name: str
    product_id: Optional[str] = None
    home_region: Optional[str] = None

    def to_context(self, customer_key: Optional[str] = None) -> 'PricingContext':
        """Build the pricing context, keyed by customer_key or the record id."""
        return PricingContext(
            customer_key=customer_key or self.customer_id,
            product_id=(self.product_id or '').strip(),
            region_code=(self.home_region or '').strip(),
        )


@dataclass(frozen=True)
class PricingContext:
    """The (product, region) pair needed to resolve pricing for one customer."""
    customer_key: str
    product_id: str
    region_code: str

    @property
    def is_complete(self) -> bool:
        return bool(self.product_id) and bool(self.region_code)


@dataclass(frozen=True)
class PricingRow:
    """A single formatted line of a price list."""
    product_name: str
    cost_per_month: str
    atm_fee: str
    card_replacement_cost: str
    contract_length: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "productName": self.product_name,
            "costPerMonth": self.cost_per_month,
            "atmFee": self.atm_fee,
            "cardReplacementCost": self.card_replacement_cost,
            "contractLength": self.contract_length,
        }


# Region code -> rows, in catalog order
PricingData = dict[str, list[PricingRow]]


@dataclass
class SinglePricingResult:
    """
    Result of a single lookup.

    Exactly one of pricing_data and error_message is set; use the
    success()/failure() constructors rather than building one directly.
    """
    pricing_data: Optional[PricingData] = None
    error_message: Optional[str] = None

    def __post_init__(self):
        if (self.pricing_data is None) == (self.error_message is None):
            raise ValueError("SinglePricingResult needs exactly one of pricing_data or error_message")

    @classmethod
    def success(cls, pricing_data: PricingData) -> 'SinglePricingResult':
        return cls(pricing_data=pricing_data)

    @classmethod
    def failure(cls, message: str) -> 'SinglePricingResult':
        return cls(error_message=message)

    @property
    def ok(self) -> bool:
        return self.error_message is None

    def to_dict(self) -> dict:
        """Convert to the fixed {pricingData, errorMessage} wire shape."""
        data = None
        if self.pricing_data is not None:
            data = {
                region: [row.to_dict() for row in rows]
                for region, rows in self.pricing_data.items()
            }
        return {"pricingData": data, "errorMessage": self.error_message}


@dataclass
class CustomerPricing:
    """Successful bulk item: the customer's name plus their price rows."""
    contact_name: str
    pricing_data: PricingData


@dataclass
class BulkPricingResult:
    """Result of a bulk lookup, partitioned into successes and itemized errors."""
    success: bool
    message: str
    success_data: Optional[dict[str, CustomerPricing]] = None
    errors: Optional[dict[str, str]] = None

    PROCESSED = "Processed successfully."
    PROCESSED_WITH_ERRORS = "Processed with errors."

    @classmethod
    def processed(cls, success_data: dict[str, CustomerPricing], errors: dict[str, str]) -> 'BulkPricingResult':
        message = cls.PROCESSED_WITH_ERRORS if errors else cls.PROCESSED
        return cls(success=True, message=message, success_data=success_data, errors=errors)

    @classmethod
    def invalid_input(cls, message: str) -> 'BulkPricingResult':
        return cls(success=False, message=message, errors={"error": message})

    @classmethod
    def fault(cls, message: str) -> 'BulkPricingResult':
        return cls(success=False, message=message)

    def to_dict(self) -> dict:
        """Convert to the wire shape, omitting keys that are not populated."""
        out: dict = {"success": self.success, "message": self.message}
        if self.success_data is not None:
            out["successData"] = {
                external_id: {
                    "contactName": item.contact_name,
                    "pricingData": {
                        region: [row.to_dict() for row in rows]
                        for region, rows in item.pricing_data.items()
                    },
                }
                for external_id, item in self.success_data.items()
            }
        if self.errors is not None:
            out["errors"] = dict(self.errors)
        return out

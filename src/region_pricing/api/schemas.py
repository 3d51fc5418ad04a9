"""
Pydantic wire schemas for the pricing API.

Field names are snake_case in Python and camelCase on the wire.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class PricingRowModel(_WireModel):
    """One formatted price row."""
    product_name: str = Field(alias="productName")
    cost_per_month: str = Field(alias="costPerMonth")
    atm_fee: str = Field(alias="atmFee")
    card_replacement_cost: str = Field(alias="cardReplacementCost")
    contract_length: Optional[str] = Field(default=None, alias="contractLength")


class SinglePricingResponse(_WireModel):
    """Response for a case lookup: exactly one of the two fields is non-null."""
    pricing_data: Optional[dict[str, list[PricingRowModel]]] = Field(default=None, alias="pricingData")
    error_message: Optional[str] = Field(default=None, alias="errorMessage")


class CustomerPricingModel(_WireModel):
    """A priced customer in a bulk response."""
    contact_name: str = Field(alias="contactName")
    pricing_data: dict[str, list[PricingRowModel]] = Field(alias="pricingData")


class BulkPricingResponse(_WireModel):
    """Response for a bulk lookup; unpopulated keys are omitted."""
    success: bool
    message: str
    success_data: Optional[dict[str, CustomerPricingModel]] = Field(default=None, alias="successData")
    errors: Optional[dict[str, str]] = None

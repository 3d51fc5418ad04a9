"""
Pricing API - FastAPI router for single and bulk price lookups.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response

from ..engine.errors import ContractViolation
from ..services.bulk_lookup import BulkLookupService, split_ids
from ..services.single_lookup import SingleLookupService
from .schemas import BulkPricingResponse, SinglePricingResponse
from .state import get_bulk_lookup, get_single_lookup

router = APIRouter(prefix="/api/pricing", tags=["pricing"])


@router.get("", response_model=BulkPricingResponse, response_model_exclude_none=True)
def get_pricing_bulk(
    response: Response,
    uuids: Optional[str] = None,
    service: BulkLookupService = Depends(get_bulk_lookup),
):
    """Price lists for a comma-separated list of customer UUIDs."""
    result = service.get_pricing_bulk(split_ids(uuids))

    if not result.success:
        # Invalid input carries an errors map; a fault does not
        response.status_code = 400 if result.errors else 500

    return BulkPricingResponse.model_validate(result.to_dict())


@router.get("/cases/{case_id}", response_model=SinglePricingResponse)
def get_case_pricing(case_id: str, service: SingleLookupService = Depends(get_single_lookup)):
    """Price list for the contact attached to a case."""
    try:
        result = service.get_pricing(case_id)
    except ContractViolation as e:
        raise HTTPException(status_code=400, detail=str(e))

    return SinglePricingResponse.model_validate(result.to_dict())

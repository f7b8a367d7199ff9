"""
Pricing API Endpoints.

Maps request bodies onto the pricing service and its result dicts onto
HTTP responses: 200 when the service succeeded, 400 otherwise.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from pricing_backend.app.core.dependencies import get_pricing_service
from pricing_backend.app.domain.pricing.pricing_service import PricingService
from pricing_backend.app.schemas.pricing import (
    CalculatePriceRequest,
    CalculatePriceResponse,
    CreatePricingEntryRequest,
    CreatePricingEntryResponse,
    PricingFailureResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pricing", tags=["Pricing"])

FAILURE_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": PricingFailureResponse, "description": "Bad request"}}


def _to_response(result: dict) -> JSONResponse:
    status_code = status.HTTP_200_OK if result.get("success") is True else status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=result)


@router.post("/calculate-price", response_model=CalculatePriceResponse, responses=FAILURE_RESPONSES)
async def calculate_price(
    payload: Optional[CalculatePriceRequest] = Body(default=None),
    service: PricingService = Depends(get_pricing_service)
):
    """
    Calculate delivery costs based on distance, zone, and item type.
    """
    payload = payload or CalculatePriceRequest()
    result = await service.calculate_price(
        zone=payload.zone,
        organization_id=payload.organization_id,
        total_distance=payload.total_distance,
        item_type=payload.item_type
    )
    return _to_response(result)


@router.post("/create-entry", response_model=CreatePricingEntryResponse, responses=FAILURE_RESPONSES)
async def create_entry(
    payload: Optional[CreatePricingEntryRequest] = Body(default=None),
    service: PricingService = Depends(get_pricing_service)
):
    """
    Create or update the pricing structure for an organization, item and zone.
    """
    payload = payload or CreatePricingEntryRequest()
    result = await service.create_or_update_pricing_rule(
        organization_name=payload.organizationName,
        zone=payload.zone,
        item_type=payload.item_type,
        description=payload.description,
        base_distance_km=payload.base_distance_in_km,
        km_price=payload.km_price,
        fix_price=payload.fix_price
    )
    if result.get("success") is not True:
        return _to_response(result)

    body = {"success": True, "message": result["message"]}
    if result.get("total_price") is not None:
        body["total_price"] = result["total_price"]
    logger.debug("Pricing entry saved for %r", payload.organizationName)
    return _to_response(body)

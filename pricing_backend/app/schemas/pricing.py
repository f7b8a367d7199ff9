"""
Pricing Pydantic schemas.

Request bodies accept any JSON value per field: the pricing service owns
validation so that its error precedence decides the response.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional


class CalculatePriceRequest(BaseModel):
    """Schema for a delivery price calculation."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {"zone": "east", "organization_id": "1", "total_distance": 10, "item_type": "non-perishable"}
        }
    )

    zone: Optional[Any] = Field(None, description="The delivery zone")
    organization_id: Optional[Any] = Field(None, description="The ID of the organization, as a string")
    total_distance: Optional[Any] = Field(None, description="Total distance of the delivery in kilometers")
    item_type: Optional[Any] = Field(None, description="'perishable' or 'non-perishable'")


class CreatePricingEntryRequest(BaseModel):
    """Schema for creating or updating a pricing rule."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "organizationName": "FoodHut",
                "zone": "south",
                "item_type": "perishable",
                "description": "icecake",
                "base_distance_in_km": 5,
                "km_price": 1.5,
                "fix_price": 10
            }
        }
    )

    organizationName: Optional[Any] = Field(None, description="Name of the organization")
    zone: Optional[Any] = Field(None, description="Zone for the pricing structure")
    item_type: Optional[Any] = Field(None, description="'perishable' or 'non-perishable'")
    description: Optional[Any] = Field(None, description="Description of the food item")
    base_distance_in_km: Optional[Any] = Field(None, description="Distance included in the fixed price, in km")
    km_price: Optional[Any] = Field(None, description="Price per extra km for perishable items")
    fix_price: Optional[Any] = Field(None, description="Fixed price")


class CalculatePriceResponse(BaseModel):
    """Successful price calculation."""
    success: bool = True
    total_price: str = Field(..., examples=["20.50"])


class CreatePricingEntryResponse(BaseModel):
    """Successful pricing rule registration."""
    success: bool = True
    message: str = Field(..., examples=["Pricing structure created successfully"])
    total_price: Optional[str] = None


class PricingFailureResponse(BaseModel):
    """Failure body shared by all pricing endpoints."""
    success: bool = False
    error: str = Field(..., examples=["Missing required input data"])
    message: str = Field("Bad request", examples=["Bad request"])

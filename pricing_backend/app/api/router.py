"""
API Router.

Aggregates all API endpoints.
"""

from fastapi import APIRouter
from pricing_backend.app.api.endpoints import pricing

router = APIRouter()

# Delivery pricing endpoints
router.include_router(pricing.router)

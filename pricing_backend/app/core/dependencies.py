"""
Service dependencies for FastAPI.

Wires the pricing service to the process-wide session factory. Tests
override get_pricing_service to point it at their own database.
"""

from pricing_backend.app.db.session import AsyncSessionLocal
from pricing_backend.app.domain.pricing.pricing_service import PricingService


def get_pricing_service() -> PricingService:
    """FastAPI dependency returning a PricingService bound to the application database."""
    return PricingService(AsyncSessionLocal)

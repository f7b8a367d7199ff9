"""
Database seeding script for sample pricing rules.

Registers a handful of organizations, items and zones through the
pricing service, so seeding follows the same create-or-update rules as
the API. Safe to run repeatedly.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pricing_backend.app.db.session import AsyncSessionLocal, engine, Base
from pricing_backend.app.domain.pricing.pricing_service import PricingService

SAMPLE_RULES = [
    # organization, zone, item type, description, base km, km price, fix price
    ("FoodHut", "south", "perishable", "icecake", 5, 1.5, 10),
    ("FoodHut", "east", "non-perishable", "biscuits", 5, 1, 10),
    ("GreenBowl", "central", "perishable", "salad", 3, 2, 8),
    ("GreenBowl", "central", "non-perishable", "granola", 3, 1, 6),
]


async def seed_pricing():
    """Create tables if needed and register SAMPLE_RULES."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    service = PricingService(AsyncSessionLocal)
    print("🌱 Starting pricing seeding...")

    failures = 0
    for organization, zone, item_type, description, base_km, km_price, fix_price in SAMPLE_RULES:
        result = await service.create_or_update_pricing_rule(
            organization, zone, item_type, description, base_km, km_price, fix_price
        )
        if result["success"]:
            print(f"✅ {organization} / {zone} / {item_type} ({description})")
        else:
            failures += 1
            print(f"❌ {organization} / {zone} / {item_type}: {result['error']}")

    await engine.dispose()
    print(f"Done: {len(SAMPLE_RULES) - failures} saved, {failures} failed")
    return failures == 0


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(seed_pricing()) else 1)

"""
Pricing Entity Store.

Lookup and write operations for organizations, items and pricing rules,
bound to one AsyncSession. The store never commits: transaction
boundaries belong to the caller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from pricing_backend.app.models.organization import Organization
from pricing_backend.app.models.item import Item
from pricing_backend.app.models.pricing_rule import PricingRule
from pricing_backend.app.models.enums import ItemType


def parse_organization_id(organization_id) -> Optional[int]:
    """Organization ids travel as strings; anything not an integer cannot match a row."""
    if isinstance(organization_id, bool):
        return None
    if isinstance(organization_id, int):
        return organization_id
    try:
        return int(str(organization_id).strip())
    except ValueError:
        return None


class PricingStore:

    def __init__(self, db: AsyncSession):
        self.db = db

    # Organizations

    async def find_organization_by_id(self, organization_id) -> Optional[Organization]:
        key = parse_organization_id(organization_id)
        if key is None:
            return None
        return await self.db.get(Organization, key)

    async def find_organization_by_name(self, name: str) -> Optional[Organization]:
        result = await self.db.execute(
            select(Organization).where(Organization.name == name).limit(1)
        )
        return result.scalar_one_or_none()

    async def create_organization(self, name: str) -> Organization:
        organization = Organization(name=name)
        self.db.add(organization)
        await self.db.flush()  # To get organization.id
        return organization

    # Items

    async def find_item_by_type(self, item_type: str) -> Optional[Item]:
        """
        Return one item of the given type.

        No ordering is applied: with several descriptions per type the
        database decides which row comes back.
        """
        result = await self.db.execute(
            select(Item).where(Item.type == ItemType(item_type)).limit(1)
        )
        return result.scalar_one_or_none()

    async def find_item_by_type_and_description(self, item_type: str, description: str) -> Optional[Item]:
        result = await self.db.execute(
            select(Item).where(
                Item.type == ItemType(item_type),
                Item.description == description
            ).limit(1)
        )
        return result.scalar_one_or_none()

    async def create_item(self, item_type: str, description: str) -> Item:
        item = Item(type=ItemType(item_type), description=description)
        self.db.add(item)
        await self.db.flush()
        return item

    # Pricing rules

    async def find_pricing_rule(self, organization_id: int, item_id: int, zone: str) -> Optional[PricingRule]:
        result = await self.db.execute(
            select(PricingRule).where(
                PricingRule.organization_id == organization_id,
                PricingRule.item_id == item_id,
                PricingRule.zone == zone
            )
        )
        return result.scalar_one_or_none()

    async def create_pricing_rule(
        self,
        organization_id: int,
        item_id: int,
        zone: str,
        base_distance_in_km: float,
        km_price: float,
        fix_price: float
    ) -> PricingRule:
        """
        Insert a new rule.

        Raises:
            IntegrityError: If a rule for (organization, item, zone) already exists
        """
        rule = PricingRule(
            organization_id=organization_id,
            item_id=item_id,
            zone=zone,
            base_distance_in_km=base_distance_in_km,
            km_price=km_price,
            fix_price=fix_price
        )
        self.db.add(rule)
        await self.db.flush()  # Will raise IntegrityError if unique constraint violated
        return rule

    async def update_pricing_rule(
        self,
        rule: PricingRule,
        base_distance_in_km: float,
        km_price: float,
        fix_price: float
    ) -> PricingRule:
        rule.base_distance_in_km = base_distance_in_km
        rule.km_price = km_price
        rule.fix_price = fix_price
        await self.db.flush()
        return rule

"""
Pricing Service (Domain Logic).

Validates pricing requests, resolves organizations, items and rules,
and runs the create-or-update of a pricing rule as one transaction.

Both operations return plain result dicts and never raise: every
failure becomes {"success": False, "error": ..., "message": "Bad request"}.
"""

import logging
import math
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pricing_backend.app.core.config import settings
from pricing_backend.app.core.exceptions import (
    PricingError,
    MissingInputError,
    InvalidDistanceError,
    InvalidNumericValuesError,
    InvalidItemTypeError,
    OrganizationNotFoundError,
    ItemNotFoundError,
    PricingNotFoundError,
    failure_payload,
)
from pricing_backend.app.domain.pricing.calculator import compute_total, format_price
from pricing_backend.app.domain.pricing.pricing_store import PricingStore
from pricing_backend.app.models.enums import ItemType
from pricing_backend.app.services.audit import log_event, AuditAction

logger = logging.getLogger(__name__)

RULE_SAVED_MESSAGE = "Pricing structure created successfully"
STORE_FAILURE_MESSAGE = "Unable to process pricing request"


def is_missing(value: Any) -> bool:
    """None, False, empty string, zero and NaN all count as missing."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


def parse_number(value: Any) -> Optional[float]:
    """Return value as a float, or None when it is not a number."""
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        elif isinstance(value, str):
            number = float(value.strip())
        else:
            return None
    except (ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


class PricingService:

    def __init__(self, session_factory: async_sessionmaker, upsert_max_attempts: Optional[int] = None):
        self._session_factory = session_factory
        self._upsert_max_attempts = max(1, upsert_max_attempts or settings.upsert_max_attempts)

    async def calculate_price(self, zone: Any, organization_id: Any, total_distance: Any, item_type: Any) -> dict:
        """
        Calculate the delivery fee for a trip.

        Flow:
        1. Required inputs present
        2. Distance numeric, organization id a string
        3. Organization lookup; item type checked before reporting a missing organization
        4. Item lookup by type
        5. Rule lookup by (organization, item, zone)
        6. Compute total

        Returns:
            {"success": True, "total_price": "<2 decimals>"} or a failure dict
        """
        try:
            if any(is_missing(value) for value in (zone, organization_id, total_distance, item_type)):
                raise MissingInputError()

            distance = parse_number(total_distance)
            if distance is None or math.isinf(distance) or not isinstance(organization_id, str):
                raise InvalidDistanceError()

            async with self._session_factory() as db:
                store = PricingStore(db)

                organization = await store.find_organization_by_id(organization_id)

                if not ItemType.is_valid(item_type):
                    raise InvalidItemTypeError()

                if organization is None:
                    raise OrganizationNotFoundError(details={"organization_id": organization_id})

                item = await store.find_item_by_type(item_type)
                if item is None:
                    raise ItemNotFoundError(details={"item_type": item_type})

                rule = await store.find_pricing_rule(organization.id, item.id, str(zone))
                if rule is None:
                    raise PricingNotFoundError()

                total = compute_total(rule, distance, item_type)

            return {"success": True, "total_price": format_price(total)}

        except PricingError as exc:
            logger.warning("Price calculation rejected: %s", exc.message)
            return failure_payload(exc.message)
        except Exception:
            logger.exception("Price calculation failed for organization %r zone %r", organization_id, zone)
            return failure_payload(STORE_FAILURE_MESSAGE)

    async def create_or_update_pricing_rule(
        self,
        organization_name: Any,
        zone: Any,
        item_type: Any,
        description: Any,
        base_distance_km: Any,
        km_price: Any,
        fix_price: Any
    ) -> dict:
        """
        Register the pricing rule for an organization, item and zone.

        Organization and item are found or created by name and by
        (type, description); an existing rule for the same key has its
        three rates overwritten. All writes share one transaction and a
        failure at any step leaves nothing behind.

        Returns:
            {"success": True, "message": "..."} or a failure dict
        """
        try:
            required = (zone, organization_name, item_type, description, base_distance_km, km_price, fix_price)
            if any(is_missing(value) for value in required):
                raise MissingInputError()

            rates = [parse_number(value) for value in (base_distance_km, km_price, fix_price)]
            if any(rate is None or rate < 0 or math.isinf(rate) for rate in rates):
                raise InvalidNumericValuesError()

            if not ItemType.is_valid(item_type):
                raise InvalidItemTypeError()

            base_distance, per_km, fixed = rates
            for attempt in range(1, self._upsert_max_attempts + 1):
                try:
                    rule_id, created = await self._upsert_rule(
                        organization_name=str(organization_name),
                        zone=str(zone),
                        item_type=ItemType(item_type),
                        description=str(description),
                        base_distance_in_km=base_distance,
                        km_price=per_km,
                        fix_price=fixed
                    )
                    break
                except IntegrityError:
                    # Another request inserted the same rule between our find and insert
                    if attempt == self._upsert_max_attempts:
                        raise
                    logger.warning(
                        "Pricing rule conflict for %r/%r/%r, retrying (attempt %d)",
                        organization_name, item_type, zone, attempt
                    )

            logger.info("Pricing rule %s %s", rule_id, "created" if created else "updated")
            return {"success": True, "message": RULE_SAVED_MESSAGE}

        except PricingError as exc:
            logger.warning("Pricing rule rejected: %s", exc.message)
            return failure_payload(exc.message)
        except Exception:
            logger.exception("Pricing rule write failed for organization %r zone %r", organization_name, zone)
            return failure_payload(STORE_FAILURE_MESSAGE)

    async def _upsert_rule(
        self,
        organization_name: str,
        zone: str,
        item_type: ItemType,
        description: str,
        base_distance_in_km: float,
        km_price: float,
        fix_price: float
    ) -> tuple[int, bool]:
        """Run find-or-create + find-or-update in one transaction. Returns (rule id, created)."""
        async with self._session_factory() as db:
            async with db.begin():
                store = PricingStore(db)

                organization = await store.find_organization_by_name(organization_name)
                if organization is None:
                    organization = await store.create_organization(organization_name)
                    await self._audit(db, AuditAction.ORGANIZATION_CREATED, "organization", organization.id, {"name": organization_name})

                item = await store.find_item_by_type_and_description(item_type, description)
                if item is None:
                    item = await store.create_item(item_type, description)
                    await self._audit(db, AuditAction.ITEM_CREATED, "item", item.id, {"type": item_type.value, "description": description})

                rates = {
                    "base_distance_in_km": base_distance_in_km,
                    "km_price": km_price,
                    "fix_price": fix_price
                }
                rule = await store.find_pricing_rule(organization.id, item.id, zone)
                if rule is not None:
                    rule = await store.update_pricing_rule(rule, **rates)
                    created = False
                else:
                    rule = await store.create_pricing_rule(organization.id, item.id, zone, **rates)
                    created = True

                await self._audit(
                    db,
                    AuditAction.PRICING_RULE_CREATED if created else AuditAction.PRICING_RULE_UPDATED,
                    "pricing_rule",
                    rule.id,
                    {"organization_id": organization.id, "item_id": item.id, "zone": zone, **rates}
                )
                return rule.id, created

    @staticmethod
    async def _audit(db: AsyncSession, action: str, entity_type: str, entity_id: int, metadata: dict) -> None:
        await log_event(db=db, action=action, entity_type=entity_type, entity_id=entity_id, metadata=metadata)

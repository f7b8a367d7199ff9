"""
Delivery Fee Calculator.

Pure price computation from a resolved pricing rule and trip parameters.
Amounts are handled in minor currency units (cents) as Decimals so that
float rates stored on the rule do not accumulate binary rounding error.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Protocol, Union

from pricing_backend.app.models.enums import ItemType

MINOR_UNITS = Decimal("100")
PRICE_QUANTIZER = Decimal("0.01")

# Non-perishable items pay a flat rate per extra km, whatever the rule says
NON_PERISHABLE_KM_PRICE = Decimal("1")

Number = Union[int, float, Decimal, str]


class RateCard(Protocol):
    base_distance_in_km: float
    km_price: float
    fix_price: float


def to_decimal(value: Number) -> Decimal:
    """Convert via the string form so 1.1 becomes Decimal('1.1'), not its binary expansion."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def extra_km_price(rule: RateCard, item_type: Union[ItemType, str]) -> Decimal:
    """Per-km rate charged beyond the base distance."""
    if ItemType(item_type) is ItemType.PERISHABLE:
        return to_decimal(rule.km_price)
    return NON_PERISHABLE_KM_PRICE


def compute_total(rule: RateCard, total_distance_km: Number, item_type: Union[ItemType, str]) -> Decimal:
    """
    Compute the delivery total for a trip.

    total = fix_price + extra_distance * rate, where
    extra_distance = total_distance_km - base_distance_in_km and the extra
    charge only applies when extra_distance is positive.

    Args:
        rule: Resolved pricing rule
        total_distance_km: Trip distance in kilometers
        item_type: perishable or non-perishable

    Returns:
        Total rounded half-up to two decimals
    """
    price_minor = to_decimal(rule.fix_price) * MINOR_UNITS
    extra_distance = to_decimal(total_distance_km) - to_decimal(rule.base_distance_in_km)

    if extra_distance > 0:
        price_minor += extra_distance * extra_km_price(rule, item_type) * MINOR_UNITS

    return (price_minor / MINOR_UNITS).quantize(PRICE_QUANTIZER, rounding=ROUND_HALF_UP)


def format_price(amount: Decimal) -> str:
    """Render an amount with exactly two decimal digits."""
    return format(amount.quantize(PRICE_QUANTIZER, rounding=ROUND_HALF_UP), "f")

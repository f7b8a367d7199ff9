"""
Item type enumeration.

Defines the item classifications that drive extra-distance billing.
"""

import enum


class ItemType(str, enum.Enum):
    """
    Item type enumeration.

    Types:
        PERISHABLE: Billed at the rule's km_price beyond the base distance
        NON_PERISHABLE: Billed at a flat 1 unit per km beyond the base distance
    """
    PERISHABLE = "perishable"
    NON_PERISHABLE = "non-perishable"

    @classmethod
    def is_valid(cls, value) -> bool:
        return isinstance(value, str) and value in {member.value for member in cls}

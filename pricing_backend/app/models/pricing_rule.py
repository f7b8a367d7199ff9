"""
Pricing Rule database model.

Defines the delivery fee parameters for one organization, item and zone.
"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from pricing_backend.app.db.session import Base


class PricingRule(Base):
    """
    Pricing Rule model.

    total = fix_price + max(0, distance - base_distance_in_km) * per-km rate,
    where the per-km rate is km_price for perishable items and 1 otherwise.
    """
    __tablename__ = "pricing_rules"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Lookup key
    organization_id = Column(Integer, ForeignKey('organizations.id'), nullable=False, index=True)
    item_id = Column(Integer, ForeignKey('items.id'), nullable=False, index=True)
    zone = Column(String(100), nullable=False)

    # Rates
    base_distance_in_km = Column(Float, nullable=False)  # Distance covered by fix_price
    km_price = Column(Float, nullable=False)  # Cost per extra kilometer (perishable)
    fix_price = Column(Float, nullable=False)  # Flat fee

    organization = relationship("Organization", back_populates="pricing_rules")
    item = relationship("Item", back_populates="pricing_rules")

    # At most one rule per (organization, item, zone)
    __table_args__ = (
        UniqueConstraint('organization_id', 'item_id', 'zone', name='uq_pricing_rules_org_item_zone'),
    )

    def __repr__(self):
        return (
            f"<PricingRule(id={self.id}, org={self.organization_id}, item={self.item_id}, "
            f"zone='{self.zone}', base_km={self.base_distance_in_km}, km_price={self.km_price}, "
            f"fix_price={self.fix_price})>"
        )

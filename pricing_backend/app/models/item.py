"""
Item database model.

An item is identified by its (type, description) pair when rules are
registered, but price calculation looks items up by type alone.
"""

from sqlalchemy import Column, Integer, String, Enum
from sqlalchemy.orm import relationship
from pricing_backend.app.db.session import Base
from pricing_backend.app.models.enums import ItemType


class Item(Base):
    """Deliverable item classification."""
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Stored by value ("perishable" / "non-perishable")
    type = Column(
        Enum(ItemType, name="item_type", values_callable=lambda enum_cls: [member.value for member in enum_cls]),
        nullable=False,
        index=True
    )
    description = Column(String(255), nullable=False)

    pricing_rules = relationship("PricingRule", back_populates="item")

    def __repr__(self):
        return f"<Item(id={self.id}, type='{self.type.value}', description='{self.description}')>"

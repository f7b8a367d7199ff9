"""
Organization database model.

Organizations are created on first reference by name when a pricing
rule is registered. Names are matched exactly and are not unique.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from pricing_backend.app.db.session import Base


class Organization(Base):
    """A food business that owns pricing rules."""
    __tablename__ = "organizations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)

    pricing_rules = relationship("PricingRule", back_populates="organization")

    def __repr__(self):
        return f"<Organization(id={self.id}, name='{self.name}')>"

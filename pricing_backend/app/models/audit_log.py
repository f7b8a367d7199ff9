"""
Audit Log Database Model.

Tracks writes made to organizations, items and pricing rules.
"""

from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.sql import func
from pricing_backend.app.db.session import Base


class AuditLog(Base):
    """
    Audit log model for tracking pricing catalogue changes.

    Events logged:
    - ORGANIZATION_CREATED
    - ITEM_CREATED
    - PRICING_RULE_CREATED / PRICING_RULE_UPDATED
    """
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # What action was performed
    action = Column(String(100), nullable=False, index=True)

    # Which record was touched
    entity_type = Column(String(50), nullable=False)
    entity_id = Column(Integer, nullable=True, index=True)

    # Additional context (JSON for flexibility)
    meta_data = Column(JSON, nullable=True)

    # Timestamp
    timestamp = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<AuditLog(id={self.id}, action='{self.action}', entity={self.entity_type}:{self.entity_id})>"

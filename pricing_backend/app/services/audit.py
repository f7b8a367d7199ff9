"""
Audit logging service for tracking pricing catalogue changes.

Audit records are written inside the caller's transaction, so they are
committed or rolled back together with the change they describe.
"""

from typing import Optional, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc
from pricing_backend.app.models.audit_log import AuditLog


# Audit event constants
class AuditAction:
    """Standardized audit action constants."""
    ORGANIZATION_CREATED = "ORGANIZATION_CREATED"
    ITEM_CREATED = "ITEM_CREATED"
    PRICING_RULE_CREATED = "PRICING_RULE_CREATED"
    PRICING_RULE_UPDATED = "PRICING_RULE_UPDATED"


async def log_event(
    db: AsyncSession,
    action: str,
    entity_type: str,
    entity_id: Optional[int] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> AuditLog:
    """
    Record an audit event in the current transaction.

    Args:
        db: Database session with an open transaction
        action: Action being performed (use AuditAction constants)
        entity_type: Table-level name of the touched record
        entity_id: Primary key of the touched record
        metadata: Additional context as JSON

    Returns:
        Pending AuditLog instance (flushed, not committed)
    """
    audit_log = AuditLog(
        action=action,
        entity_type=entity_type,
        entity_id=entity_id,
        meta_data=metadata
    )

    db.add(audit_log)
    await db.flush()

    return audit_log


async def get_audit_trail(
    db: AsyncSession,
    entity_type: Optional[str] = None,
    action: Optional[str] = None,
    entity_id: Optional[int] = None,
    limit: int = 100
) -> list[AuditLog]:
    """
    Catalogue changes, newest first, optionally narrowed to one record
    (entity_type + entity_id) or one kind of change.
    """
    query = select(AuditLog).order_by(desc(AuditLog.timestamp), desc(AuditLog.id))

    if entity_type:
        query = query.where(AuditLog.entity_type == entity_type)

    if action:
        query = query.where(AuditLog.action == action)

    if entity_id is not None:
        query = query.where(AuditLog.entity_id == entity_id)

    query = query.limit(limit)

    result = await db.execute(query)
    return list(result.scalars().all())

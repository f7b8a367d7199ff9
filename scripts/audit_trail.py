"""
Print recent pricing catalogue changes.

Usage:
    python scripts/audit_trail.py [--entity-type pricing_rule] [--entity-id 3]
                                  [--action PRICING_RULE_UPDATED] [--limit 20]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pricing_backend.app.db.session import AsyncSessionLocal, engine
from pricing_backend.app.models.audit_log import AuditLog
from pricing_backend.app.services.audit import get_audit_trail


def format_entry(entry: AuditLog) -> str:
    timestamp = entry.timestamp.isoformat() if entry.timestamp else "-"
    target = f"{entry.entity_type}:{entry.entity_id}" if entry.entity_id is not None else entry.entity_type
    details = ", ".join(f"{key}={value}" for key, value in (entry.meta_data or {}).items())
    return f"{timestamp}  {entry.action:<22} {target:<18} {details}".rstrip()


async def show_trail(session_factory, entity_type=None, entity_id=None, action=None, limit=20) -> list[str]:
    async with session_factory() as db:
        entries = await get_audit_trail(
            db, entity_type=entity_type, action=action, entity_id=entity_id, limit=limit
        )
    return [format_entry(entry) for entry in entries]


async def main(args) -> None:
    try:
        lines = await show_trail(
            AsyncSessionLocal,
            entity_type=args.entity_type,
            entity_id=args.entity_id,
            action=args.action,
            limit=args.limit,
        )
    finally:
        await engine.dispose()

    if not lines:
        print("No audit entries found.")
    for line in lines:
        print(line)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show recent pricing catalogue changes")
    parser.add_argument("--entity-type", help="organization, item or pricing_rule")
    parser.add_argument("--entity-id", type=int)
    parser.add_argument("--action", help="e.g. PRICING_RULE_UPDATED")
    parser.add_argument("--limit", type=int, default=20)
    asyncio.run(main(parser.parse_args()))

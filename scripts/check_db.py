"""
Database connectivity check.

Opens one connection with the configured DATABASE_URL and runs SELECT 1.
Exit code 0 on success, 1 on failure.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import text
from pricing_backend.app.core.config import settings
from pricing_backend.app.db.session import engine


async def check_db() -> bool:
    print(f"Testing connection to: {engine.url.render_as_string(hide_password=True)}")
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        print("✅ Connection has been established successfully.")
        return True
    except Exception as e:
        print(f"❌ Unable to connect to the database: {e}")
        return False
    finally:
        await engine.dispose()


if __name__ == "__main__":
    ok = asyncio.run(check_db())
    sys.exit(0 if ok else 1)

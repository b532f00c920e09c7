"""Add the member_since column to an existing users table. Safe to run repeatedly.

Usage: python scripts/migrate_db.py
"""
import asyncio
import logging
import os
import sys

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.logging import setup_logging
from app.db.maintenance import add_member_since_column
from app.db.session import engine

logger = logging.getLogger("migrate_db")


async def migrate_db() -> None:
    async with engine.begin() as conn:
        await add_member_since_column(conn)
    await engine.dispose()
    logger.info("Database connection closed.")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(migrate_db())

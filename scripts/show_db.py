"""Print the contents of the users and posts tables.

Usage: python scripts/show_db.py
"""
import asyncio
import os
import sys

# Add project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.db.maintenance import dump_tables
from app.db.session import engine


async def show_db() -> None:
    print(f"Opening database: {settings.DATABASE_URL}")
    async with engine.connect() as conn:
        dump = await dump_tables(conn)
    await engine.dispose()

    for table, rows in dump.items():
        if rows is None:
            print(f"{table.capitalize()} table does not exist.")
            continue
        print(f"{table.capitalize()} table exists.")
        if not rows:
            print(f"No {table} found.")
            continue
        print(f"{table.capitalize()}:")
        for row in rows:
            print(f"  {row}")


if __name__ == "__main__":
    asyncio.run(show_db())

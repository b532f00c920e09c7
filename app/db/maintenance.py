"""Schema patching and table inspection for existing database files."""
import logging

from sqlalchemy import inspect, text
from sqlalchemy.exc import OperationalError, ProgrammingError
from sqlalchemy.ext.asyncio import AsyncConnection

logger = logging.getLogger(__name__)

TABLES = ("users", "posts")

# SQLite and PostgreSQL wording for an existing column
_DUPLICATE_COLUMN_MARKERS = ("duplicate column name", "already exists")


async def add_member_since_column(conn: AsyncConnection) -> bool:
    """Add ``users.member_since`` if missing. Returns False when it was already there."""
    try:
        await conn.execute(text("ALTER TABLE users ADD COLUMN member_since DATETIME"))
    except (OperationalError, ProgrammingError) as e:
        message = str(e.orig).lower()
        if not any(marker in message for marker in _DUPLICATE_COLUMN_MARKERS):
            raise
        logger.info("member_since column already present on users table")
        return False
    logger.info("member_since column added to users table")
    return True


async def dump_tables(conn: AsyncConnection) -> dict[str, list[dict] | None]:
    """Every row of users and posts; None for a table that does not exist."""
    existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    dump: dict[str, list[dict] | None] = {}
    for table in TABLES:
        if table not in existing:
            dump[table] = None
            continue
        result = await conn.execute(text(f"SELECT * FROM {table}"))
        dump[table] = [dict(row) for row in result.mappings().all()]
    return dump

import asyncio

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from app.db.maintenance import add_member_since_column, dump_tables


def _on_db(path, fn):
    async def go():
        engine = create_async_engine(f"sqlite+aiosqlite:///{path.as_posix()}", poolclass=NullPool)
        try:
            async with engine.begin() as conn:
                return await fn(conn)
        finally:
            await engine.dispose()

    return asyncio.run(go())


async def _legacy_schema(conn):
    await conn.execute(text("CREATE TABLE users (id INTEGER PRIMARY KEY AUTOINCREMENT, username TEXT)"))
    await conn.execute(text("INSERT INTO users (username) VALUES ('SampleUser')"))


async def _user_columns(conn):
    return await conn.run_sync(lambda c: [col["name"] for col in inspect(c).get_columns("users")])


def test_add_member_since_is_idempotent(tmp_path):
    db_path = tmp_path / "legacy.db"
    _on_db(db_path, _legacy_schema)

    assert _on_db(db_path, add_member_since_column) is True
    assert _on_db(db_path, add_member_since_column) is False
    assert _on_db(db_path, _user_columns) == ["id", "username", "member_since"]


def test_dump_tables_reports_missing_tables(tmp_path):
    assert _on_db(tmp_path / "empty.db", dump_tables) == {"users": None, "posts": None}


def test_dump_tables_returns_rows(tmp_path):
    db_path = tmp_path / "legacy.db"
    _on_db(db_path, _legacy_schema)

    dump = _on_db(db_path, dump_tables)
    assert dump["users"] == [{"id": 1, "username": "SampleUser"}]
    assert dump["posts"] is None

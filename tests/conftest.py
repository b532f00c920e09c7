"""Shared fixtures: the app runs against a throwaway SQLite file."""
import asyncio
import os
import tempfile
from pathlib import Path

_TMP_DIR = Path(tempfile.mkdtemp(prefix="microblog-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{(_TMP_DIR / 'test.db').as_posix()}"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from app.db.base import Base
from app.db.session import async_session_maker, engine
from app.main import app
from app.models.post import Post
from app.models.user import User


def run(coro):
    return asyncio.run(coro)


async def _reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def _all_users() -> list[User]:
    async with async_session_maker() as db:
        result = await db.execute(select(User).order_by(User.id))
        return list(result.scalars().all())


async def _all_posts() -> list[Post]:
    async with async_session_maker() as db:
        result = await db.execute(select(Post).order_by(Post.id).options(selectinload(Post.user)))
        return list(result.scalars().all())


def all_users() -> list[User]:
    return run(_all_users())


def all_posts() -> list[Post]:
    return run(_all_posts())


def register(client: TestClient, username: str):
    return client.post("/register", data={"username": username}, follow_redirects=False)


def login(client: TestClient, username: str):
    return client.post("/login", data={"username": username}, follow_redirects=False)


def signed_in(username: str) -> TestClient:
    """A fresh client (own cookie jar) registered and logged in as ``username``."""
    c = TestClient(app)
    register(c, username)
    login(c, username)
    return c


@pytest.fixture(autouse=True)
def reset_db():
    run(_reset_schema())
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def alice() -> TestClient:
    return signed_in("alice")


@pytest.fixture
def bob() -> TestClient:
    return signed_in("bob")
